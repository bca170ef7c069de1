"""Worked examples: an exponential moving average and a simple rule strategy."""

from datetime import datetime, timedelta, timezone

from techan.averages import EMAIndicator
from techan.basic import ClosePriceIndicator, ConstantIndicator
from techan.candle import Candle
from techan.rules import AndRule, PositionNewRule, PositionOpenRule, cross_down_rule, cross_up_rule
from techan.strategy import RuleStrategy
from techan.timeperiod import new_time_period
from techan.timeseries import TimeSeries
from techan.tradingrecord import TradingRecord

# Timestamp, open, close, high, low, volume; fetch real data from an exchange.
_DATASET = (("1234567", "1", "2", "3", "5", "6"),)


def basic_ema():
    """Return a 10-period EMA of the close prices of a small series."""
    series = TimeSeries()
    for timestamp, open_price, close_price, high, low, _volume in _DATASET:
        start = datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
        candle = Candle(
            new_time_period(start, timedelta(hours=24)),
            open_price=open_price,
            close_price=close_price,
            max_price=high,
            min_price=low,
        )
        series.add_candle(candle)

    return EMAIndicator(ClosePriceIndicator(series), 10)


def strategy_example():
    """Build a strategy that enters above 30 and exits below 10; return whether to enter at 0."""
    indicator = basic_ema()
    record = TradingRecord()

    entry_constant = ConstantIndicator(30)
    exit_constant = ConstantIndicator(10)

    entry_rule = AndRule(cross_up_rule(entry_constant, indicator), PositionNewRule())
    exit_rule = AndRule(cross_down_rule(indicator, exit_constant), PositionOpenRule())

    strategy = RuleStrategy(entry_rule=entry_rule, exit_rule=exit_rule, unstable_period=10)
    return strategy.should_enter(0, record)