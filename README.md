# techan

A technical analysis toolkit for Python. You build a `TimeSeries` out of
`Candle`s and put indicators over it. You then combine rules into a strategy
and measure the trades in a `TradingRecord` with analyses.

Prices, amounts and indicator values are `Decimal`s. Candles and orders accept
ints, floats or strings and convert them with `techan.numeric.to_decimal`.
Floats are converted through their shortest text form, so `0.1` becomes
`Decimal("0.1")`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building a time series

```python
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from techan.candle import Candle
from techan.timeperiod import new_time_period
from techan.timeseries import TimeSeries

series = TimeSeries()
start = datetime(2024, 1, 1, tzinfo=timezone.utc)
for day, close in enumerate(["10", "11", "12.5", "12", "13"]):
    candle = Candle(new_time_period(start + timedelta(days=day), timedelta(days=1)))
    candle.add_trade(Decimal("1"), Decimal(close))
    series.add_candle(candle)
```

`Candle.add_trade` updates the open, close, high and low prices, the volume and
the trade count. `TimeSeries.add_candle` appends a candle only when its period
starts at or after the end of the last candle's period. It returns `True` when
the candle was added and `False` when it was not. Passing `None` raises
`ValueError`. `last_candle()` and `last_index()` give the end of the series.

## Indicators

Every indicator subclasses `techan.indicator.Indicator`. Its
`calculate(index)` method returns the value at that index of the series.
Indicators take other indicators as their input, so they can be chained:

```python
from techan.basic import ClosePriceIndicator
from techan.averages import SimpleMovingAverage, EMAIndicator, macd

close = ClosePriceIndicator(series)
sma = SimpleMovingAverage(close, 3)
ema = EMAIndicator(close, 3)
signal = macd(close, 12, 26)

print(sma.calculate(4), ema.calculate(4))
```

Most windowed indicators return zero until their window has filled.
`EMAIndicator` and `MMAIndicator` build on `CachedIndicator`. They start from
the simple moving average and cache each value as it is computed.

The modules are:

- `techan.basic`: `VolumeIndicator`, `OpenPriceIndicator`,
  `ClosePriceIndicator`, `HighPriceIndicator`, `LowPriceIndicator`,
  `TypicalPriceIndicator`, `ConstantIndicator`, `FixedIndicator`,
  `DerivativeIndicator` and `DifferenceIndicator`.
- `techan.averages`:
  - `SimpleMovingAverage`, `EMAIndicator` and `MMAIndicator`.
  - `macd` and `macd_histogram`.
  - `gain_indicator` and `loss_indicator`.
  - `cumulative_gains`, `cumulative_losses`, `average_gains` and
    `average_losses`.
  - `PercentChangeIndicator`.
- `techan.dispersion`: `VarianceIndicator`, `StandardDeviationIndicator`,
  `WindowedStandardDeviationIndicator`, `MeanDeviationIndicator`,
  `MinimumValueIndicator`, `MaximumValueIndicator`, `MaximumDrawdownIndicator`
  and `TrendlineIndicator`. For the minimum, maximum and drawdown indicators, a
  window of `-1` covers every value up to the index.
- `techan.volatility`: `TrueRangeIndicator`, `AverageTrueRangeIndicator`,
  `bollinger_upper_band`, `bollinger_lower_band`, `keltner_channel_upper`,
  `keltner_channel_lower` and `CCIIndicator`.
- `techan.oscillators`: `aroon_up`, `aroon_down`, `RelativeStrengthIndicator`,
  `RelativeStrengthIndexIndicator`, `RelativeVigorIndexIndicator`,
  `RelativeVigorSignalLine`, `FastStochasticIndicator` and
  `SlowStochasticIndicator`. Relative strength and fast stochastic return
  `Decimal("Infinity")` when their denominator is zero.
- `techan.squeeze`:
  - `SqueezeMomentumValueIndicator` and `SqueezeMomentumTypeIndicator`.
  - The type indicator's values are `SQZ_ON` (-1), `SQZ_OFF` (1) and
    `NO_SQZ` (0).
  - `is_sqz_on`, `is_sqz_off`, `is_no_sqz` and `sqz_type_string` classify
    those values.
  - `least_squares` is the straight-line fit it uses.

## Orders, positions and trading records

An `Order` (`techan.order`) has a side (`OrderSide.BUY` or `OrderSide.SELL`), a
security, a price, an amount and an execution time.

A `Position` holds an entrance order and an exit order. It is new when it has
neither, open when it has only an entrance order, and closed when it has both.
`cost_basis()` and `exit_value()` give its value at entry and at exit.

`TradingRecord.operate(order)` applies an order as follows:

- If the current position is new, the order enters it.
- If the current position is open, the order exits it and the position is moved
  to `trades`.
- An order executed earlier than the entrance of the open position is ignored.
- An order executed earlier than the last trade's exit is ignored.

## Rules and strategies

`techan.rules` provides the following rules. Each has an
`is_satisfied(index, record)` method.

- `AndRule` and `OrRule`.
- `OverIndicatorRule` and `UnderIndicatorRule`.
- `PercentChangeRule`.
- `cross_up_rule` and `cross_down_rule`.
- `IncreaseRule` and `DecreaseRule`.
- `PositionNewRule` and `PositionOpenRule`.
- `StopLossRule`.

```python
from techan.basic import ConstantIndicator
from techan.rules import AndRule, PositionNewRule, PositionOpenRule, cross_up_rule, cross_down_rule
from techan.strategy import RuleStrategy
from techan.tradingrecord import TradingRecord

record = TradingRecord()
strategy = RuleStrategy(
    entry_rule=AndRule(cross_up_rule(ConstantIndicator(12), ema), PositionNewRule()),
    exit_rule=AndRule(cross_down_rule(ema, ConstantIndicator(11)), PositionOpenRule()),
    unstable_period=2,
)

for index in range(len(series.candles)):
    if strategy.should_enter(index, record):
        ...  # build an Order and call record.operate(order)
    elif strategy.should_exit(index, record):
        ...
```

`RuleStrategy` never acts at or before its unstable period. It raises
`ValueError` when it is asked to decide without the rule it needs.

## Analysis

The classes in `techan.analysis` measure a `TradingRecord`. Each one has an
`analyze(record)` method that returns a `float`.

- `TotalProfitAnalysis`
- `PercentGainAnalysis`
- `NumTradesAnalysis`
- `ProfitableTradesAnalysis`
- `AverageProfitAnalysis`
- `PeriodProfitAnalysis`: give it a `timedelta`. It raises `ValueError` when
  there are no trades.
- `BuyAndHoldAnalysis`: give it a series and a starting amount of money.
- `LogTradesAnalysis`: writes every closed trade to a text stream and returns
  `0.0`.

## Time periods

`techan.timeperiod.TimePeriod` is a frozen start/end pair. Its methods are:

- `length`
- `since`
- `advance`
- `format`, which takes a strftime layout.
- `astimezone`
- `utc`

`new_time_period(start, duration)` builds a period from a start time and a
duration.

`parse_time_period` parses text such as `"2009-01-20T12:00:00 -- 2017-01-20"`.
The times are read as UTC, and any separator may stand between them. If the end
is left out, the period ends at the current time. More than two datetimes raise
`ValueError`.

The older `parse` function reads `mm/dd/yyyy[Thh:mm:ss]` values joined by one
separator character.

## Examples

`techan.examples.basic_ema()` builds a one-candle series and returns a 10-period
EMA of its close prices. `techan.examples.strategy_example()` builds a rule
strategy on top of that EMA and returns whether it would enter at index 0.

## What it does not do

This is a library only:

- It has no command-line program.
- It does not fetch market data from an exchange, and it does not place orders.
- It does not store series or records; you fill the `TimeSeries` and
  `TradingRecord` yourself.