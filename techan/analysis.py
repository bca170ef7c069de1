"""Analyses that reduce a trading record to a single performance figure."""

import abc
import math
from dataclasses import dataclass
from datetime import timedelta, timezone
from typing import TextIO

from techan.numeric import ONE, ZERO, format_decimal, to_decimal
from techan.order import Order, OrderSide
from techan.position import Position
from techan.timeseries import TimeSeries

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _rfc822_utc(moment):
    moment = moment.astimezone(timezone.utc)
    return f"{moment.day:02d} {_MONTHS[moment.month - 1]} {moment.year % 100:02d} {moment:%H:%M} UTC"


def _float_divide(numerator, denominator):
    """Divide floats the IEEE way: dividing by zero gives an infinity or NaN."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


class Analysis(abc.ABC):
    """Measures a trading record's performance as a single number."""

    @abc.abstractmethod
    def analyze(self, record):
        """Return the figure for ``record``."""


class TotalProfitAnalysis(Analysis):
    """Total profit over all closed trades, long and short."""

    def analyze(self, record):
        total = ZERO
        for trade in record.trades:
            if not trade.is_closed():
                continue
            change = trade.exit_value() - trade.cost_basis()
            if trade.is_long():
                total += change
            elif trade.is_short():
                total -= change
        return float(total)


class PercentGainAnalysis(Analysis):
    """The last trade's exit value relative to the first trade's cost, minus one."""

    def analyze(self, record):
        trades = record.trades
        if trades and trades[0].is_closed():
            return float(trades[-1].exit_value() / trades[0].cost_basis() - ONE)
        return 0.0


class NumTradesAnalysis(Analysis):
    """The number of trades executed."""

    def analyze(self, record):
        return float(len(record.trades))


@dataclass
class LogTradesAnalysis(Analysis):
    """Writes every closed trade to ``writer``; the figure returned is always zero."""

    writer: TextIO

    def _log(self, trade):
        entrance, exit_ = trade.entrance_order, trade.exit_order
        print(
            f"{_rfc822_utc(entrance.execution_time)} - enter with buy {entrance.security} "
            f"({format_decimal(entrance.amount)} @ ${format_decimal(entrance.price)})",
            file=self.writer,
        )
        print(
            f"{_rfc822_utc(exit_.execution_time)} - exit with sell {exit_.security} "
            f"({format_decimal(exit_.amount)} @ ${format_decimal(exit_.price)})",
            file=self.writer,
        )
        profit = trade.exit_value() - trade.cost_basis()
        print(f"Profit: ${format_decimal(profit)}", file=self.writer)

    def analyze(self, record):
        for trade in record.trades:
            if trade.is_closed():
                self._log(trade)
        return 0.0


@dataclass
class PeriodProfitAnalysis(Analysis):
    """Total profit divided by the number of whole ``period`` spans the record covers."""

    period: timedelta

    def analyze(self, record):
        if not record.trades:
            raise ValueError("no trades to analyze")
        total = TotalProfitAnalysis().analyze(record)
        span = record.trades[-1].exit_order.execution_time - record.trades[0].entrance_order.execution_time
        periods = int(span / self.period)
        return _float_divide(total, float(periods))


class ProfitableTradesAnalysis(Analysis):
    """The number of trades whose exit value exceeds their cost."""

    def analyze(self, record):
        return float(
            sum(
                1
                for trade in record.trades
                if trade.exit_order.amount * trade.exit_order.price
                > trade.entrance_order.amount * trade.entrance_order.price
            )
        )


class AverageProfitAnalysis(Analysis):
    """Total profit divided by the number of trades."""

    def analyze(self, record):
        total = TotalProfitAnalysis().analyze(record)
        return _float_divide(total, float(len(record.trades)))


@dataclass
class BuyAndHoldAnalysis(Analysis):
    """Profit from buying with ``starting_money`` at the first close and selling at the last."""

    time_series: TimeSeries
    starting_money: float

    def analyze(self, record):
        if not record.trades:
            return 0.0

        first_close = self.time_series.candles[0].close_price
        last_close = self.time_series.candles[-1].close_price
        amount = to_decimal(self.starting_money) / first_close

        position = Position(Order(side=OrderSide.BUY, amount=amount, price=first_close))
        position.exit(Order(side=OrderSide.SELL, amount=amount, price=last_close))
        return float(position.exit_value() - position.cost_basis())