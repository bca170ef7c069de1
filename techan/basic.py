"""Basic indicators: candle fields, constants, fixed values, derivatives and differences."""

from dataclasses import dataclass
from decimal import Decimal

from techan.indicator import Indicator
from techan.numeric import ZERO, to_decimal
from techan.timeseries import TimeSeries


def _candle(series, index):
    if index < 0:
        raise IndexError(f"candle index {index} out of range")
    return series.candles[index]


@dataclass(frozen=True)
class VolumeIndicator(Indicator):
    """The volume of each candle."""

    series: TimeSeries

    def calculate(self, index):
        return _candle(self.series, index).volume


@dataclass(frozen=True)
class ClosePriceIndicator(Indicator):
    """The close price of each candle."""

    series: TimeSeries

    def calculate(self, index):
        return _candle(self.series, index).close_price


@dataclass(frozen=True)
class HighPriceIndicator(Indicator):
    """The high price of each candle."""

    series: TimeSeries

    def calculate(self, index):
        return _candle(self.series, index).max_price


@dataclass(frozen=True)
class LowPriceIndicator(Indicator):
    """The low price of each candle."""

    series: TimeSeries

    def calculate(self, index):
        return _candle(self.series, index).min_price


@dataclass(frozen=True)
class OpenPriceIndicator(Indicator):
    """The open price of each candle."""

    series: TimeSeries

    def calculate(self, index):
        return _candle(self.series, index).open_price


@dataclass(frozen=True)
class TypicalPriceIndicator(Indicator):
    """The average of each candle's high, low and close prices."""

    series: TimeSeries

    def calculate(self, index):
        candle = _candle(self.series, index)
        return (candle.max_price + candle.min_price + candle.close_price) / Decimal(3)


class ConstantIndicator(Indicator):
    """The same value at every index."""

    def __init__(self, constant):
        self.value = to_decimal(constant)

    def calculate(self, index):
        return self.value

    def __repr__(self):
        return f"ConstantIndicator({self.value})"


class FixedIndicator(Indicator):
    """A fixed sequence of values, one per index."""

    def __init__(self, *values):
        self.values = tuple(to_decimal(value) for value in values)

    def calculate(self, index):
        if index < 0:
            raise IndexError(f"index {index} out of range")
        return self.values[index]

    def __repr__(self):
        return f"FixedIndicator{self.values}"


@dataclass(frozen=True)
class DerivativeIndicator(Indicator):
    """The change of an indicator since the previous index; zero at index 0."""

    indicator: Indicator

    def calculate(self, index):
        if index == 0:
            return ZERO
        return self.indicator.calculate(index) - self.indicator.calculate(index - 1)


@dataclass(frozen=True)
class DifferenceIndicator(Indicator):
    """The minuend indicator minus the subtrahend indicator."""

    minuend: Indicator
    subtrahend: Indicator

    def calculate(self, index):
        return self.minuend.calculate(index) - self.subtrahend.calculate(index)