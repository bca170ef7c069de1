"""Oscillators: Aroon, relative strength, relative vigor and stochastic indicators."""

from dataclasses import dataclass
from decimal import Decimal

from techan.averages import MMAIndicator, SimpleMovingAverage, gain_indicator, loss_indicator
from techan.basic import (
    ClosePriceIndicator,
    DifferenceIndicator,
    HighPriceIndicator,
    LowPriceIndicator,
    OpenPriceIndicator,
)
from techan.dispersion import MaximumValueIndicator, MinimumValueIndicator
from techan.indicator import Indicator
from techan.numeric import ONE, ZERO, to_decimal

_ONE_HUNDRED = Decimal(100)
_INFINITY = Decimal("Infinity")
_TWO = Decimal(2)
_SIX = Decimal(6)


class AroonIndicator(Indicator):
    """Ticks since the extreme value in the window, as a percentage of the window.

    The extreme is the lowest value of the underlying indicator multiplied by
    ``direction``: -1 finds the highest value (Aroon up), 1 the lowest (Aroon
    down). The index of the last extreme found is remembered between calls.
    """

    def __init__(self, indicator, window, direction):
        self.indicator = indicator
        self.window = window
        self.direction = to_decimal(direction)
        self._low_index = -1

    def _value(self, index):
        return self.indicator.calculate(index) * self.direction

    def _find_low_index(self, index):
        if self._low_index < 1 or self._low_index < index - self.window:
            return min(range(index + 1 - self.window, index + 1), key=self._value)

        if self._value(index) < self._value(self._low_index):
            return index
        return self._low_index

    def calculate(self, index):
        if index < self.window - 1:
            return ZERO

        self._low_index = self._find_low_index(index)
        periods_since = Decimal(index - self._low_index)
        window = Decimal(self.window)
        return (window - periods_since) / window * _ONE_HUNDRED

    def __repr__(self):
        return f"AroonIndicator({self.indicator!r}, {self.window}, {self.direction})"


def aroon_up(indicator, window):
    """Return the Aroon up indicator; build it on high prices or something derived from them."""
    return AroonIndicator(indicator, window, -ONE)


def aroon_down(indicator, window):
    """Return the Aroon down indicator; build it on low prices or something derived from them."""
    return AroonIndicator(indicator, window, ONE)


class RelativeStrengthIndicator(Indicator):
    """Average gain divided by average loss over the timeframe; infinite with no losses."""

    def __init__(self, indicator, timeframe):
        self.indicator = indicator
        self.window = timeframe
        self._average_gain = MMAIndicator(gain_indicator(indicator), timeframe)
        self._average_loss = MMAIndicator(loss_indicator(indicator), timeframe)

    def calculate(self, index):
        if index < self.window - 1:
            return ZERO

        average_gain = self._average_gain.calculate(index)
        average_loss = self._average_loss.calculate(index)
        if average_loss == ZERO:
            return _INFINITY
        return average_gain / average_loss

    def __repr__(self):
        return f"RelativeStrengthIndicator({self.indicator!r}, {self.window})"


class RelativeStrengthIndexIndicator(Indicator):
    """The relative strength index: ``100 - 100 / (1 + RS)``."""

    def __init__(self, indicator, timeframe):
        self.indicator = indicator
        self.window = timeframe
        self._relative_strength = RelativeStrengthIndicator(indicator, timeframe)

    def calculate(self, index):
        relative_strength = self._relative_strength.calculate(index)
        return _ONE_HUNDRED - _ONE_HUNDRED / (ONE + relative_strength)

    def __repr__(self):
        return f"RelativeStrengthIndexIndicator({self.indicator!r}, {self.window})"


def _weighted_four(indicator, index):
    """Weighted mean of the last four values with weights 1, 2, 2, 1."""
    total = (
        indicator.calculate(index)
        + indicator.calculate(index - 1) * _TWO
        + indicator.calculate(index - 2) * _TWO
        + indicator.calculate(index - 3)
    )
    return total / _SIX


class RelativeVigorIndexIndicator(Indicator):
    """Weighted close-minus-open over weighted high-minus-low for the last four candles."""

    def __init__(self, series):
        self.series = series
        self._numerator = DifferenceIndicator(
            ClosePriceIndicator(series), OpenPriceIndicator(series)
        )
        self._denominator = DifferenceIndicator(
            HighPriceIndicator(series), LowPriceIndicator(series)
        )

    def calculate(self, index):
        if index < 3:
            return ZERO
        return _weighted_four(self._numerator, index) / _weighted_four(self._denominator, index)

    def __repr__(self):
        return f"RelativeVigorIndexIndicator({self.series!r})"


class RelativeVigorSignalLine(Indicator):
    """Weighted mean of the last four relative vigor index values."""

    def __init__(self, series):
        self.series = series
        self._relative_vigor_index = RelativeVigorIndexIndicator(series)

    def calculate(self, index):
        if index < 3:
            return ZERO
        return _weighted_four(self._relative_vigor_index, index)

    def __repr__(self):
        return f"RelativeVigorSignalLine({self.series!r})"


class FastStochasticIndicator(Indicator):
    """%K: where the close lies between the window's low and high, in percent.

    Infinite when the window's low equals its high.
    """

    def __init__(self, series, window):
        self.series = series
        self.window = window
        self._close = ClosePriceIndicator(series)
        self._minimum = MinimumValueIndicator(LowPriceIndicator(series), window)
        self._maximum = MaximumValueIndicator(HighPriceIndicator(series), window)

    def calculate(self, index):
        close = self._close.calculate(index)
        low = self._minimum.calculate(index)
        high = self._maximum.calculate(index)

        if low == high:
            return _INFINITY
        return (close - low) / (high - low) * _ONE_HUNDRED

    def __repr__(self):
        return f"FastStochasticIndicator({self.series!r}, {self.window})"


@dataclass(frozen=True)
class SlowStochasticIndicator(Indicator):
    """%D: the simple moving average of a %K indicator."""

    k: Indicator
    window: int

    def calculate(self, index):
        return SimpleMovingAverage(self.k, self.window).calculate(index)