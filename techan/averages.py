"""Moving averages, MACD, and gain/loss indicators."""

from dataclasses import dataclass
from decimal import Decimal

from techan.basic import DifferenceIndicator
from techan.indicator import CachedIndicator, Indicator
from techan.numeric import ONE, ZERO, to_decimal


@dataclass(frozen=True)
class SimpleMovingAverage(Indicator):
    """The mean of the last ``window`` values; zero before the window fills."""

    indicator: Indicator
    window: int

    def calculate(self, index):
        if index < self.window - 1:
            return ZERO
        total = sum(
            (self.indicator.calculate(i) for i in range(index, index - self.window, -1)),
            ZERO,
        )
        return total / Decimal(self.window)


class EMAIndicator(CachedIndicator):
    """Exponential moving average, seeded with the simple moving average."""

    def __init__(self, indicator, window):
        super().__init__(indicator, window)
        self.alpha = 2 / Decimal(window + 1)

    def _first_value(self, index):
        return SimpleMovingAverage(self.indicator, self.window).calculate(index)

    def _next_value(self, index, previous):
        today = self.indicator.calculate(index) * self.alpha
        return today + previous * (ONE - self.alpha)


class MMAIndicator(CachedIndicator):
    """Modified moving average, seeded with the simple moving average."""

    def __init__(self, indicator, window):
        super().__init__(indicator, window)
        self.factor = to_decimal(1.0 / window)

    def _first_value(self, index):
        return SimpleMovingAverage(self.indicator, self.window).calculate(index)

    def _next_value(self, index, previous):
        today = self.indicator.calculate(index)
        return previous + self.factor * (today - previous)


def macd(base_indicator, short_window, long_window):
    """Return the short-window EMA minus the long-window EMA."""
    return DifferenceIndicator(
        EMAIndicator(base_indicator, short_window),
        EMAIndicator(base_indicator, long_window),
    )


def macd_histogram(macd_indicator, signal_line_window):
    """Return the MACD minus its signal-line EMA."""
    return DifferenceIndicator(macd_indicator, EMAIndicator(macd_indicator, signal_line_window))


@dataclass(frozen=True)
class GainLossIndicator(Indicator):
    """The change since the previous index, scaled by ``coefficient``, or zero if not positive."""

    indicator: Indicator
    coefficient: Decimal

    def calculate(self, index):
        if index == 0:
            return ZERO
        delta = (self.indicator.calculate(index) - self.indicator.calculate(index - 1)) * to_decimal(
            self.coefficient
        )
        return delta if delta > ZERO else ZERO


def gain_indicator(indicator):
    """Return the gain since the previous index, or zero."""
    return GainLossIndicator(indicator, ONE)


def loss_indicator(indicator):
    """Return the loss since the previous index as a positive value, or zero."""
    return GainLossIndicator(indicator, -ONE)


@dataclass(frozen=True)
class CumulativeIndicator(Indicator):
    """The sum of all moves in the direction of ``mult`` within the window."""

    indicator: Indicator
    window: int
    mult: Decimal

    def calculate(self, index):
        mult = to_decimal(self.mult)
        total = ZERO
        for i in range(max(1, index - (self.window - 1)), index + 1):
            diff = self.indicator.calculate(i) - self.indicator.calculate(i - 1)
            if diff * mult > ZERO:
                total += abs(diff)
        return total


def cumulative_gains(indicator, window):
    """Return the total of gains within the window."""
    return CumulativeIndicator(indicator, window, ONE)


def cumulative_losses(indicator, window):
    """Return the total of losses within the window."""
    return CumulativeIndicator(indicator, window, -ONE)


@dataclass(frozen=True)
class AverageIndicator(Indicator):
    """A cumulative indicator divided by the number of values it covers."""

    indicator: Indicator
    window: int

    def calculate(self, index):
        return self.indicator.calculate(index) / Decimal(min(index + 1, self.window))


def average_gains(indicator, window):
    """Return the average gain within the window."""
    return AverageIndicator(cumulative_gains(indicator, window), window)


def average_losses(indicator, window):
    """Return the average loss within the window."""
    return AverageIndicator(cumulative_losses(indicator, window), window)


@dataclass(frozen=True)
class PercentChangeIndicator(Indicator):
    """The fractional change since the previous index; zero at index 0."""

    indicator: Indicator

    def calculate(self, index):
        if index == 0:
            return ZERO
        current = self.indicator.calculate(index)
        previous = self.indicator.calculate(index - 1)
        return current / previous - ONE