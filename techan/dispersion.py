"""Dispersion indicators: variance, deviations, extremes, drawdown and trend slope."""

from dataclasses import dataclass
from decimal import Decimal

from techan.averages import SimpleMovingAverage
from techan.indicator import Indicator
from techan.numeric import ZERO

_INFINITY = Decimal("Infinity")


def _window_start(index, window):
    """First index of a window ending at ``index``; a non-positive window covers everything."""
    return max(index - window + 1, 0) if window > 0 else 0


@dataclass(frozen=True)
class VarianceIndicator(Indicator):
    """The mean squared deviation of all values up to the index; zero at index 0."""

    indicator: Indicator

    def calculate(self, index):
        if index < 1:
            return ZERO
        average = SimpleMovingAverage(self.indicator, index + 1).calculate(index)
        variance = sum(
            ((self.indicator.calculate(i) - average) ** 2 for i in range(index + 1)),
            ZERO,
        )
        return variance / Decimal(index + 1)


@dataclass(frozen=True)
class StandardDeviationIndicator(Indicator):
    """The square root of the variance of all values up to the index."""

    indicator: Indicator

    def calculate(self, index):
        return VarianceIndicator(self.indicator).calculate(index).sqrt()


@dataclass(frozen=True)
class WindowedStandardDeviationIndicator(Indicator):
    """The standard deviation of the values in a window around their moving average."""

    indicator: Indicator
    window: int

    def calculate(self, index):
        average = SimpleMovingAverage(self.indicator, self.window).calculate(index)
        variance = sum(
            (
                (self.indicator.calculate(i) - average) ** 2
                for i in range(max(0, index - self.window + 1), index + 1)
            ),
            ZERO,
        )
        real_window = min(self.window, index + 1)
        return (variance / Decimal(real_window)).sqrt()


@dataclass(frozen=True)
class MeanDeviationIndicator(Indicator):
    """The mean absolute deviation of the values in a window from their moving average."""

    indicator: Indicator
    window: int

    def calculate(self, index):
        if index < self.window - 1:
            return ZERO
        average = SimpleMovingAverage(self.indicator, self.window).calculate(index)
        start = max(0, index - self.window + 1)
        deviations = sum(
            (abs(average - self.indicator.calculate(i)) for i in range(start, index + 1)),
            ZERO,
        )
        return deviations / Decimal(min(self.window, index - start + 1))


@dataclass(frozen=True)
class MinimumValueIndicator(Indicator):
    """The smallest value in the window; a window of -1 covers every value so far."""

    indicator: Indicator
    window: int

    def calculate(self, index):
        start = _window_start(index, self.window)
        return min(
            (self.indicator.calculate(i) for i in range(start, index + 1)),
            default=_INFINITY,
        )


@dataclass(frozen=True)
class MaximumValueIndicator(Indicator):
    """The largest value in the window; a window of -1 covers every value so far."""

    indicator: Indicator
    window: int

    def calculate(self, index):
        start = _window_start(index, self.window)
        return max(
            (self.indicator.calculate(i) for i in range(start, index + 1)),
            default=-_INFINITY,
        )


@dataclass(frozen=True)
class MaximumDrawdownIndicator(Indicator):
    """The loss from the window's peak to its trough, as a fraction of the peak."""

    indicator: Indicator
    window: int

    def calculate(self, index):
        low = MinimumValueIndicator(self.indicator, self.window).calculate(index)
        high = MaximumValueIndicator(self.indicator, self.window).calculate(index)
        return (low - high) / high


@dataclass(frozen=True)
class TrendlineIndicator(Indicator):
    """The slope of the least-squares line through the values in the window."""

    indicator: Indicator
    window: int

    def calculate(self, index):
        window = min(index + 1, self.window)
        values = [self.indicator.calculate(index - (window - 1) + i) for i in range(window)]
        xs = [Decimal(i) for i in range(window)]
        n = Decimal(window)

        sum_x = sum(xs, ZERO)
        sum_y = sum(values, ZERO)
        sum_xy = sum((x * y for x, y in zip(xs, values)), ZERO)
        sum_x2 = sum((x * x for x in xs), ZERO)

        numerator = sum_xy * n - sum_x * sum_y
        denominator = sum_x2 * n - sum_x**2
        return numerator / denominator