"""Volatility indicators: true range, bands, channels and the commodity channel index."""

from dataclasses import dataclass
from decimal import Decimal

from techan.averages import EMAIndicator, SimpleMovingAverage
from techan.basic import ClosePriceIndicator, TypicalPriceIndicator
from techan.dispersion import MeanDeviationIndicator, WindowedStandardDeviationIndicator
from techan.indicator import Indicator
from techan.numeric import ZERO, to_decimal
from techan.timeseries import TimeSeries

_CCI_CONSTANT = Decimal("0.015")


@dataclass(frozen=True)
class TrueRangeIndicator(Indicator):
    """The candle's range widened to include the previous close; zero at index 0."""

    series: TimeSeries

    def calculate(self, index):
        if index < 1:
            return ZERO
        candle = self.series.candles[index]
        previous_close = self.series.candles[index - 1].close_price
        true_high = max(candle.max_price, previous_close)
        true_low = min(candle.min_price, previous_close)
        return true_high - true_low


@dataclass(frozen=True)
class AverageTrueRangeIndicator(Indicator):
    """The mean true range over a window; zero until the window lies past index 0."""

    series: TimeSeries
    window: int

    def calculate(self, index):
        if index < self.window:
            return ZERO
        true_range = TrueRangeIndicator(self.series)
        total = sum(
            (true_range.calculate(i) for i in range(index, index - self.window, -1)),
            ZERO,
        )
        return total / Decimal(self.window)


class BollingerBandIndicator(Indicator):
    """A moving average shifted by a multiple of the windowed standard deviation."""

    def __init__(self, indicator, window, multiplier):
        self.indicator = indicator
        self.window = window
        self.multiplier = to_decimal(multiplier)
        self._average = SimpleMovingAverage(indicator, window)
        self._deviation = WindowedStandardDeviationIndicator(indicator, window)

    def calculate(self, index):
        return self._average.calculate(index) + self._deviation.calculate(index) * self.multiplier

    def __repr__(self):
        return f"BollingerBandIndicator({self.indicator!r}, {self.window}, {self.multiplier})"


def bollinger_upper_band(indicator, window, sigma):
    """Return the upper Bollinger band: average plus ``sigma`` deviations."""
    return BollingerBandIndicator(indicator, window, to_decimal(sigma))


def bollinger_lower_band(indicator, window, sigma):
    """Return the lower Bollinger band: average minus ``sigma`` deviations."""
    return BollingerBandIndicator(indicator, window, to_decimal(-sigma))


class KeltnerChannelIndicator(Indicator):
    """The close-price EMA shifted by a multiple of the average true range."""

    def __init__(self, series, window, multiplier):
        self.series = series
        self.window = window
        self.multiplier = to_decimal(multiplier)
        self._ema = EMAIndicator(ClosePriceIndicator(series), window)
        self._atr = AverageTrueRangeIndicator(series, window)

    def calculate(self, index):
        if index <= self.window - 1:
            return ZERO
        return self._ema.calculate(index) + self._atr.calculate(index) * self.multiplier

    def __repr__(self):
        return f"KeltnerChannelIndicator(window={self.window}, multiplier={self.multiplier})"


def keltner_channel_upper(series, window, mult):
    """Return the upper Keltner channel: EMA plus ``mult`` average true ranges."""
    return KeltnerChannelIndicator(series, window, to_decimal(mult))


def keltner_channel_lower(series, window, mult):
    """Return the lower Keltner channel: EMA minus ``mult`` average true ranges."""
    return KeltnerChannelIndicator(series, window, -to_decimal(mult))


@dataclass(frozen=True)
class CCIIndicator(Indicator):
    """The commodity channel index of a series over a window."""

    series: TimeSeries
    window: int

    def calculate(self, index):
        typical_price = TypicalPriceIndicator(self.series)
        typical_average = SimpleMovingAverage(typical_price, self.window)
        mean_deviation = MeanDeviationIndicator(ClosePriceIndicator(self.series), self.window)

        deviation = typical_price.calculate(index) - typical_average.calculate(index)
        return deviation / (mean_deviation.calculate(index) * _CCI_CONSTANT)