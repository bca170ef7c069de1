"""The squeeze momentum indicator: squeeze state and momentum value."""

import math
from decimal import Decimal

from techan.averages import SimpleMovingAverage
from techan.dispersion import MaximumValueIndicator, MinimumValueIndicator
from techan.indicator import Indicator
from techan.numeric import ONE, to_decimal

SQZ_ON = Decimal(-1)
SQZ_OFF = Decimal(1)
NO_SQZ = Decimal(0)

SQZON = "sqzon"
SQZOFF = "sqzoff"
NOSQZ = "nosqz"

_NAN = Decimal("NaN")


def least_squares(x_data, y_data):
    """Fit a straight line to the points and return ``(slope, intercept)``.

    Raises ValueError when the points do not determine a line.
    """
    points = list(zip(x_data, y_data))
    n = float(len(points))

    sum_x = math.fsum(x for x, _ in points)
    sum_y = math.fsum(y for _, y in points)
    sum_xy = math.fsum(x * y for x, y in points)
    sum_xx = math.fsum(x * x for x, _ in points)

    base = n * sum_xx - sum_x * sum_x
    if base == 0:
        raise ValueError("the points do not determine a line")

    slope = (n * sum_xy - sum_x * sum_y) / base
    intercept = (sum_xx * sum_y - sum_xy * sum_x) / base
    return slope, intercept


class SqueezeMomentumValueIndicator(Indicator):
    """The momentum value of the squeeze: a linear fit of the close's distance from its midline.

    Yields one before ``length_bb`` candles and NaN where the fit is undefined.
    """

    def __init__(self, low_bid, high_bid, close_bid, length_bb):
        self.low_bid = low_bid
        self.high_bid = high_bid
        self.close_bid = close_bid
        self.length_bb = length_bb
        self._lowest = MinimumValueIndicator(low_bid, length_bb)
        self._highest = MaximumValueIndicator(high_bid, length_bb)
        self._close_average = SimpleMovingAverage(close_bid, length_bb)

    def _distance_from_midline(self, index):
        mid_range = (
            float(self._highest.calculate(index)) + float(self._lowest.calculate(index))
        ) / 2.0
        midline = (mid_range + float(self._close_average.calculate(index))) / 2.0
        return float(self.close_bid.calculate(index)) - midline

    def calculate(self, index):
        if index < self.length_bb:
            return ONE

        x_data = [float(i) for i in range(index - self.length_bb + 1, self.length_bb + 1)]
        y_data = [self._distance_from_midline(int(x)) for x in x_data]
        try:
            slope, intercept = least_squares(x_data, y_data)
        except ValueError:
            return _NAN
        return to_decimal(intercept + slope * float(self.length_bb - 1))

    def __repr__(self):
        return f"SqueezeMomentumValueIndicator(length_bb={self.length_bb})"


class SqueezeMomentumTypeIndicator(Indicator):
    """The squeeze state: on (-1), off (1) or none (0).

    The squeeze is on when the Bollinger bands lie inside the Keltner
    channel, and off when they lie outside it.
    """

    def __init__(self, lower_bb, lower_kc, upper_bb, upper_kc, length_bb):
        self.lower_bb = lower_bb
        self.lower_kc = lower_kc
        self.upper_bb = upper_bb
        self.upper_kc = upper_kc
        self.length_bb = length_bb

    def calculate(self, index):
        if index < self.length_bb:
            return NO_SQZ

        lower_bb = self.lower_bb.calculate(index)
        lower_kc = self.lower_kc.calculate(index)
        upper_bb = self.upper_bb.calculate(index)
        upper_kc = self.upper_kc.calculate(index)

        if lower_bb > lower_kc and upper_bb < upper_kc:
            return SQZ_ON
        if lower_bb < lower_kc and upper_bb > upper_kc:
            return SQZ_OFF
        return NO_SQZ

    def __repr__(self):
        return f"SqueezeMomentumTypeIndicator(length_bb={self.length_bb})"


def is_sqz_on(value):
    """True if the squeeze type value means the squeeze is on."""
    return to_decimal(value) == SQZ_ON


def is_sqz_off(value):
    """True if the squeeze type value means the squeeze is off."""
    return to_decimal(value) == SQZ_OFF


def is_no_sqz(value):
    """True if the squeeze type value means there is no squeeze."""
    return to_decimal(value) == NO_SQZ


def sqz_type_string(value):
    """Return the name of a squeeze type value."""
    value = to_decimal(value)
    if value == SQZ_ON:
        return SQZON
    if value == SQZ_OFF:
        return SQZOFF
    return NOSQZ