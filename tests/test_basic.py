import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from techan.basic import (
    ClosePriceIndicator,
    ConstantIndicator,
    DerivativeIndicator,
    DifferenceIndicator,
    FixedIndicator,
    HighPriceIndicator,
    LowPriceIndicator,
    OpenPriceIndicator,
    TypicalPriceIndicator,
    VolumeIndicator,
)
from techan.candle import Candle
from techan.numeric import ONE, format_decimal, to_decimal
from techan.timeperiod import new_time_period
from techan.timeseries import TimeSeries


def mock_time_series(*values):
    series = TimeSeries()
    for i, value in enumerate(values):
        price = to_decimal(value)
        candle = Candle(
            new_time_period(datetime.fromtimestamp(i, timezone.utc), timedelta(seconds=1)),
            open_price=price,
            close_price=price,
            max_price=price + ONE,
            min_price=price - ONE,
            volume=price,
        )
        series.add_candle(candle)
    return series


def decimal_equals(expected, actual):
    assert f"{expected:.4f}" == f"{float(actual):.4f}"


def _single_candle_series(**fields):
    now = datetime.now(timezone.utc)
    series = TimeSeries()
    series.add_candle(Candle(new_time_period(now, timedelta(minutes=1)), **fields))
    return series


def test_volume_indicator():
    series = _single_candle_series(volume=Decimal("1.2080"))
    assert format_decimal(VolumeIndicator(series).calculate(0), 3) == "1.208"


def test_typical_price_indicator():
    series = _single_candle_series(
        min_price=Decimal("1.2080"),
        max_price=Decimal("1.22"),
        close_price=Decimal("1.215"),
    )
    assert format_decimal(TypicalPriceIndicator(series).calculate(0), 4) == "1.2143"


def test_price_indicators_read_candle_fields():
    series = mock_time_series("5", "7")
    assert ClosePriceIndicator(series).calculate(1) == Decimal("7")
    assert OpenPriceIndicator(series).calculate(1) == Decimal("7")
    assert HighPriceIndicator(series).calculate(1) == Decimal("8")
    assert LowPriceIndicator(series).calculate(1) == Decimal("6")
    assert VolumeIndicator(series).calculate(0) == Decimal("5")


def test_price_indicator_out_of_range():
    series = mock_time_series("5")
    with pytest.raises(IndexError):
        ClosePriceIndicator(series).calculate(1)
    with pytest.raises(IndexError):
        ClosePriceIndicator(series).calculate(-1)


def test_constant_indicator():
    ci = ConstantIndicator(4.56)
    decimal_equals(4.56, ci.calculate(0))
    decimal_equals(4.56, ci.calculate(-sys.maxsize - 1))
    decimal_equals(4.56, ci.calculate(sys.maxsize))


def test_fixed_indicator():
    big = float(2**63 - 1)
    fi = FixedIndicator(0, 1, 2, -100, big)
    decimal_equals(0, fi.calculate(0))
    decimal_equals(1, fi.calculate(1))
    decimal_equals(2, fi.calculate(2))
    decimal_equals(-100, fi.calculate(3))
    decimal_equals(big, fi.calculate(4))


def test_fixed_indicator_out_of_range():
    fi = FixedIndicator(1, 2)
    with pytest.raises(IndexError):
        fi.calculate(2)
    with pytest.raises(IndexError):
        fi.calculate(-1)


def test_derivative_indicator():
    series = mock_time_series("1", "1", "2", "3", "5", "8", "13")
    indicator = DerivativeIndicator(ClosePriceIndicator(series))

    assert format_decimal(indicator.calculate(0)) == "0"
    assert format_decimal(indicator.calculate(1)) == "0"
    for i in range(2, len(series.candles)):
        expected = series.candles[i - 2].close_price
        assert format_decimal(indicator.calculate(i)) == format_decimal(expected)


def test_difference_indicator():
    di = DifferenceIndicator(FixedIndicator(10, 9, 8), FixedIndicator(8, 9, 10))
    decimal_equals(2, di.calculate(0))
    decimal_equals(0, di.calculate(1))
    decimal_equals(-2, di.calculate(2))