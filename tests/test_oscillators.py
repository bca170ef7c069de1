from datetime import datetime, timedelta, timezone

import pytest

from techan.basic import ClosePriceIndicator, HighPriceIndicator, LowPriceIndicator
from techan.candle import Candle
from techan.numeric import format_decimal, to_decimal
from techan.oscillators import (
    FastStochasticIndicator,
    RelativeStrengthIndexIndicator,
    RelativeStrengthIndicator,
    RelativeVigorIndexIndicator,
    RelativeVigorSignalLine,
    SlowStochasticIndicator,
    aroon_down,
    aroon_up,
)
from techan.timeperiod import new_time_period
from techan.timeseries import TimeSeries

MOCKED_VALUES = (
    64.75, 63.79, 63.73,
    63.73, 63.55, 63.19,
    63.91, 63.85, 62.95,
    63.37, 61.33, 61.51,
)

TOLERANCE = 5e-5


def _period(i):
    return new_time_period(datetime.fromtimestamp(i, timezone.utc), timedelta(seconds=1))


def mock_series(*values):
    series = TimeSeries()
    for i, value in enumerate(values):
        price = to_decimal(value)
        series.add_candle(
            Candle(
                _period(i),
                open_price=price,
                close_price=price,
                max_price=price + 1,
                min_price=price - 1,
                volume=price,
            )
        )
    return series


def mock_series_ochl(*rows):
    series = TimeSeries()
    for i, (open_, close, high, low) in enumerate(rows):
        series.add_candle(
            Candle(
                _period(i),
                open_price=open_,
                close_price=close,
                max_price=high,
                min_price=low,
                volume=i,
            )
        )
    return series


def dump(indicator, length):
    return [float(indicator.calculate(i)) for i in range(length)]


class TestAroonUp:
    def test_fewer_than_window_periods(self):
        indicator = aroon_up(HighPriceIndicator(TimeSeries()), 10)
        assert float(indicator.calculate(0)) == pytest.approx(0, abs=TOLERANCE)

    def test_more_than_window_periods(self):
        series = mock_series(1, 2, 3, 4, 3, 2, 1)
        indicator = aroon_up(HighPriceIndicator(series), 4)

        assert float(indicator.calculate(3)) == pytest.approx(100, abs=TOLERANCE)
        assert float(indicator.calculate(4)) == pytest.approx(75, abs=TOLERANCE)
        assert float(indicator.calculate(5)) == pytest.approx(50, abs=TOLERANCE)


class TestAroonDown:
    def test_fewer_than_window_periods(self):
        indicator = aroon_down(HighPriceIndicator(TimeSeries()), 10)
        assert float(indicator.calculate(0)) == pytest.approx(0, abs=TOLERANCE)

    def test_more_than_window_periods(self):
        series = mock_series(5, 4, 3, 2, 3, 4, 5)
        indicator = aroon_down(LowPriceIndicator(series), 4)

        assert float(indicator.calculate(3)) == pytest.approx(100, abs=TOLERANCE)
        assert float(indicator.calculate(4)) == pytest.approx(75, abs=TOLERANCE)
        assert float(indicator.calculate(5)) == pytest.approx(50, abs=TOLERANCE)


def test_relative_strength_index():
    indicator = RelativeStrengthIndexIndicator(ClosePriceIndicator(mock_series(*MOCKED_VALUES)), 3)
    expected = [0, 0, 0, 0, 0, 0, 57.9952, 54.0751, 21.451, 44.7739, 14.1542, 21.2794]
    assert dump(indicator, len(MOCKED_VALUES)) == pytest.approx(expected, abs=1e-4)


def test_relative_strength():
    indicator = RelativeStrengthIndicator(ClosePriceIndicator(mock_series(*MOCKED_VALUES)), 3)
    expected = [0, 0, 0, 0, 0, 0, 1.3807, 1.1775, 0.2731, 0.8107, 0.1649, 0.2703]
    assert dump(indicator, len(MOCKED_VALUES)) == pytest.approx(expected, abs=1e-4)


def test_relative_strength_no_price_change_is_infinite():
    indicator = RelativeStrengthIndicator(ClosePriceIndicator(mock_series("42.0", "42.0")), 2)
    value = indicator.calculate(1)
    assert format_decimal(value, 2) == format_decimal(to_decimal("Infinity"), 2)
    assert value.is_infinite() and value > 0


def test_relative_strength_index_no_price_change_is_one_hundred():
    indicator = RelativeStrengthIndexIndicator(ClosePriceIndicator(mock_series("42.0", "42.0")), 2)
    assert indicator.calculate(1) == 100


class TestRelativeVigorIndex:
    @pytest.fixture
    def indicator(self):
        series = mock_series_ochl(
            (10, 12, 12, 8),
            (11, 14, 14, 9),
            (8, 19, 20, 8),
            (9, 10, 11, 8),
        )
        return RelativeVigorIndexIndicator(series)

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_zero_before_index_three(self, indicator, index):
        assert format_decimal(indicator.calculate(index)) == "0"

    def test_calculates(self, indicator):
        assert format_decimal(indicator.calculate(3), 3) == "0.756"


class TestRelativeVigorSignalLine:
    @pytest.fixture
    def signal_line(self):
        series = mock_series_ochl(
            (10, 12, 12, 8),
            (11, 14, 14, 9),
            (8, 19, 20, 8),
            (9, 10, 11, 8),
            (11, 14, 14, 9),
            (9, 10, 11, 8),
            (10, 12, 12, 8),
            (9, 10, 11, 8),
        )
        return RelativeVigorSignalLine(series)

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_zero_before_index_three(self, signal_line, index):
        assert format_decimal(signal_line.calculate(index)) == "0"

    def test_calculates(self, signal_line):
        assert format_decimal(signal_line.calculate(7), 4) == "0.5752"


FAST_STOCH_VALUES = [
    100,
    100,
    100.0 * 12.0 / 16.0,
    100.0 * 2.0 / 16.0,
    100.0 * 6.0 / 16.0,
    100.0 * 2.0 / 16.0,
    100.0 * 3.0 / 15.0,
    100.0 * 2.0 / 16.0,
    100.0 * 4.0 / 13.0,
    100.0 * 11.0 / 17.0,
    100.0 * 24.0 / 49.0,
]


def test_fast_stochastic():
    series = mock_series_ochl(
        (10, 12, 12, 8),
        (11, 14, 14, 9),
        (10, 20, 24, 10),
        (9, 10, 11, 9),
        (11, 14, 14, 9),
        (9, 10, 11, 9),
        (10, 12, 12, 10),
        (9, 10, 11, 8),
        (6, 5, 8, 1),
        (15, 12, 18, 9),
        (35, 25, 50, 20),
    )
    k = FastStochasticIndicator(series, 6)

    actual = [float(k.calculate(i)) for i in range(len(FAST_STOCH_VALUES))]
    assert actual == pytest.approx(FAST_STOCH_VALUES, abs=TOLERANCE)


def test_slow_stochastic():
    series = mock_series(*FAST_STOCH_VALUES)
    d = SlowStochasticIndicator(ClosePriceIndicator(series), 3)

    expected = [
        0,
        0,
        100.0 * (12.0 / 16.0 + 1 + 1) / 3.0,
        100.0 * (2.0 / 16.0 + 12.0 / 16.0 + 1) / 3.0,
        100.0 * (6.0 / 16.0 + 2.0 / 16.0 + 12.0 / 16.0) / 3.0,
        100.0 * (2.0 / 16.0 + 6.0 / 16.0 + 2.0 / 16.0) / 3.0,
        100.0 * (3.0 / 15.0 + 2.0 / 16.0 + 6.0 / 16.0) / 3.0,
        100.0 * (2.0 / 16.0 + 3.0 / 15.0 + 2.0 / 16.0) / 3.0,
        100.0 * (4.0 / 13.0 + 2.0 / 16.0 + 3.0 / 15.0) / 3.0,
        100.0 * (11.0 / 17.0 + 4.0 / 13.0 + 2.0 / 16.0) / 3.0,
        100.0 * (24.0 / 49.0 + 11.0 / 17.0 + 4.0 / 13.0) / 3.0,
    ]
    actual = [float(d.calculate(i)) for i in range(len(expected))]
    assert actual == pytest.approx(expected, abs=TOLERANCE)


def test_fast_stochastic_no_price_change_is_infinite():
    series = mock_series_ochl((42, 42, 42, 42), (42, 42, 42, 42))
    value = FastStochasticIndicator(series, 2).calculate(1)
    assert format_decimal(value, 2) == format_decimal(to_decimal("Infinity"), 2)
    assert value.is_infinite() and value > 0