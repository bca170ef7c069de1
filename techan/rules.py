"""Rules: conditions on indicators and trading records that a strategy can act on."""

import abc
from dataclasses import dataclass

from techan.averages import PercentChangeIndicator
from techan.basic import ClosePriceIndicator
from techan.indicator import Indicator
from techan.numeric import ONE, to_decimal


def _compare(a, b):
    return (a > b) - (a < b)


class Rule(abc.ABC):
    """A condition that is or is not met at an index of a series."""

    @abc.abstractmethod
    def is_satisfied(self, index, record):
        """Return True when the rule holds at ``index`` for ``record``."""


@dataclass(frozen=True)
class AndRule(Rule):
    """Satisfied when both rules are satisfied."""

    first: Rule
    second: Rule

    def is_satisfied(self, index, record):
        return self.first.is_satisfied(index, record) and self.second.is_satisfied(index, record)


@dataclass(frozen=True)
class OrRule(Rule):
    """Satisfied when either rule is satisfied."""

    first: Rule
    second: Rule

    def is_satisfied(self, index, record):
        return self.first.is_satisfied(index, record) or self.second.is_satisfied(index, record)


@dataclass(frozen=True)
class OverIndicatorRule(Rule):
    """Satisfied when the first indicator is greater than the second."""

    first: Indicator
    second: Indicator

    def is_satisfied(self, index, record):
        return self.first.calculate(index) > self.second.calculate(index)


@dataclass(frozen=True)
class UnderIndicatorRule(Rule):
    """Satisfied when the first indicator is less than the second."""

    first: Indicator
    second: Indicator

    def is_satisfied(self, index, record):
        return self.first.calculate(index) < self.second.calculate(index)


class PercentChangeRule(Rule):
    """Satisfied when the indicator has changed by more than ``percent`` (a fraction, -1 to 1)."""

    def __init__(self, indicator, percent):
        self.indicator = PercentChangeIndicator(indicator)
        self.percent = to_decimal(percent)

    def is_satisfied(self, index, record):
        return abs(self.indicator.calculate(index)) > abs(self.percent)

    def __repr__(self):
        return f"PercentChangeRule({self.indicator.indicator!r}, {self.percent})"


@dataclass(frozen=True)
class CrossRule(Rule):
    """Satisfied when ``lower`` has crossed ``upper`` in the direction given by ``cmp``."""

    upper: Indicator
    lower: Indicator
    cmp: int

    def _order(self, index):
        return _compare(self.lower.calculate(index), self.upper.calculate(index))

    def is_satisfied(self, index, record):
        if index == 0:
            return False

        if self._order(index) not in (0, self.cmp):
            return False

        return any(self._order(i) in (0, -self.cmp) for i in range(index, -1, -1))


def cross_up_rule(upper, lower):
    """Return a rule satisfied when ``lower`` has crossed above ``upper``."""
    return CrossRule(upper, lower, 1)


def cross_down_rule(upper, lower):
    """Return a rule satisfied when ``upper`` has crossed below ``lower``."""
    return CrossRule(lower, upper, -1)


@dataclass(frozen=True)
class IncreaseRule(Rule):
    """Satisfied when the indicator is greater than at the previous index."""

    indicator: Indicator | None = None

    def is_satisfied(self, index, record):
        if index == 0:
            return False
        return self.indicator.calculate(index) > self.indicator.calculate(index - 1)


@dataclass(frozen=True)
class DecreaseRule(Rule):
    """Satisfied when the indicator is less than at the previous index."""

    indicator: Indicator | None = None

    def is_satisfied(self, index, record):
        if index == 0:
            return False
        return self.indicator.calculate(index) < self.indicator.calculate(index - 1)


class PositionNewRule(Rule):
    """Satisfied when the record's current position is new."""

    def is_satisfied(self, index, record):
        return record.current_position().is_new()

    def __repr__(self):
        return "PositionNewRule()"


class PositionOpenRule(Rule):
    """Satisfied when the record's current position is open."""

    def is_satisfied(self, index, record):
        return record.current_position().is_open()

    def __repr__(self):
        return "PositionOpenRule()"


class StopLossRule(Rule):
    """Satisfied when the open position's loss meets or exceeds ``loss_tolerance`` (-1 to 1)."""

    def __init__(self, series, loss_tolerance):
        self.series = series
        self.indicator = ClosePriceIndicator(series)
        self.tolerance = to_decimal(loss_tolerance)

    def is_satisfied(self, index, record):
        position = record.current_position()
        if not position.is_open():
            return False

        open_price = position.cost_basis()
        loss = self.indicator.calculate(index) / open_price - ONE
        return loss <= self.tolerance

    def __repr__(self):
        return f"StopLossRule(tolerance={self.tolerance})"