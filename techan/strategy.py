"""Strategies: when to enter and when to exit a position."""

import abc
from dataclasses import dataclass

from techan.rules import Rule


class Strategy(abc.ABC):
    """Decides on entry into and exit from positions."""

    @abc.abstractmethod
    def should_enter(self, index, record):
        """Return True when a position should be entered at ``index``."""

    @abc.abstractmethod
    def should_exit(self, index, record):
        """Return True when the open position should be exited at ``index``."""


@dataclass
class RuleStrategy(Strategy):
    """Enters and exits by rules, but never at or before the unstable period."""

    entry_rule: Rule | None = None
    exit_rule: Rule | None = None
    unstable_period: int = 0

    def should_enter(self, index, record):
        """True past the unstable period when no position is open and the entry rule holds."""
        if self.entry_rule is None:
            raise ValueError("entry rule cannot be nil")

        if index > self.unstable_period and record.current_position().is_new():
            return self.entry_rule.is_satisfied(index, record)
        return False

    def should_exit(self, index, record):
        """True past the unstable period when a position is open and the exit rule holds."""
        if self.exit_rule is None:
            raise ValueError("exit rule cannot be nil")

        if index > self.unstable_period and record.current_position().is_open():
            return self.exit_rule.is_satisfied(index, record)
        return False