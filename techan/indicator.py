"""The indicator interface and a base for indicators that cache their results."""

import abc

from techan.numeric import ZERO


class Indicator(abc.ABC):
    """Something that yields a decimal value for each index of a series."""

    @abc.abstractmethod
    def calculate(self, index):
        """Return the indicator's value at ``index``."""


class CachedIndicator(Indicator):
    """An indicator whose values build on the previous one and are cached.

    Indices below ``window - 1`` yield zero. The value at ``window - 1``
    comes from :meth:`_first_value`; every later value comes from
    :meth:`_next_value` applied to the value before it. Missing values are
    filled in order from the nearest cached one, so deep indices need no
    recursion.
    """

    def __init__(self, indicator, window):
        if window < 1:
            raise ValueError(f"window must be at least 1, got {window}")
        self.indicator = indicator
        self.window = window
        self._cache = []

    @abc.abstractmethod
    def _first_value(self, index):
        """Return the value at the first index of the window."""

    @abc.abstractmethod
    def _next_value(self, index, previous):
        """Return the value at ``index`` given the value at ``index - 1``."""

    def calculate(self, index):
        first = self.window - 1
        if index < first:
            return ZERO

        if index >= len(self._cache):
            self._cache.extend([None] * (index + 1 - len(self._cache)))

        cached = self._cache[index]
        if cached is not None:
            return cached

        start = index
        while start > first and self._cache[start - 1] is None:
            start -= 1

        for i in range(start, index + 1):
            if i == first:
                value = self._first_value(i)
            else:
                value = self._next_value(i, self._cache[i - 1])
            self._cache[i] = value

        return self._cache[index]