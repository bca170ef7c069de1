"""An ordered series of candles."""

from dataclasses import dataclass, field

from techan.candle import Candle


@dataclass
class TimeSeries:
    """Candles in time order."""

    candles: list[Candle] = field(default_factory=list)

    def add_candle(self, candle):
        """Append ``candle`` if it does not start before the last one ends.

        Returns True when the candle was added.
        """
        if candle is None:
            raise ValueError("error adding Candle: candle cannot be nil")

        last = self.last_candle()
        if last is None or candle.period.since(last.period).total_seconds() >= 0:
            self.candles.append(candle)
            return True
        return False

    def last_candle(self):
        """Return the last candle, or None when the series is empty."""
        return self.candles[-1] if self.candles else None

    def last_index(self):
        """Return the index of the last candle (-1 when empty)."""
        return len(self.candles) - 1

    def __len__(self):
        return len(self.candles)

    def __iter__(self):
        return iter(self.candles)

    def __getitem__(self, index):
        return self.candles[index]