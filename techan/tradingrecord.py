"""A record of completed trades and the position currently being built."""

from techan.position import Position


class TradingRecord:
    """Completed trades plus the current (new or open) position."""

    def __init__(self):
        self.trades = []
        self._current_position = Position()

    def current_position(self):
        """Return the position currently being built."""
        return self._current_position

    def last_trade(self):
        """Return the most recent completed trade, or None."""
        return self.trades[-1] if self.trades else None

    def operate(self, order):
        """Apply an order to the current position.

        An open position is closed by an order executed no earlier than its
        entrance; a new position is entered by an order executed no earlier
        than the last trade's exit. Other orders are ignored.
        """
        current = self._current_position
        if current.is_open():
            if order.execution_time < current.entrance_order.execution_time:
                return
            current.exit(order)
            self.trades.append(current)
            self._current_position = Position()
        elif current.is_new():
            last = self.last_trade()
            if last is not None and order.execution_time < last.exit_order.execution_time:
                return
            current.enter(order)