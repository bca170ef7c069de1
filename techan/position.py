"""Positions: an entrance order paired with an optional exit order."""

from dataclasses import dataclass

from techan.numeric import ZERO
from techan.order import Order, OrderSide


@dataclass
class Position:
    """A pair of orders; empty, open (entered) or closed (entered and exited)."""

    entrance_order: Order | None = None
    exit_order: Order | None = None

    def enter(self, order):
        """Set the entrance order."""
        self.entrance_order = order

    def exit(self, order):
        """Set the exit order."""
        self.exit_order = order

    def is_long(self):
        """True if the entrance order is a buy."""
        return self.entrance_order is not None and self.entrance_order.side is OrderSide.BUY

    def is_short(self):
        """True if the entrance order is a sell."""
        return self.entrance_order is not None and self.entrance_order.side is OrderSide.SELL

    def is_open(self):
        """True if entered but not yet exited."""
        return self.entrance_order is not None and self.exit_order is None

    def is_closed(self):
        """True if both entered and exited."""
        return self.entrance_order is not None and self.exit_order is not None

    def is_new(self):
        """True if neither entered nor exited."""
        return self.entrance_order is None and self.exit_order is None

    def cost_basis(self):
        """Return the value paid to enter the position, or zero."""
        if self.entrance_order is None:
            return ZERO
        return self.entrance_order.amount * self.entrance_order.price

    def exit_value(self):
        """Return the value received on closing the position, or zero if not closed."""
        if not self.is_closed():
            return ZERO
        return self.exit_order.amount * self.exit_order.price