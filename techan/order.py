"""Orders: executed buys and sells."""

import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from techan.numeric import ZERO, to_decimal
from techan.timeperiod import ZERO_TIME


class OrderSide(enum.Enum):
    """Side of an order."""

    BUY = 0
    SELL = 1


@dataclass(frozen=True)
class Order:
    """A trade execution with its side, security, price, amount and time."""

    side: OrderSide = OrderSide.BUY
    security: str = ""
    price: Decimal = ZERO
    amount: Decimal = ZERO
    execution_time: datetime = ZERO_TIME

    def __post_init__(self):
        object.__setattr__(self, "price", to_decimal(self.price))
        object.__setattr__(self, "amount", to_decimal(self.amount))