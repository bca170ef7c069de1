"""Candles: market information for a security over one time period."""

from dataclasses import dataclass
from decimal import Decimal

from techan.numeric import ZERO, format_decimal, to_decimal
from techan.timeperiod import TimePeriod


@dataclass
class Candle:
    """Open, close, high, low and volume for one time period."""

    period: TimePeriod
    open_price: Decimal = ZERO
    close_price: Decimal = ZERO
    max_price: Decimal = ZERO
    min_price: Decimal = ZERO
    volume: Decimal = ZERO
    trade_count: int = 0

    def __post_init__(self):
        self.open_price = to_decimal(self.open_price)
        self.close_price = to_decimal(self.close_price)
        self.max_price = to_decimal(self.max_price)
        self.min_price = to_decimal(self.min_price)
        self.volume = to_decimal(self.volume)

    def add_trade(self, trade_amount, trade_price):
        """Fold one trade into the candle's prices, volume and trade count."""
        amount = to_decimal(trade_amount)
        price = to_decimal(trade_price)

        if self.open_price.is_zero():
            self.open_price = price
        self.close_price = price

        if self.max_price.is_zero() or price > self.max_price:
            self.max_price = price
        if self.min_price.is_zero() or price < self.min_price:
            self.min_price = price

        self.volume = amount if self.volume.is_zero() else self.volume + amount
        self.trade_count += 1

    def __str__(self):
        return "\n".join(
            [
                f"Time:\t{self.period}",
                f"Open:\t{format_decimal(self.open_price, 2)}",
                f"Close:\t{format_decimal(self.close_price, 2)}",
                f"High:\t{format_decimal(self.max_price, 2)}",
                f"Low:\t{format_decimal(self.min_price, 2)}",
                f"Volume:\t{format_decimal(self.volume, 2)}",
            ]
        )