from datetime import datetime, timezone
from decimal import Decimal

from techan.numeric import format_decimal
from techan.order import Order, OrderSide
from techan.position import Position


def _buy(price="2"):
    return Order(side=OrderSide.BUY, amount=1, price=Decimal(price))


def test_no_orders_is_new():
    assert Position().is_new()


def test_new_position_is_open():
    position = Position(_buy())
    assert position.is_open()
    assert not position.is_new()
    assert not position.is_closed()


def test_buy_is_long():
    assert Position(_buy()).is_long()


def test_sell_is_short():
    position = Position(Order(side=OrderSide.SELL, amount=1, price=Decimal("2")))
    assert position.is_short()
    assert not position.is_long()


def test_enter():
    position = Position()
    order = _buy()
    position.enter(order)

    assert position.is_open()
    assert position.entrance_order.amount == order.amount
    assert position.entrance_order.price == order.price
    assert position.entrance_order.execution_time == order.execution_time


def test_close():
    position = Position()
    entrance = _buy()
    position.enter(entrance)
    assert position.is_open()
    assert position.entrance_order.price == entrance.price

    exit_order = Order(
        side=OrderSide.SELL,
        amount=1,
        price=Decimal("4"),
        execution_time=datetime.now(timezone.utc),
    )
    position.exit(exit_order)

    assert position.is_closed()
    assert position.exit_order.amount == exit_order.amount
    assert position.exit_order.price == exit_order.price
    assert position.exit_order.execution_time == exit_order.execution_time


def test_cost_basis_without_entrance_is_zero():
    assert format_decimal(Position().cost_basis()) == "0"


def test_cost_basis():
    position = Position()
    position.enter(_buy())
    assert format_decimal(position.cost_basis(), 2) == "2.00"


def test_exit_value_when_not_closed():
    position = Position()
    position.enter(_buy())
    assert format_decimal(position.exit_value(), 2) == "0.00"


def test_exit_value_when_closed():
    position = Position()
    position.enter(_buy())
    position.exit(Order(side=OrderSide.SELL, amount=1, price=Decimal("12")))
    assert format_decimal(position.exit_value(), 2) == "12.00"