"""Unit tests for the Order aggregate and its business rules."""

import dataclasses

import pytest

from storefront.domain.exceptions import InvalidStateError, ValidationError
from storefront.domain.model.order import (
    DEFAULT_SHIPPING_FEE,
    Order,
    OrderLine,
    OrderStatus,
)
from storefront.domain.model.value_objects import Money, Quantity


def _make_line(product_id: str = "P1", qty: int = 1, price: str = "40") -> OrderLine:
    """Helper to build a valid line."""
    return OrderLine(product_id=product_id, quantity=Quantity(qty), price=Money.of(price))


class TestOrderPlacement:

    def test_total_includes_shipping_fee(self):
        order = Order.place(
            user_id="u1",
            items=[_make_line("P1", 2, "40"), _make_line("P2", 1, "60")],
            shipping_fee=DEFAULT_SHIPPING_FEE,
        )
        assert order.total_amount == Money.of("190")
        assert order.subtotal == Money.of("140")

    def test_new_order_is_pending_without_id(self):
        order = Order.place("u1", [_make_line()], DEFAULT_SHIPPING_FEE)
        assert order.status == OrderStatus.PENDING
        assert order.id is None  # assigned by repository

    def test_shipping_address_defaults_to_empty(self):
        order = Order.place("u1", [_make_line()], DEFAULT_SHIPPING_FEE)
        assert order.shipping_address == ""

    def test_shipping_address_is_stripped(self):
        order = Order.place("u1", [_make_line()], DEFAULT_SHIPPING_FEE, "  12 MG Road ")
        assert order.shipping_address == "12 MG Road"

    def test_configured_shipping_fee_used(self):
        order = Order.place("u1", [_make_line(price="10")], Money.of("0"))
        assert order.total_amount == Money.of("10")

    def test_no_items_rejected(self):
        with pytest.raises(InvalidStateError, match="Cart is empty"):
            Order.place("u1", [], DEFAULT_SHIPPING_FEE)

    def test_total_is_stored_not_recomputed(self):
        order = Order.place("u1", [_make_line(price="40")], DEFAULT_SHIPPING_FEE)
        reloaded = dataclasses.replace(order, total_amount=Money.of("999"))
        assert reloaded.total_amount == Money.of("999")


class TestOrderLine:

    def test_line_total(self):
        assert _make_line(qty=3, price="15").line_total == Money.of("45")

    def test_line_is_immutable(self):
        line = _make_line()
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.price = Money.of("1")


class TestOrderStatusTransitions:

    def _order(self) -> Order:
        return Order.place("u1", [_make_line()], DEFAULT_SHIPPING_FEE)

    def test_forward_step(self):
        order = self._order()
        assert order.change_status(OrderStatus.PROCESSING) is True
        assert order.status == OrderStatus.PROCESSING

    def test_skipping_ahead_allowed(self):
        order = self._order()
        order.change_status(OrderStatus.SHIPPED)
        assert order.status == OrderStatus.SHIPPED

    def test_reversal_rejected(self):
        order = self._order()
        order.change_status(OrderStatus.DELIVERED)
        with pytest.raises(ValidationError, match="back to pending"):
            order.change_status(OrderStatus.PENDING)

    def test_same_status_is_noop(self):
        order = self._order()
        assert order.change_status(OrderStatus.PENDING) is False

    def test_parse_unknown_status(self):
        with pytest.raises(InvalidStateError, match="Invalid order status"):
            OrderStatus.parse("lost")

    def test_parse_is_case_insensitive(self):
        assert OrderStatus.parse("Shipped") == OrderStatus.SHIPPED
