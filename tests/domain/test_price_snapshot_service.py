"""Unit tests for the price snapshot domain service."""

import pytest

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.price_snapshot_service import PriceSnapshotService
from tests.fakes import FakeProductRepository


def _catalog() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id="1", name="Fresh Tomatoes", price=Money.of("40"), category=Category.VEGETABLES),
        Product(id="2", name="Fresh Milk", price=Money.of("60"), category=Category.DAIRY),
    ])


class TestSnapshot:

    def test_one_line_per_cart_line_with_current_price(self):
        cart = Cart()
        cart.add("1", Quantity(2))
        cart.add("2", Quantity(1))

        lines = PriceSnapshotService(_catalog()).snapshot(cart)

        assert [(l.product_id, l.quantity.value, l.price) for l in lines] == [
            ("1", 2, Money.of("40")),
            ("2", 1, Money.of("60")),
        ]

    def test_missing_product_fails_whole_snapshot(self):
        cart = Cart()
        cart.add("1", Quantity(1))
        cart.add("404", Quantity(1))

        with pytest.raises(EntityNotFoundError, match="no longer exists"):
            PriceSnapshotService(_catalog()).snapshot(cart)
