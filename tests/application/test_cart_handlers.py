"""Integration tests for the cart use cases."""

import threading

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.set_cart_quantity import SetCartQuantityHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.user_lock import UserLockRegistry
from storefront.domain.authorization import Subject
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository, FakeUserRepository

ALICE = Subject(user_id="1", role=Role.USER)


def _setup():
    products = FakeProductRepository([
        Product(id="P1", name="Fresh Tomatoes", price=Money.of("40"), category=Category.VEGETABLES),
        Product(id="P2", name="Fresh Milk", price=Money.of("60"), category=Category.DAIRY),
    ])
    users = FakeUserRepository([
        User(id="1", name="Alice", email="alice@example.com", password_hash="x"),
    ])
    locks = UserLockRegistry()
    return users, products, locks


class TestAddToCart:

    def test_add_returns_resolved_cart(self):
        users, products, locks = _setup()
        dto = AddToCartHandler(users, products, locks=locks).handle(ALICE, "P1", 2)

        assert len(dto.items) == 1
        assert dto.items[0].product.name == "Fresh Tomatoes"
        assert dto.items[0].line_total == "80.00"
        assert dto.subtotal == "80.00"
        assert dto.total == "130.00"

    def test_quantity_defaults_to_one(self):
        users, products, locks = _setup()
        dto = AddToCartHandler(users, products, locks=locks).handle(ALICE, "P1")
        assert dto.items[0].quantity == 1

    def test_adding_twice_accumulates_one_line(self):
        users, products, locks = _setup()
        handler = AddToCartHandler(users, products, locks=locks)
        handler.handle(ALICE, "P1", 2)
        handler.handle(ALICE, "P1", 3)

        cart = users.get_by_id("1").cart
        assert len(cart.lines) == 1
        assert cart.find("P1").quantity.value == 5

    def test_unknown_product_rejected(self):
        users, products, locks = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            AddToCartHandler(users, products, locks=locks).handle(ALICE, "nope", 1)
        assert users.saves == 0

    def test_non_positive_quantity_rejected(self):
        users, products, locks = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            AddToCartHandler(users, products, locks=locks).handle(ALICE, "P1", 0)

    def test_concurrent_adds_do_not_lose_updates(self):
        users, products, locks = _setup()
        handler = AddToCartHandler(users, products, locks=locks)
        threads = [
            threading.Thread(target=handler.handle, args=(ALICE, "P1", 1))
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert users.get_by_id("1").cart.find("P1").quantity.value == 8


class TestSetCartQuantity:

    def test_sets_quantity(self):
        users, products, locks = _setup()
        AddToCartHandler(users, products, locks=locks).handle(ALICE, "P1", 2)
        dto = SetCartQuantityHandler(users, products, locks=locks).handle(ALICE, "P1", 7)
        assert dto.items[0].quantity == 7

    def test_zero_removes_and_repeats_as_noop(self):
        users, products, locks = _setup()
        AddToCartHandler(users, products, locks=locks).handle(ALICE, "P1", 2)
        handler = SetCartQuantityHandler(users, products, locks=locks)

        assert handler.handle(ALICE, "P1", 0).items == []
        assert handler.handle(ALICE, "P1", 0).items == []

    def test_missing_line_with_positive_quantity_rejected(self):
        users, products, locks = _setup()
        with pytest.raises(EntityNotFoundError, match="not in the cart"):
            SetCartQuantityHandler(users, products, locks=locks).handle(ALICE, "P1", 3)


class TestRemoveAndClear:

    def test_remove_is_idempotent(self):
        users, products, locks = _setup()
        AddToCartHandler(users, products, locks=locks).handle(ALICE, "P1", 2)
        handler = RemoveFromCartHandler(users, products, locks=locks)

        handler.handle(ALICE, "P1")
        dto = handler.handle(ALICE, "P1")

        assert dto.items == []
        assert users.get_by_id("1").cart.is_empty

    def test_clear_empties_cart(self):
        users, products, locks = _setup()
        add = AddToCartHandler(users, products, locks=locks)
        add.handle(ALICE, "P1", 1)
        add.handle(ALICE, "P2", 1)

        dto = ClearCartHandler(users, products, locks=locks).handle(ALICE)

        assert dto.items == []
        assert dto.total == "0.00"
        assert users.get_by_id("1").cart.is_empty


class TestShowCart:

    def test_deleted_product_shown_without_details(self):
        users, products, locks = _setup()
        AddToCartHandler(users, products, locks=locks).handle(ALICE, "P1", 1)
        AddToCartHandler(users, products, locks=locks).handle(ALICE, "P2", 1)
        products.delete("P2")

        dto = ShowCartHandler(users, products).handle(ALICE)

        assert dto.items[1].product is None
        assert dto.subtotal == "40.00"
