"""Checkout against the JSON store when the in-process user lock is not shared.

Two handlers with their own lock registries stand in for two processes
(the CLI and the HTTP server) working on the same data files.
"""

import threading

from storefront.application.place_order import PlaceOrderHandler
from storefront.application.user_lock import UserLockRegistry
from storefront.domain.authorization import Subject
from storefront.domain.exceptions import ConflictError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_product_repository import JsonProductRepository
from storefront.infrastructure.persistence.json_user_repository import JsonUserRepository

ALICE = Subject(user_id="1", role=Role.USER)


class _ProductsWithRendezvous(JsonProductRepository):
    """Holds every thread at its first product lookup until all have read the cart."""

    def __init__(self, file_path, barrier: threading.Barrier) -> None:
        super().__init__(file_path)
        self._barrier = barrier
        self._seen = threading.local()

    def get_by_id(self, product_id: str) -> Product | None:
        if not getattr(self._seen, "waited", False):
            self._seen.waited = True
            self._barrier.wait()
        return super().get_by_id(product_id)


def _store(tmp_path, barrier):
    products = _ProductsWithRendezvous(tmp_path / "products.json", barrier)
    products.save(
        Product(id="P1", name="Fresh Tomatoes", price=Money.of("40"), category=Category.VEGETABLES)
    )
    users = JsonUserRepository(tmp_path / "users.json")
    alice = User(id="1", name="Alice", email="alice@example.com", password_hash="x")
    alice.cart.add("P1", Quantity(2))
    users.save(alice)
    return products, users, JsonOrderRepository(tmp_path / "orders.json")


class TestCheckoutWithoutSharedLock:

    def test_one_cart_yields_one_order(self, tmp_path):
        barrier = threading.Barrier(2, timeout=10)
        products, users, orders = _store(tmp_path, barrier)
        handlers = [
            PlaceOrderHandler(orders, users, products, locks=UserLockRegistry())
            for _ in range(2)
        ]
        outcomes: list[str] = []

        def submit(handler):
            try:
                handler.handle(ALICE)
                outcomes.append("placed")
            except ConflictError:
                outcomes.append("conflict")

        threads = [threading.Thread(target=submit, args=(h,)) for h in handlers]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(outcomes) == ["conflict", "placed"]
        assert len(orders.list_all()) == 1
        assert users.get_by_id("1").cart.is_empty

