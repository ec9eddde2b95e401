"""JSON-file-backed implementation of OrderRepository.

Orders are append-only: ``add`` writes a new document and
``update_status`` rewrites only the status field.  A cart version can be
checked out once: ``add`` refuses a second order for the same
``(user_id, cart_version)`` while holding the file lock.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    InvalidStateError,
)
from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.model.value_objects import CURRENCY, Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return max((raw["id"] for raw in self._file.load()), default=0) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find_by_user(self, user_id: str) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._file.load() if raw["user_id"] == user_id]
        return self._newest_first(orders)

    def find_by_cart_version(self, user_id: str, cart_version: int) -> Order | None:
        for raw in self._file.load():
            if raw["user_id"] == user_id and raw.get("cart_version") == cart_version:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return self._newest_first([self._to_domain(raw) for raw in self._file.load()])

    def add(self, order: Order) -> Order:
        if order.id is not None:
            raise InvalidStateError(f"Order #{order.id} has already been placed")
        with self._file.lock:
            orders = self._file.load()
            if order.cart_version is not None and any(
                raw["user_id"] == order.user_id and raw.get("cart_version") == order.cart_version
                for raw in orders
            ):
                raise ConflictError(
                    f"Cart version {order.cart_version} of user '{order.user_id}' "
                    "was already checked out"
                )
            order.id = max((raw["id"] for raw in orders), default=0) + 1
            orders.append(self._to_raw(order))
            self._file.persist(orders)
        return order

    def update_status(self, order_id: int, status: OrderStatus) -> None:
        with self._file.lock:
            orders = self._file.load()
            for raw in orders:
                if raw["id"] == order_id:
                    raw["status"] = status.value
                    break
            else:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            self._file.persist(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _newest_first(orders: list[Order]) -> list[Order]:
        return sorted(orders, key=lambda o: (o.created_at, o.id or 0), reverse=True)

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "shipping_address": order.shipping_address,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "cart_version": order.cart_version,
            "items": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "price": str(item.price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", CURRENCY)
        items = tuple(
            OrderLine(
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                price=Money(Decimal(i["price"]), currency),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), currency),
            shipping_address=raw.get("shipping_address", ""),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            cart_version=raw.get("cart_version"),
        )
