"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def find_by_user(self, user_id: str) -> list[Order]:
        """Return a user's orders, newest first."""

    @abstractmethod
    def find_by_cart_version(self, user_id: str, cart_version: int) -> Order | None:
        """Return the order that consumed this cart version, if any."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order, assigning its ID.

        Raises ConflictError if the user already has an order for the
        same cart version.
        """

    @abstractmethod
    def update_status(self, order_id: int, status: OrderStatus) -> None:
        """Change only the status of a stored order."""
