"""Order aggregate: the immutable record of a checkout.

Line items, prices and the total are fixed when the order is placed.
The delivery status is the only thing that changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import InvalidStateError, ValidationError
from storefront.domain.model.value_objects import Money, Quantity

# Flat fee added to every order; deployments override it via configuration.
DEFAULT_SHIPPING_FEE = Money(Decimal("50"))


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"

    @staticmethod
    def parse(raw: str) -> OrderStatus:
        try:
            return OrderStatus((raw or "").strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise InvalidStateError(
                f"Invalid order status '{raw}' (expected one of: {allowed})"
            ) from exc

    @property
    def rank(self) -> int:
        return _STATUS_SEQUENCE.index(self)


_STATUS_SEQUENCE = [
    OrderStatus.PENDING,
    OrderStatus.PROCESSING,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
]


@dataclass(frozen=True)
class OrderLine:
    """A product, a quantity and the price captured at checkout."""

    product_id: str
    quantity: Quantity
    price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders; it computes the total once.
    The ``__init__`` is intentionally simple so the repository can
    reconstitute persisted orders without recomputing anything.
    """

    id: int | None
    user_id: str
    items: tuple[OrderLine, ...]
    total_amount: Money
    shipping_address: str = ""
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    cart_version: int | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(
        user_id: str,
        items: list[OrderLine],
        shipping_fee: Money,
        shipping_address: str | None = None,
        cart_version: int | None = None,
    ) -> Order:
        """Create a new pending order from already price-snapshotted lines."""
        if not items:
            raise InvalidStateError("Cart is empty")

        total = shipping_fee
        for item in items:
            total = total + item.line_total

        return Order(
            id=None,
            user_id=user_id,
            items=tuple(items),
            total_amount=total,
            shipping_address=(shipping_address or "").strip(),
            cart_version=cart_version,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> bool:
        """Move the order forward along pending → processing → shipped → delivered.

        Skipping ahead is allowed, going back is not.  Setting the current
        status again is a no-op and returns False.
        """
        if new_status == self.status:
            return False
        if new_status.rank < self.status.rank:
            raise ValidationError(
                f"Cannot move order from {self.status.value} back to {new_status.value}"
            )
        self.status = new_status
        return True

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
