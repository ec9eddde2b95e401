"""Cart: the mutable line-item list embedded in each User.

The cart is not an aggregate of its own; it lives inside the User and is
saved together with it.  Every mutation bumps ``version`` so the
repository can reject a save built on a stale read.

Invariants:
- at most one CartLine per product
- a line's quantity is always positive (setting <= 0 removes the line)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Quantity


@dataclass
class CartLine:
    product_id: str
    quantity: Quantity


@dataclass
class Cart:
    lines: list[CartLine] = field(default_factory=list)
    version: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def add(self, product_id: str, quantity: Quantity) -> None:
        """Add *quantity* of a product, merging into an existing line."""
        line = self.find(product_id)
        if line is not None:
            line.quantity = line.quantity + quantity
        else:
            self.lines.append(CartLine(product_id=product_id, quantity=quantity))
        self._touch()

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Set (not increment) a line's quantity.

        ``quantity <= 0`` removes the line and is a no-op when the line is
        absent.  A positive quantity for a product not in the cart raises
        EntityNotFoundError.
        """
        if quantity <= 0:
            self.remove(product_id)
            return
        line = self.find(product_id)
        if line is None:
            raise EntityNotFoundError(f"Product '{product_id}' is not in the cart")
        line.quantity = Quantity(quantity)
        self._touch()

    def remove(self, product_id: str) -> None:
        """Remove a product's line. Removing an absent line does nothing."""
        remaining = [line for line in self.lines if line.product_id != product_id]
        if len(remaining) != len(self.lines):
            self.lines = remaining
            self._touch()

    def clear(self) -> None:
        if self.lines:
            self.lines = []
            self._touch()

    def _touch(self) -> None:
        self.version += 1
