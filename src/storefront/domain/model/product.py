"""Product aggregate.

Products live independently of carts and orders. Administrators change
prices and details in place; there is no versioning of the catalogue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

DEFAULT_STOCK = 100


class Category(Enum):
    VEGETABLES = "vegetables"
    DAIRY = "dairy"
    ICECREAM = "icecream"
    GENERAL = "general"

    @staticmethod
    def parse(raw: str) -> Category:
        try:
            return Category(raw.strip().lower())
        except ValueError as exc:
            allowed = ", ".join(c.value for c in Category)
            raise ValidationError(
                f"Unknown category '{raw}' (expected one of: {allowed})"
            ) from exc


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price and detail updates are
    legitimate mutations on the aggregate.
    """

    id: str
    name: str
    price: Money
    category: Category
    description: str = ""
    image: str = ""
    stock: int = DEFAULT_STOCK

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        self.name = self.name.strip()
        if isinstance(self.stock, bool) or not isinstance(self.stock, int) or self.stock < 0:
            raise ValidationError("Product stock must be a non-negative integer")

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because order lines
        capture a price snapshot at checkout.
        """
        self.price = new_price

    def update_details(
        self,
        name: str | None = None,
        category: Category | None = None,
        description: str | None = None,
        image: str | None = None,
        stock: int | None = None,
    ) -> None:
        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            self.name = name.strip()
        if category is not None:
            self.category = category
        if description is not None:
            self.description = description
        if image is not None:
            self.image = image
        if stock is not None:
            if stock < 0:
                raise ValidationError("Product stock must be a non-negative integer")
            self.stock = stock
