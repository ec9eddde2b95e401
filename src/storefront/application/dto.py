"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the application layer and the CLI / HTTP
layers without exposing domain internals.  Money fields are decimal
strings with two places (e.g. "190.00"); formatting with a currency
symbol is up to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    category: str
    description: str
    image: str
    stock: int


@dataclass(frozen=True)
class CartLineDTO:
    """A cart line joined with its product for display.

    ``product`` is None when the product was removed from the catalogue
    after it was added to the cart.
    """

    product_id: str
    product: ProductDTO | None
    quantity: int
    line_total: str | None


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    subtotal: str
    shipping_fee: str
    total: str
    currency: str
    version: int


@dataclass(frozen=True)
class OwnerDTO:
    id: str
    name: str
    email: str


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product: ProductDTO | None
    quantity: int
    price: str  # snapshot price, not the current catalogue price
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    status: str
    items: list[OrderLineDTO]
    total_amount: str
    currency: str
    shipping_address: str
    created_at: str
    owner: OwnerDTO | None = None


@dataclass(frozen=True)
class UserDTO:
    id: str
    name: str
    email: str
    role: str
