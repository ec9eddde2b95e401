"""Domain service: Price Snapshot.

Turns cart lines into order lines by joining each line with the current
catalogue price.  This is the only place a price is copied from a
Product into order data.

The two-phase approach (resolve-then-build) guarantees that a cart
referencing a product that no longer exists fails as a whole, so an
order with a missing line is never built.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderLine
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class PriceSnapshotService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def resolve_products(self, cart: Cart) -> dict[str, Product]:
        """Load the current Product for every line, failing on the first gap."""
        products: dict[str, Product] = {}
        for line in cart.lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product '{line.product_id}' in cart no longer exists"
                )
            products[line.product_id] = product
        return products

    def snapshot(self, cart: Cart) -> list[OrderLine]:
        """Build one OrderLine per cart line with today's prices.

        Phase 1 resolves every product; phase 2 builds lines.  Nothing is
        built unless every product resolved.
        """
        products = self.resolve_products(cart)

        return [
            OrderLine(
                product_id=line.product_id,
                quantity=line.quantity,
                price=products[line.product_id].price,  # <-- price snapshot
            )
            for line in cart.lines
        ]
