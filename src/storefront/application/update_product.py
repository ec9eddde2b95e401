"""Application service: Update Product use case (admin)."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO
from storefront.application.lookups import require_product
from storefront.application.views import product_dto
from storefront.domain.authorization import Action, Subject, authorize
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Category
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        subject: Subject,
        product_id: str,
        price: str | None = None,
        name: str | None = None,
        category: str | None = None,
        description: str | None = None,
        image: str | None = None,
        stock: int | None = None,
    ) -> ProductDTO:
        """Update a product in place.

        This does NOT affect any existing orders; they captured a
        price snapshot at checkout.
        """
        authorize(subject, Action.MANAGE_CATALOG)
        product = require_product(self._product_repo, product_id)

        if name is not None:
            clash = self._product_repo.get_by_name(name.strip())
            if clash is not None and clash.id != product.id:
                raise ValidationError(f"Product '{name.strip()}' already exists")

        if price is not None:
            product.update_price(Money.of(price))
        product.update_details(
            name=name,
            category=Category.parse(category) if category is not None else None,
            description=description,
            image=image,
            stock=stock,
        )
        self._product_repo.save(product)
        logger.info("product_updated", product_id=product.id)
        return product_dto(product)
