"""Application service: Add Product use case (admin)."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO
from storefront.application.views import product_dto
from storefront.domain.authorization import Action, Subject, authorize
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import DEFAULT_STOCK, Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        subject: Subject,
        name: str,
        price: str,
        category: str,
        description: str = "",
        image: str = "",
        stock: int = DEFAULT_STOCK,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        authorize(subject, Action.MANAGE_CATALOG)

        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product(
            id=self._product_repo.next_id(),
            name=name,
            price=Money.of(price),
            category=Category.parse(category),
            description=description,
            image=image,
            stock=stock,
        )
        self._product_repo.save(product)
        logger.info("product_added", product_id=product.id, name=product.name)
        return product_dto(product)
