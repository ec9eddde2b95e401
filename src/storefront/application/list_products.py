"""Application service: List Products use case (query, public)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.views import product_dto
from storefront.domain.model.product import Category
from storefront.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str | None = None) -> list[ProductDTO]:
        parsed = Category.parse(category) if category else None
        return [product_dto(p) for p in self._product_repo.list_all(parsed)]
