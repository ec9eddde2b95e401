"""Application service: Show Product use case (query, public)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.lookups import require_product
from storefront.application.views import product_dto
from storefront.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        return product_dto(require_product(self._product_repo, product_id))
