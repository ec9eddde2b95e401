"""Application service: Delete Product use case (admin).

Existing orders keep their lines; they only lose the product details
shown next to them.  Carts that still reference the product cannot be
checked out until the line is removed.
"""

from __future__ import annotations

import structlog

from storefront.domain.authorization import Action, Subject, authorize
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, subject: Subject, product_id: str) -> None:
        authorize(subject, Action.MANAGE_CATALOG)
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError("Product not found")
        logger.info("product_deleted", product_id=product_id)
