"""Application service: List Orders use case (query, owner's orders)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.views import order_dto
from storefront.domain.authorization import Subject
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, product_repo: ProductRepository) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, subject: Subject) -> list[OrderDTO]:
        """Return the subject's own orders, newest first."""
        orders = self._order_repo.find_by_user(subject.user_id)
        return [order_dto(order, self._product_repo) for order in orders]
