"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.lookups import require_order
from storefront.application.views import order_dto
from storefront.domain.authorization import Action, Subject, authorize
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository, product_repo: ProductRepository) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, subject: Subject, order_id: int) -> OrderDTO:
        order = require_order(self._order_repo, order_id)
        authorize(subject, Action.VIEW_ORDER, owner_id=order.user_id)
        return order_dto(order, self._product_repo)
