"""Application service: List All Orders use case (admin query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.views import order_dto
from storefront.domain.authorization import Action, Subject, authorize
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class ListAllOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo

    def handle(self, subject: Subject) -> list[OrderDTO]:
        """Every order in the store, newest first, with owner name and email."""
        authorize(subject, Action.LIST_ALL_ORDERS)

        owners = {user.id: user for user in self._user_repo.list_all()}
        return [
            order_dto(order, self._product_repo, owner=owners.get(order.user_id))
            for order in self._order_repo.list_all()
        ]
