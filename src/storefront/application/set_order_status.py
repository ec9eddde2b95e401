"""Application service: Set Order Status use case (admin only).

Status moves forward along pending -> processing -> shipped -> delivered.
Jumping ahead is accepted, moving back is rejected, and repeating the
current status changes nothing.  No other field of the order is touched.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.lookups import require_order
from storefront.application.views import order_dto
from storefront.domain.authorization import Action, Subject, authorize
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class SetOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository, product_repo: ProductRepository) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, subject: Subject, order_id: int, new_status: str) -> OrderDTO:
        authorize(subject, Action.SET_ORDER_STATUS)

        order = require_order(self._order_repo, order_id)
        status = OrderStatus.parse(new_status)
        previous = order.status

        if order.change_status(status):
            self._order_repo.update_status(order.id, order.status)  # type: ignore[arg-type]
            logger.info(
                "order_status_changed",
                order_id=order.id,
                from_status=previous.value,
                to_status=status.value,
                by=subject.user_id,
            )

        return order_dto(order, self._product_repo)
