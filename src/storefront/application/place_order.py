"""Application service: Place Order use case (checkout).

Turns the caller's cart into a pending Order and empties the cart.

Consistency rules:
- The whole read-snapshot-write-clear sequence runs under the user's
  lock, so a double submit yields one order and an empty-cart error.
- Nothing is written unless every cart product still exists.
- The order is written before the cart is cleared.  The order remembers
  which cart version it consumed; if a previous attempt wrote the order
  but failed to clear the cart, the next attempt finds that order,
  finishes the clear and returns it instead of creating a second one.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.lookups import require_user
from storefront.application.user_lock import UserLockRegistry, default_user_locks
from storefront.application.views import order_dto
from storefront.domain.authorization import Subject
from storefront.domain.exceptions import InvalidStateError
from storefront.domain.model.order import DEFAULT_SHIPPING_FEE, Order
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.price_snapshot_service import PriceSnapshotService

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        user_repo: UserRepository,
        product_repo: ProductRepository,
        shipping_fee: Money = DEFAULT_SHIPPING_FEE,
        locks: UserLockRegistry = default_user_locks,
    ) -> None:
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._product_repo = product_repo
        self._shipping_fee = shipping_fee
        self._locks = locks

    def handle(self, subject: Subject, shipping_address: str | None = None) -> OrderDTO:
        """Place an order from the subject's cart.

        Steps:
        1. Load the user and their cart (under the user's lock).
        2. Snapshot every line's current catalogue price.
        3. Let ``Order.place`` compute the total (lines + shipping fee).
        4. Persist the order, then clear and save the cart.
        """
        with self._locks.hold(subject.user_id):
            user = require_user(self._user_repo, subject.user_id)
            cart_version = user.cart.version

            existing = self._order_repo.find_by_cart_version(user.id, cart_version)
            if existing is not None and not user.cart.is_empty:
                logger.warning(
                    "checkout_recovered",
                    user_id=user.id,
                    order_id=existing.id,
                    cart_version=cart_version,
                )
                self._clear_cart(user, cart_version)
                return order_dto(existing, self._product_repo)

            if user.cart.is_empty:
                raise InvalidStateError("Cart is empty")

            lines = PriceSnapshotService(self._product_repo).snapshot(user.cart)
            order = Order.place(
                user_id=user.id,
                items=lines,
                shipping_fee=self._shipping_fee,
                shipping_address=shipping_address,
                cart_version=cart_version,
            )
            self._order_repo.add(order)
            logger.info(
                "order_placed",
                order_id=order.id,
                user_id=user.id,
                lines=len(order.items),
                total_amount=str(order.total_amount.amount),
            )

            self._clear_cart(user, cart_version)

        return order_dto(order, self._product_repo)

    def _clear_cart(self, user: User, cart_version: int) -> None:
        user.cart.clear()
        self._user_repo.save(user, expected_version=cart_version)
