"""Application service: Add To Cart use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO
from storefront.application.lookups import require_product, require_user
from storefront.application.user_lock import UserLockRegistry, default_user_locks
from storefront.application.views import cart_dto
from storefront.domain.authorization import Subject
from storefront.domain.model.order import DEFAULT_SHIPPING_FEE
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
        shipping_fee: Money = DEFAULT_SHIPPING_FEE,
        locks: UserLockRegistry = default_user_locks,
    ) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo
        self._shipping_fee = shipping_fee
        self._locks = locks

    def handle(self, subject: Subject, product_id: str, quantity: int = 1) -> CartDTO:
        """Add a product to the cart, incrementing an existing line."""
        require_product(self._product_repo, product_id)
        qty = Quantity(quantity)

        with self._locks.hold(subject.user_id):
            user = require_user(self._user_repo, subject.user_id)
            expected = user.cart.version
            user.cart.add(product_id, qty)
            self._user_repo.save(user, expected_version=expected)

        logger.info(
            "cart_item_added",
            user_id=subject.user_id,
            product_id=product_id,
            quantity=quantity,
        )
        return cart_dto(user.cart, self._product_repo, self._shipping_fee)
