"""Application service: Clear Cart use case."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.lookups import require_user
from storefront.application.user_lock import UserLockRegistry, default_user_locks
from storefront.application.views import cart_dto
from storefront.domain.authorization import Subject
from storefront.domain.model.order import DEFAULT_SHIPPING_FEE
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class ClearCartHandler:

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

    def handle(self, subject: Subject) -> CartDTO:
        with self._locks.hold(subject.user_id):
            user = require_user(self._user_repo, subject.user_id)
            expected = user.cart.version
            user.cart.clear()
            if user.cart.version != expected:
                self._user_repo.save(user, expected_version=expected)

        return cart_dto(user.cart, self._product_repo, self._shipping_fee)
