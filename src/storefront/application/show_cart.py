"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.lookups import require_user
from storefront.application.views import cart_dto
from storefront.domain.authorization import Subject
from storefront.domain.model.order import DEFAULT_SHIPPING_FEE
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class ShowCartHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        product_repo: ProductRepository,
        shipping_fee: Money = DEFAULT_SHIPPING_FEE,
    ) -> None:
        self._user_repo = user_repo
        self._product_repo = product_repo
        self._shipping_fee = shipping_fee

    def handle(self, subject: Subject) -> CartDTO:
        user = require_user(self._user_repo, subject.user_id)
        return cart_dto(user.cart, self._product_repo, self._shipping_fee)
