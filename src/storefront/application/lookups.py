"""Load-or-fail helpers used by several handlers."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


def require_user(user_repo: UserRepository, user_id: str) -> User:
    user = user_repo.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundError(f"User '{user_id}' not found")
    return user


def require_product(product_repo: ProductRepository, product_id: str) -> Product:
    product = product_repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError("Product not found")
    return product


def require_order(order_repo: OrderRepository, order_id: int) -> Order:
    order = order_repo.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundError(f"Order #{order_id} not found")
    return order
