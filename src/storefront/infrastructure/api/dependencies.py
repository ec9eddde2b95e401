"""Request-scoped dependencies: the service container and the caller's identity."""

from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.application.user_lock import UserLockRegistry, default_user_locks
from storefront.domain.authorization import Subject
from storefront.domain.exceptions import UnauthenticatedError
from storefront.domain.model.order import DEFAULT_SHIPPING_FEE
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher
from storefront.infrastructure.security import TokenService

_bearer = HTTPBearer(auto_error=False)


@dataclass
class Container:
    """Everything the routes need, built once per application."""

    product_repo: ProductRepository
    user_repo: UserRepository
    order_repo: OrderRepository
    hasher: PasswordHasher
    tokens: TokenService
    shipping_fee: Money = DEFAULT_SHIPPING_FEE
    locks: UserLockRegistry = field(default=default_user_locks)


def get_container(request: Request) -> Container:
    return request.app.state.container


def current_subject(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    container: Container = Depends(get_container),
) -> Subject:
    """Resolve the bearer token into a Subject, or fail with 401."""
    if credentials is None:
        raise UnauthenticatedError("No token, authorization denied")
    return container.tokens.resolve(credentials.credentials)
