"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)
from storefront.infrastructure.security import PasslibPasswordHasher, TokenService


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(settings().data_dir / "users.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().data_dir / "orders.json")


def password_hasher() -> PasslibPasswordHasher:
    return PasslibPasswordHasher()


def token_service() -> TokenService:
    cfg = settings()
    return TokenService(cfg.jwt_secret, cfg.jwt_expires_min)
