"""Storefront FastAPI application.

Usage:
    uvicorn --factory storefront.infrastructure.api.app:create_app --port 8000
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ForbiddenError,
    InvalidStateError,
    UnauthenticatedError,
)
from storefront.infrastructure import bootstrap
from storefront.infrastructure.api.dependencies import Container
from storefront.infrastructure.api.routes import (
    auth_router,
    cart_router,
    order_router,
    product_router,
)
from storefront.infrastructure.logging_config import configure_logging

logger = structlog.get_logger(__name__)

_STATUS_BY_ERROR: list[tuple[type[DomainException], int]] = [
    (UnauthenticatedError, 401),
    (ForbiddenError, 403),
    (EntityNotFoundError, 404),
    (ConflictError, 409),
    (InvalidStateError, 400),
]


def status_for(exc: DomainException) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


async def _domain_error(request: Request, exc: DomainException) -> JSONResponse:
    status = status_for(exc)
    logger.info(
        "request_rejected",
        path=request.url.path,
        status=status,
        error=type(exc).__name__,
        reason=str(exc),
    )
    headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
    return JSONResponse(status_code=status, content={"message": str(exc)}, headers=headers)


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_failed", path=request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Server error"})


def default_container() -> Container:
    return Container(
        product_repo=bootstrap.product_repository(),
        user_repo=bootstrap.user_repository(),
        order_repo=bootstrap.order_repository(),
        hasher=bootstrap.password_hasher(),
        tokens=bootstrap.token_service(),
        shipping_fee=bootstrap.settings().shipping_fee,
    )


def create_app(container: Container | None = None) -> FastAPI:
    configure_logging(bootstrap.settings().log_level)

    app = FastAPI(
        title="Storefront API",
        description="Grocery storefront catalog, carts and orders",
    )
    app.state.container = container if container is not None else default_container()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(DomainException, _domain_error)
    app.add_exception_handler(Exception, _unexpected_error)

    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(order_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app

