"""FastAPI routes for auth, products, cart and orders."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.application.add_product import AddProductHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.authenticate_user import AuthenticateUserHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_all_orders import ListAllOrdersHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.set_cart_quantity import SetCartQuantityHandler
from storefront.application.set_order_status import SetOrderStatusHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.show_profile import ShowProfileHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.authorization import Subject
from storefront.infrastructure.api.dependencies import (
    Container,
    current_subject,
    get_container,
)
from storefront.infrastructure.api.schemas import (
    AddToCartRequest,
    CartResponse,
    CreateProductRequest,
    LoginRequest,
    MessageResponse,
    OrderResponse,
    PlaceOrderRequest,
    ProductResponse,
    RegisterRequest,
    SetCartQuantityRequest,
    SetOrderStatusRequest,
    TokenResponse,
    UpdateProductRequest,
    UserResponse,
)

# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/api/auth", tags=["auth"])


@auth_router.post("/register", status_code=201, response_model=UserResponse)
def register(body: RegisterRequest, c: Container = Depends(get_container)):
    handler = RegisterUserHandler(c.user_repo, c.hasher)
    return handler.handle(name=body.name, email=body.email, password=body.password)


@auth_router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, c: Container = Depends(get_container)) -> TokenResponse:
    user = AuthenticateUserHandler(c.user_repo, c.hasher).handle(body.email, body.password)
    return TokenResponse(token=c.tokens.issue(user.id, user.role))


@auth_router.get("/profile", response_model=UserResponse)
def profile(
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    return ShowProfileHandler(c.user_repo).handle(subject)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/api/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
def list_products(category: str | None = None, c: Container = Depends(get_container)):
    return ListProductsHandler(c.product_repo).handle(category)


@product_router.get("/category/{category}", response_model=list[ProductResponse])
def list_products_in_category(category: str, c: Container = Depends(get_container)):
    return ListProductsHandler(c.product_repo).handle(category)


@product_router.get("/{product_id}", response_model=ProductResponse)
def show_product(product_id: str, c: Container = Depends(get_container)):
    return ShowProductHandler(c.product_repo).handle(product_id)


@product_router.post("", status_code=201, response_model=ProductResponse)
def create_product(
    body: CreateProductRequest,
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    return AddProductHandler(c.product_repo).handle(
        subject,
        name=body.name,
        price=str(body.price),
        category=body.category,
        description=body.description,
        image=body.image,
        stock=body.stock,
    )


@product_router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: str,
    body: UpdateProductRequest,
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    return UpdateProductHandler(c.product_repo).handle(
        subject,
        product_id,
        price=str(body.price) if body.price is not None else None,
        name=body.name,
        category=body.category,
        description=body.description,
        image=body.image,
        stock=body.stock,
    )


@product_router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: str,
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
) -> MessageResponse:
    DeleteProductHandler(c.product_repo).handle(subject, product_id)
    return MessageResponse(message="Product deleted")


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/api/cart", tags=["cart"])


def _cart_args(c: Container) -> dict:
    return {"user_repo": c.user_repo, "product_repo": c.product_repo, "shipping_fee": c.shipping_fee}


@cart_router.get("", response_model=CartResponse)
def show_cart(
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    return ShowCartHandler(**_cart_args(c)).handle(subject)


@cart_router.post("", response_model=CartResponse)
def add_cart_item(
    body: AddToCartRequest,
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    handler = AddToCartHandler(**_cart_args(c), locks=c.locks)
    return handler.handle(subject, body.product_id, body.quantity)


@cart_router.put("/{product_id}", response_model=CartResponse)
def set_cart_item_quantity(
    product_id: str,
    body: SetCartQuantityRequest,
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    handler = SetCartQuantityHandler(**_cart_args(c), locks=c.locks)
    return handler.handle(subject, product_id, body.quantity)


@cart_router.delete("/{product_id}", response_model=CartResponse)
def remove_cart_item(
    product_id: str,
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    handler = RemoveFromCartHandler(**_cart_args(c), locks=c.locks)
    return handler.handle(subject, product_id)


@cart_router.delete("", response_model=CartResponse)
def clear_cart(
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    return ClearCartHandler(**_cart_args(c), locks=c.locks).handle(subject)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
def place_order(
    body: PlaceOrderRequest | None = None,
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    """Check out the caller's cart.

    1. Snapshot current prices into order lines
    2. Persist the order (status pending)
    3. Empty the cart
    """
    handler = PlaceOrderHandler(
        order_repo=c.order_repo,
        user_repo=c.user_repo,
        product_repo=c.product_repo,
        shipping_fee=c.shipping_fee,
        locks=c.locks,
    )
    address = body.shipping_address if body is not None else None
    return handler.handle(subject, shipping_address=address)


@order_router.get("", response_model=list[OrderResponse])
def list_orders(
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    return ListOrdersHandler(c.order_repo, c.product_repo).handle(subject)


# Declared before /{order_id} so "admin" is not parsed as an id.
@order_router.get("/admin/all", response_model=list[OrderResponse])
def list_all_orders(
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    return ListAllOrdersHandler(c.order_repo, c.user_repo, c.product_repo).handle(subject)


@order_router.get("/{order_id}", response_model=OrderResponse)
def show_order(
    order_id: int,
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    return ShowOrderHandler(c.order_repo, c.product_repo).handle(subject, order_id)


@order_router.put("/{order_id}/status", response_model=OrderResponse)
def set_order_status(
    order_id: int,
    body: SetOrderStatusRequest,
    subject: Subject = Depends(current_subject),
    c: Container = Depends(get_container),
):
    return SetOrderStatusHandler(c.order_repo, c.product_repo).handle(subject, order_id, body.status)
