"""Mapping from domain objects to DTOs, shared by the query and command handlers."""

from __future__ import annotations

from storefront.application.dto import (
    CartDTO,
    CartLineDTO,
    OrderDTO,
    OrderLineDTO,
    OwnerDTO,
    ProductDTO,
    UserDTO,
)
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


def amount(money: Money) -> str:
    return f"{money.amount:.2f}"


def product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=amount(product.price),
        category=product.category.value,
        description=product.description,
        image=product.image,
        stock=product.stock,
    )


def user_dto(user: User) -> UserDTO:
    return UserDTO(id=user.id, name=user.name, email=user.email, role=user.role.value)


def cart_dto(cart: Cart, product_repo: ProductRepository, shipping_fee: Money) -> CartDTO:
    """Join each cart line with its current product.

    Lines whose product has disappeared are still listed but do not count
    towards the subtotal; checkout rejects such a cart.
    """
    items: list[CartLineDTO] = []
    subtotal = Money.zero()
    for line in cart.lines:
        product = product_repo.get_by_id(line.product_id)
        if product is None:
            items.append(
                CartLineDTO(
                    product_id=line.product_id,
                    product=None,
                    quantity=line.quantity.value,
                    line_total=None,
                )
            )
            continue
        line_total = product.price * line.quantity.value
        subtotal = subtotal + line_total
        items.append(
            CartLineDTO(
                product_id=line.product_id,
                product=product_dto(product),
                quantity=line.quantity.value,
                line_total=amount(line_total),
            )
        )

    total = subtotal + shipping_fee if items else subtotal
    return CartDTO(
        items=items,
        subtotal=amount(subtotal),
        shipping_fee=amount(shipping_fee),
        total=amount(total),
        currency=shipping_fee.currency,
        version=cart.version,
    )


def order_dto(
    order: Order,
    product_repo: ProductRepository,
    owner: User | None = None,
) -> OrderDTO:
    items = []
    for line in order.items:
        product = product_repo.get_by_id(line.product_id)
        items.append(
            OrderLineDTO(
                product_id=line.product_id,
                product=product_dto(product) if product is not None else None,
                quantity=line.quantity.value,
                price=amount(line.price),
                line_total=amount(line.line_total),
            )
        )

    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        items=items,
        total_amount=amount(order.total_amount),
        currency=order.total_amount.currency,
        shipping_address=order.shipping_address,
        created_at=order.created_at.isoformat(),
        owner=OwnerDTO(id=owner.id, name=owner.name, email=owner.email) if owner else None,
    )
