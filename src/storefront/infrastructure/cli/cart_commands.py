"""CLI commands for a user's cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.set_cart_quantity import SetCartQuantityHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    product_repository,
    settings,
    user_repository,
)
from storefront.infrastructure.cli.formatting import display_cart
from storefront.infrastructure.cli.identity import subject_for, user_option


def _repos() -> dict:
    return {
        "user_repo": user_repository(),
        "product_repo": product_repository(),
        "shipping_fee": settings().shipping_fee,
    }


@click.command("show")
@user_option
def cart_show(email: str) -> None:
    """Show the cart with current prices."""
    try:
        dto = ShowCartHandler(**_repos()).handle(subject_for(email))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_cart(dto)


@click.command("add")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(email: str, product_id: str, quantity: int) -> None:
    """Add a product to the cart."""
    try:
        dto = AddToCartHandler(**_repos()).handle(subject_for(email), product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_cart(dto)


@click.command("set")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_set(email: str, product_id: str, quantity: int) -> None:
    """Set the quantity of a cart line."""
    try:
        dto = SetCartQuantityHandler(**_repos()).handle(subject_for(email), product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_cart(dto)


@click.command("remove")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(email: str, product_id: str) -> None:
    """Remove a product from the cart."""
    try:
        dto = RemoveFromCartHandler(**_repos()).handle(subject_for(email), product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_cart(dto)


@click.command("clear")
@user_option
def cart_clear(email: str) -> None:
    """Empty the cart."""
    try:
        ClearCartHandler(**_repos()).handle(subject_for(email))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo("Cart cleared.")
