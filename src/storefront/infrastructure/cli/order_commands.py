"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.list_all_orders import ListAllOrdersHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.set_order_status import SetOrderStatusHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    settings,
    user_repository,
)
from storefront.infrastructure.cli.formatting import display_order, money
from storefront.infrastructure.cli.identity import subject_for, user_option


@click.command("place")
@user_option
@click.option("--address", default="", help="Shipping address.")
def order_place(email: str, address: str) -> None:
    """Check out the cart into a new order."""
    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
        product_repo=product_repository(),
        shipping_fee=settings().shipping_fee,
    )

    try:
        dto = handler.handle(subject_for(email), shipping_address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed.")
    display_order(dto)


@click.command("list")
@user_option
def order_list(email: str) -> None:
    """List your orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository(), product_repo=product_repository())
    orders = handler.handle(subject_for(email))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<12} {'Total':>12}  Created")
    click.echo("-" * 60)
    for o in orders:
        click.echo(f"{o.id:<6} {o.status:<12} {money(o.total_amount, o.currency):>12}  {o.created_at}")


@click.command("show")
@user_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(email: str, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(), product_repo=product_repository())

    try:
        dto = handler.handle(subject_for(email), order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("status")
@user_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--set",
    "new_status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New status.",
)
def order_status(email: str, order_id: int, new_status: str) -> None:
    """Change an order's delivery status (admin)."""
    handler = SetOrderStatusHandler(order_repo=order_repository(), product_repo=product_repository())

    try:
        dto = handler.handle(subject_for(email), order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("all")
@user_option
def order_all(email: str) -> None:
    """List every order in the store (admin)."""
    handler = ListAllOrdersHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
        product_repo=product_repository(),
    )

    try:
        orders = handler.handle(subject_for(email))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<28} {'Status':<12} {'Total':>12}")
    click.echo("-" * 62)
    for o in orders:
        customer = o.owner.email if o.owner else o.user_id
        click.echo(f"{o.id:<6} {customer:<28} {o.status:<12} {money(o.total_amount, o.currency):>12}")
