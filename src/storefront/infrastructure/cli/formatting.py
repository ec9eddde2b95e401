"""Shared table formatting for cart and order output."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO, OrderDTO

_SYMBOLS = {"INR": "₹"}


def money(amount: str | None, currency: str = "INR") -> str:
    if amount is None:
        return "-"
    return f"{_SYMBOLS.get(currency, currency + ' ')}{amount}"


def display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        name = item.product.name if item.product else f"(removed #{item.product_id})"
        price = money(item.product.price, dto.currency) if item.product else "-"
        click.echo(
            f"  {name:<24} {item.quantity:>5} {price:>10} "
            f"{money(item.line_total, dto.currency):>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<31} {money(dto.subtotal, dto.currency):>20}")
    click.echo(f"  {'Shipping':<31} {money(dto.shipping_fee, dto.currency):>20}")
    click.echo(f"  {'Total':<31} {money(dto.total, dto.currency):>20}")


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    if dto.owner is not None:
        click.echo(f"Customer: {dto.owner.name} <{dto.owner.email}>")
    click.echo(f"Created:  {dto.created_at}")
    if dto.shipping_address:
        click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo()

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        name = item.product.name if item.product else f"#{item.product_id}"
        click.echo(
            f"  {name:<24} {item.quantity:>5} {money(item.price, dto.currency):>10} "
            f"{money(item.line_total, dto.currency):>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<31} {money(dto.total_amount, dto.currency):>20}")
