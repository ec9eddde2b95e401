"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.seed_catalog import SeedCatalogHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Category
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.cli.formatting import money
from storefront.infrastructure.cli.identity import subject_for, user_option

_CATEGORIES = click.Choice([c.value for c in Category], case_sensitive=False)


@click.command("list")
@click.option("--category", type=_CATEGORIES, default=None, help="Only this category.")
def product_list(category: str | None) -> None:
    """List products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle(category)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<12} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 62)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.category:<12} {money(p.price):>10} {p.stock:>6}")


@click.command("add")
@user_option
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 40.00).")
@click.option("--category", required=True, type=_CATEGORIES, help="Product category.")
@click.option("--description", default="", help="Short description.")
@click.option("--image", default="", help="Image path or URL.")
@click.option("--stock", default=100, show_default=True, type=int, help="Units in stock.")
def product_add(
    email: str,
    name: str,
    price: str,
    category: str,
    description: str,
    image: str,
    stock: int,
) -> None:
    """Add a new product to the catalog (admin)."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            subject_for(email),
            name=name,
            price=price,
            category=category,
            description=description,
            image=image,
            stock=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {money(product.price)}")


@click.command("update")
@user_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 45.00).")
@click.option("--name", default=None, help="New name.")
@click.option("--stock", default=None, type=int, help="New stock level.")
def product_update(
    email: str,
    product_id: str,
    price: str | None,
    name: str | None,
    stock: int | None,
) -> None:
    """Update a product (admin). Existing orders keep their prices."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            subject_for(email), product_id, price=price, name=name, stock=stock
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' now {money(product.price)}")


@click.command("delete")
@user_option
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(email: str, product_id: str) -> None:
    """Remove a product from the catalog (admin)."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(subject_for(email), product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("seed")
def product_seed() -> None:
    """Load the default catalog into an empty store."""
    added = SeedCatalogHandler(product_repo=product_repository()).handle()
    if added:
        click.echo(f"Seeded {added} products.")
    else:
        click.echo("Catalog already has products; nothing seeded.")
