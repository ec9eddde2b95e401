import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_all,
    order_list,
    order_place,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_seed,
    product_update,
)
from storefront.infrastructure.cli.user_commands import user_register, user_token
from storefront.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Storefront: grocery catalog, carts and orders"""
    configure_logging(settings().log_level)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def user() -> None:
    """Manage user accounts."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Place and track orders."""


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    from storefront.infrastructure.api.app import create_app

    uvicorn.run(create_app(), host=host, port=port)


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_seed)
product.add_command(product_update)
user.add_command(user_register)
user.add_command(user_token)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
order.add_command(order_all)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_status)
