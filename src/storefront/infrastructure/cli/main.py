import logging

import click
from dotenv import load_dotenv

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.order_commands import (
    checkout,
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.config import load_config


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront — cart and checkout for My Mom's Recipe"""
    load_dotenv()
    try:
        config = load_config()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


@cli.group()
def cart() -> None:
    """Manage a session's cart."""


@cli.group()
def order() -> None:
    """Inspect and update placed orders."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_list)
cli.add_command(checkout)
