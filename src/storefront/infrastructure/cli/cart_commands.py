"""CLI commands for the session cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    cart_repository,
    product_repository,
    shipping_policy,
)
from storefront.infrastructure.config import StoreConfig

session_option = click.option(
    "--session", "session_id", default="default", show_default=True, help="Cart session id."
)


@click.command("add")
@session_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.pass_obj
def cart_add(config: StoreConfig, session_id: str, product_id: str, quantity: int) -> None:
    """Add a product to the cart."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(config),
        product_repo=product_repository(config),
    )

    try:
        new_quantity = handler.handle(session_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added to cart — {product_id} now x{new_quantity}")


@click.command("update")
@session_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
@click.pass_obj
def cart_update(config: StoreConfig, session_id: str, product_id: str, quantity: int) -> None:
    """Change a line's quantity."""
    handler = UpdateCartItemHandler(cart_repo=cart_repository(config))

    try:
        handler.handle(session_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if quantity < 1:
        click.echo(f"Removed {product_id} from cart")
    else:
        click.echo(f"{product_id} quantity set to {quantity}")


@click.command("remove")
@session_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(config: StoreConfig, session_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    RemoveFromCartHandler(cart_repo=cart_repository(config)).handle(session_id, product_id)
    click.echo(f"Removed {product_id} from cart")


@click.command("clear")
@session_option
@click.pass_obj
def cart_clear(config: StoreConfig, session_id: str) -> None:
    """Empty the cart."""
    ClearCartHandler(cart_repo=cart_repository(config)).handle(session_id)
    click.echo("Cart cleared")


@click.command("show")
@session_option
@click.pass_obj
def cart_show(config: StoreConfig, session_id: str) -> None:
    """Show the cart with its totals."""
    handler = ShowCartHandler(
        cart_repo=cart_repository(config),
        policy=shipping_policy(config),
    )
    _display_cart(handler.handle(session_id))


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for item in dto.items:
        name = f"{item.name} ({item.weight})" if item.weight else item.name
        click.echo(
            f"  {name:<28} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*55}")
    click.echo(f"  {'Subtotal':<35} {dto.subtotal:>20}")
    if dto.has_savings:
        click.echo(f"  {'You save':<35} {dto.savings:>20}")
    shipping = "Free" if dto.free_shipping else dto.shipping_fee
    click.echo(f"  {'Shipping':<35} {shipping:>20}")
    click.echo(f"  {'Total':<35} {dto.total:>20}")
    if not dto.free_shipping:
        click.echo(f"  Add {dto.amount_to_free_shipping} more for FREE delivery!")
