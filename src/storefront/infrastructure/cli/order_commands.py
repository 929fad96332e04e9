"""CLI commands for checkout and placed orders."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_customer_orders import ListCustomerOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import Customer, OrderStatus
from storefront.infrastructure.bootstrap import (
    cart_repository,
    notification_gateway,
    order_repository,
    shipping_policy,
)
from storefront.infrastructure.config import StoreConfig


@click.command("checkout")
@click.option("--session", "session_id", default="default", show_default=True, help="Cart session id.")
@click.option("--customer-id", required=True, help="Signed-in customer's account id.")
@click.option("--email", default="", help="Customer email.")
@click.option("--name", default="", help="Customer display name.")
@click.option("--phone", required=True, help="Contact phone number.")
@click.option("--address", required=True, help="Delivery address.")
@click.pass_obj
def checkout(
    config: StoreConfig,
    session_id: str,
    customer_id: str,
    email: str,
    name: str,
    phone: str,
    address: str,
) -> None:
    """Place an order from the cart (cash on delivery)."""
    handler = PlaceOrderHandler(
        cart_repo=cart_repository(config),
        order_repo=order_repository(config),
        gateway=notification_gateway(config),
        policy=shipping_policy(config),
    )
    customer = Customer(external_id=customer_id, email=email, display_name=name, phone=phone)

    try:
        result = handler.handle(
            session_id,
            customer,
            delivery_address=address,
            phone=phone,
        )
    except DomainException as exc:
        raise click.ClickException(f"Failed to place order. {exc}")

    click.echo("Order placed successfully!")
    if not result.notified:
        click.echo(f"(Store could not be notified on WhatsApp: {result.notification_error})")
    if not result.cart_cleared:
        click.echo("(Your order is placed, but the cart could not be emptied.)")
    click.echo()
    _display_order(result.order)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}  {dto.customer_phone}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Deliver to: {dto.delivery_address}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<28} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*55}")
    click.echo(f"  {'Subtotal':<35} {dto.subtotal:>20}")
    click.echo(f"  {'Shipping':<35} {dto.shipping_fee:>20}")
    click.echo(f"  {'Order Total':<35} {dto.total:>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(config: StoreConfig, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(config))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--customer-id", required=True, help="Customer account id.")
@click.pass_obj
def order_list(config: StoreConfig, customer_id: str) -> None:
    """List a customer's orders, newest first."""
    handler = ListCustomerOrdersHandler(order_repo=order_repository(config))

    try:
        orders = handler.handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders yet.")
        return

    click.echo(f"{'Order':<34} {'Placed':<22} {'Status':<10} {'Total':>10}")
    click.echo("-" * 79)
    for dto in orders:
        click.echo(f"{dto.id:<34} {dto.created_at:<22} {dto.status:<10} {dto.total:>10}")


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus if s is not OrderStatus.PENDING]),
    help="New status.",
)
@click.pass_obj
def order_status(config: StoreConfig, order_id: str, status: str) -> None:
    """Move an order to its next status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository(config))

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {status}.")
