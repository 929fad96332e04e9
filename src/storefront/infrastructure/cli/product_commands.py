"""CLI commands for the catalog."""

from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.config import StoreConfig


@click.command("list")
@click.pass_obj
def product_list(config: StoreConfig) -> None:
    """List all products in the catalog."""
    products = product_repository(config).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<12} {'Name':<28} {'Weight':<8} {'Price':>10}  Stock")
    click.echo("-" * 68)
    for p in products:
        stock = "yes" if p.in_stock else "no"
        click.echo(
            f"{p.id:<12} {p.name:<28} {p.weight or '':<8} {str(p.price):>10}  {stock}"
        )
