"""Catalog product, as the cart sees it.

The catalog is owned by the external document store; this is the
read-side shape needed to put a product into a cart.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import LineItem
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    original_price: Money | None = None
    image: str = ""
    weight: str | None = None
    in_stock: bool = True
    category: str = ""

    @property
    def is_discounted(self) -> bool:
        return self.original_price is not None and self.original_price > self.price

    def to_line_item(self) -> LineItem:
        """Snapshot the current catalog price into a single-unit cart line."""
        return LineItem(
            id=self.id,
            name=self.name,
            unit_price=self.price,
            image=self.image,
            original_unit_price=self.original_price,
            weight=self.weight,
        )
