"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import LineItem
from storefront.domain.model.order import Order
from storefront.domain.service.pricing import PricingSummary


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single cart or order line as displayed to the user."""

    id: str
    name: str
    weight: str
    quantity: int
    unit_price: str  # formatted, e.g. "₹120.00"
    line_total: str

    @staticmethod
    def from_item(item: LineItem) -> LineItemDTO:
        return LineItemDTO(
            id=item.id,
            name=item.name,
            weight=item.weight or "",
            quantity=item.quantity.value,
            unit_price=str(item.unit_price),
            line_total=str(item.line_total),
        )


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart with its computed totals."""

    items: list[LineItemDTO]
    item_count: int
    subtotal: str
    savings: str
    shipping_fee: str
    total: str
    free_shipping: bool
    has_savings: bool
    amount_to_free_shipping: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the user."""

    id: str
    customer_name: str
    customer_phone: str
    status: str
    items: list[LineItemDTO]
    subtotal: str
    shipping_fee: str
    total: str
    delivery_address: str
    payment_method: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id or "",
            customer_name=order.customer.name_or_default,
            customer_phone=order.customer.phone,
            status=order.status.value,
            items=[LineItemDTO.from_item(item) for item in order.items],
            subtotal=str(order.subtotal),
            shipping_fee=str(order.shipping_fee),
            total=str(order.total_amount),
            delivery_address=order.delivery_address,
            payment_method=order.payment_method.label,
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


def pricing_to_cart_dto(
    items: tuple[LineItem, ...],
    pricing: PricingSummary,
    amount_to_free_shipping: str,
) -> CartDTO:
    return CartDTO(
        items=[LineItemDTO.from_item(item) for item in items],
        item_count=sum(item.quantity.value for item in items),
        subtotal=str(pricing.subtotal),
        savings=str(pricing.savings),
        shipping_fee=str(pricing.shipping_fee),
        total=str(pricing.total),
        free_shipping=pricing.qualifies_for_free_shipping,
        has_savings=not pricing.savings.is_zero,
        amount_to_free_shipping=amount_to_free_shipping,
    )
