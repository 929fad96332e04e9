"""Staff notification for a newly placed order.

A read-only view derived from a persisted order.  It is sent through
the messaging gateway and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import LineItem
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money

STORE_NAME = "My Mom's Recipe"


@dataclass(frozen=True)
class OrderNotification:

    order_id: str
    customer_name: str
    customer_phone: str
    customer_email: str
    items: tuple[LineItem, ...]
    subtotal: Money
    shipping_fee: Money
    total: Money
    delivery_address: str
    payment_label: str
    placed_at: datetime

    @staticmethod
    def from_order(order: Order) -> OrderNotification:
        if not order.id:
            raise ValidationError("Cannot notify about an order that was not persisted")
        return OrderNotification(
            order_id=order.id,
            customer_name=order.customer.name_or_default,
            customer_phone=order.customer.phone,
            customer_email=order.customer.email,
            items=order.items,
            subtotal=order.subtotal,
            shipping_fee=order.shipping_fee,
            total=order.total_amount,
            delivery_address=order.delivery_address,
            payment_label=order.payment_method.label,
            placed_at=order.created_at,
        )

    def render(self) -> str:
        """Plain-text message for the store's WhatsApp inbox."""
        lines = "\n".join(self._render_item(item) for item in self.items)
        shipping = "FREE" if self.shipping_fee.is_zero else str(self.shipping_fee)
        return (
            f"🛒 NEW ORDER - {STORE_NAME}\n"
            f"\n"
            f"Order ID: {self.order_id}\n"
            f"Customer: {self.customer_name}\n"
            f"Phone: {self.customer_phone}\n"
            f"Email: {self.customer_email or 'Not provided'}\n"
            f"Date: {self.placed_at.strftime('%d/%m/%Y')}\n"
            f"\n"
            f"ORDER ITEMS:\n"
            f"{lines}\n"
            f"\n"
            f"Subtotal: {self.subtotal}\n"
            f"Shipping: {shipping}\n"
            f"TOTAL: {self.total}\n"
            f"\n"
            f"DELIVERY ADDRESS:\n"
            f"{self.delivery_address}\n"
            f"\n"
            f"Payment: {self.payment_label}\n"
            f"\n"
            f"Please contact customer to confirm order."
        )

    @staticmethod
    def _render_item(item: LineItem) -> str:
        return (
            f"• {item.name} ({item.weight or 'N/A'}) - "
            f"{item.quantity} × {item.unit_price} = {item.line_total}"
        )
