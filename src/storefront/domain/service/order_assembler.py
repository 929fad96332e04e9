"""Domain service: turn a live cart into an order payload.

Prices the cart, snapshots its lines and lets the Order aggregate
validate the delivery details.  The returned order shares no mutable
state with the cart: later cart edits cannot reach it.
"""

from __future__ import annotations

from datetime import datetime

from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Customer, Order, PaymentMethod
from storefront.domain.service.pricing import (
    DEFAULT_SHIPPING_POLICY,
    ShippingPolicy,
    price_items,
)


def assemble_order(
    cart: Cart,
    customer: Customer | None,
    delivery_address: str,
    phone: str,
    payment_method: PaymentMethod = PaymentMethod.CASH,
    policy: ShippingPolicy = DEFAULT_SHIPPING_POLICY,
    now: datetime | None = None,
) -> Order:
    snapshot = cart.items
    pricing = price_items(snapshot, policy)
    return Order.create(
        customer=customer,
        items=snapshot,
        delivery_address=delivery_address,
        phone=phone,
        subtotal=pricing.subtotal,
        shipping_fee=pricing.shipping_fee,
        payment_method=payment_method,
        created_at=now,
    )
