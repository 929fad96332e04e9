"""Order <-> document mapping shared by the JSON and Firestore stores.

Documents keep the storefront's established field names (``user.uid``,
``totalAmount``, ``shippingAddress`` ...).  Older documents are loosely
shaped, so every field is default-filled here on the way in rather
than at each place an order is read.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from storefront.domain.model.cart import LineItem
from storefront.domain.model.order import Customer, Order, OrderStatus, PaymentMethod
from storefront.domain.model.value_objects import Money, Quantity


def to_document(order: Order) -> dict[str, Any]:
    return {
        "user": {
            "uid": order.customer.external_id,
            "email": order.customer.email,
            "name": order.customer.display_name,
            "phone": order.customer.phone,
        },
        "items": [item_to_document(item) for item in order.items],
        "subtotal": str(order.subtotal.amount),
        "shipping": str(order.shipping_fee.amount),
        "totalAmount": str(order.total_amount.amount),
        "shippingAddress": order.delivery_address,
        "paymentMethod": order.payment_method.value,
        "status": order.status.value,
        "createdAt": order.created_at.isoformat(),
    }


def from_document(order_id: str, raw: dict[str, Any]) -> Order:
    user = raw.get("user") or {}
    items = tuple(item_from_document(i) for i in raw.get("items") or [])
    subtotal = _money(raw.get("subtotal"), default=raw.get("totalAmount"))
    shipping = _money(raw.get("shipping"))
    total = _money(raw.get("totalAmount"), default=(subtotal + shipping).amount)
    return Order(
        id=order_id,
        customer=Customer(
            external_id=user.get("uid") or "",
            email=user.get("email") or "",
            display_name=user.get("name") or "Customer",
            phone=user.get("phone") or "",
        ),
        items=items,
        subtotal=subtotal,
        shipping_fee=shipping,
        total_amount=total,
        delivery_address=raw.get("shippingAddress") or "",
        payment_method=PaymentMethod(raw.get("paymentMethod") or "cash"),
        status=OrderStatus(raw.get("status") or "pending"),
        created_at=_timestamp(raw.get("createdAt")),
    )


def item_to_document(item: LineItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "price": str(item.unit_price.amount),
        "originalPrice": (
            str(item.original_unit_price.amount) if item.original_unit_price else None
        ),
        "quantity": item.quantity.value,
        "image": item.image,
        "weight": item.weight,
    }


def item_from_document(raw: dict[str, Any]) -> LineItem:
    original = raw.get("originalPrice")
    return LineItem(
        id=str(raw["id"]),
        name=raw.get("name") or "",
        unit_price=_money(raw.get("price")),
        quantity=Quantity(int(raw.get("quantity") or 1)),
        image=raw.get("image") or "",
        original_unit_price=Money.of(original) if original is not None else None,
        weight=raw.get("weight") or None,
    )


def _money(value: Any, default: Any = None) -> Money:
    if value is None:
        value = default
    return Money.of(value) if value is not None else Money.zero()


def _timestamp(value: Any) -> datetime:
    # Firestore hands back datetimes, the JSON store ISO strings.
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, str) and value:
        result = datetime.fromisoformat(value.replace("Z", "+00:00"))
    else:
        return datetime.fromtimestamp(0, timezone.utc)
    if result.tzinfo is None:
        result = result.replace(tzinfo=timezone.utc)
    return result
