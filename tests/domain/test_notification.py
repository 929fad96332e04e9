"""Unit tests for the staff order notification."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.notification import OrderNotification
from storefront.domain.service.order_assembler import assemble_order
from tests.fakes import FIXED_NOW, make_customer, make_item


def _order(order_id="ord-42", subtotal_items=None, email="asha@example.com"):
    cart = Cart()
    for item in subtotal_items or [make_item("a", "120", weight="500g")]:
        cart.add(item, item.quantity.value)
    order = assemble_order(
        cart,
        make_customer(email=email),
        "12 MG Road, Pune",
        "9876543210",
        now=FIXED_NOW,
    )
    order.id = order_id
    return order


class TestOrderNotification:

    def test_requires_persisted_order(self):
        with pytest.raises(ValidationError, match="not persisted"):
            OrderNotification.from_order(_order(order_id=None))

    def test_render_contains_order_details(self):
        text = OrderNotification.from_order(_order()).render()
        assert "Order ID: ord-42" in text
        assert "Customer: Asha" in text
        assert "Phone: 9876543210" in text
        assert "• Pickle a (500g) - 1 × ₹120.00 = ₹120.00" in text
        assert "Shipping: ₹50.00" in text
        assert "TOTAL: ₹170.00" in text
        assert "12 MG Road, Pune" in text
        assert "Payment: Cash on Delivery" in text
        assert "Date: 14/03/2025" in text

    def test_free_shipping_and_missing_email(self):
        order = _order(subtotal_items=[make_item("a", "600")], email="")
        text = OrderNotification.from_order(order).render()
        assert "Shipping: FREE" in text
        assert "Email: Not provided" in text
        assert "(N/A)" in text
