"""Unit tests for assembling an order from a cart."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.service.order_assembler import assemble_order
from tests.fakes import FIXED_NOW, make_customer, make_item


def _cart() -> Cart:
    cart = Cart()
    cart.add(make_item("a", "100"), 2)
    cart.add(make_item("b", "350"), 1)
    return cart


class TestAssembleOrder:

    def test_prices_and_stamps_order(self):
        order = assemble_order(
            _cart(), make_customer(), "12 MG Road", "9876543210", now=FIXED_NOW
        )
        assert order.subtotal == Money.of("550")
        assert order.shipping_fee == Money.zero()
        assert order.total_amount == Money.of("550")
        assert order.status == OrderStatus.PENDING
        assert order.created_at == FIXED_NOW

    def test_flat_fee_for_small_order(self):
        cart = Cart()
        cart.add(make_item("a", "100"))
        order = assemble_order(cart, make_customer(), "12 MG Road", "9876543210")
        assert order.shipping_fee == Money.of("50")
        assert order.total_amount == Money.of("150")

    def test_items_are_a_snapshot(self):
        cart = _cart()
        order = assemble_order(cart, make_customer(), "12 MG Road", "9876543210")

        cart.update_quantity("a", 10)
        cart.remove("b")
        cart.clear()

        assert [(i.id, i.quantity.value) for i in order.items] == [("a", 2), ("b", 1)]

    def test_empty_address_names_field(self):
        with pytest.raises(ValidationError) as exc_info:
            assemble_order(_cart(), make_customer(), "", "9876543210")
        assert exc_info.value.field == "delivery_address"

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="cart is empty"):
            assemble_order(Cart(), make_customer(), "12 MG Road", "9876543210")
