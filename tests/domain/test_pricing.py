"""Unit tests for the pricing calculator."""

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing import (
    FLAT_SHIPPING_FEE,
    ShippingPolicy,
    price_cart,
    price_items,
)
from tests.fakes import make_item


def _cart(*items) -> Cart:
    cart = Cart()
    for item in items:
        cart.add(item, item.quantity.value)
    return cart


class TestPricingScenarios:

    def test_above_threshold_ships_free(self):
        cart = _cart(make_item("a", "100", 2), make_item("b", "350", 1))
        summary = price_cart(cart)
        assert summary.subtotal == Money.of("550")
        assert summary.shipping_fee == Money.zero()
        assert summary.total == Money.of("550")

    def test_below_threshold_pays_flat_fee(self):
        summary = price_cart(_cart(make_item("a", "100", 1)))
        assert summary.subtotal == Money.of("100")
        assert summary.shipping_fee == Money.of("50")
        assert summary.total == Money.of("150")

    def test_exactly_threshold_still_pays_shipping(self):
        summary = price_cart(_cart(make_item("a", "250", 2)))
        assert summary.subtotal == Money.of("500")
        assert summary.shipping_fee == FLAT_SHIPPING_FEE

    def test_empty_cart_is_free(self):
        summary = price_cart(Cart())
        assert summary.subtotal == Money.zero()
        assert summary.shipping_fee == Money.zero()
        assert summary.total == Money.zero()
        assert not summary.qualifies_for_free_shipping

    def test_total_is_subtotal_plus_shipping(self):
        for items in (
            [make_item("a", "1", 1)],
            [make_item("a", "499.99", 1)],
            [make_item("a", "500.01", 1)],
            [make_item("a", "75", 4), make_item("b", "12.50", 3)],
        ):
            summary = price_items(items)
            assert summary.total == summary.subtotal + summary.shipping_fee


class TestSavings:

    def test_savings_from_original_price(self):
        summary = price_items([make_item("a", "80", 2, original="100")])
        assert summary.original_subtotal == Money.of("200")
        assert summary.savings == Money.of("40")

    def test_savings_never_negative(self):
        summary = price_items([make_item("a", "120", 1, original="100")])
        assert summary.savings == Money.zero()

    def test_no_original_price_means_no_savings(self):
        summary = price_items([make_item("a", "120", 3)])
        assert summary.savings == Money.zero()


class TestShippingPolicy:

    def test_custom_threshold_and_fee(self):
        policy = ShippingPolicy(free_shipping_threshold=Money.of("1000"), flat_fee=Money.of("80"))
        summary = price_items([make_item("a", "600", 1)], policy)
        assert summary.shipping_fee == Money.of("80")
        assert not summary.qualifies_for_free_shipping

    def test_amount_to_free_shipping(self):
        policy = ShippingPolicy()
        assert policy.amount_to_free_shipping(Money.of("320")) == Money.of("180")
        assert policy.amount_to_free_shipping(Money.of("501")) == Money.zero()
