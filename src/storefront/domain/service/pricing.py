"""Pricing calculator — pure functions over a cart snapshot.

Shipping is free only when the subtotal is strictly greater than the
threshold; an empty cart is never charged shipping.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from storefront.domain.model.cart import Cart, LineItem
from storefront.domain.model.value_objects import Money

FREE_SHIPPING_THRESHOLD = Money.of("500")
FLAT_SHIPPING_FEE = Money.of("50")


@dataclass(frozen=True)
class ShippingPolicy:

    free_shipping_threshold: Money = FREE_SHIPPING_THRESHOLD
    flat_fee: Money = FLAT_SHIPPING_FEE

    def fee_for(self, subtotal: Money, has_items: bool = True) -> Money:
        if not has_items or subtotal > self.free_shipping_threshold:
            return Money.zero()
        return self.flat_fee

    def amount_to_free_shipping(self, subtotal: Money) -> Money:
        """How far *subtotal* is from the threshold (zero once it qualifies)."""
        if subtotal > self.free_shipping_threshold:
            return Money.zero()
        return self.free_shipping_threshold.saturating_sub(subtotal)


DEFAULT_SHIPPING_POLICY = ShippingPolicy()


@dataclass(frozen=True)
class PricingSummary:
    subtotal: Money
    original_subtotal: Money
    savings: Money
    shipping_fee: Money
    total: Money
    has_items: bool = False

    @property
    def qualifies_for_free_shipping(self) -> bool:
        return self.has_items and self.shipping_fee.is_zero


def price_items(
    items: Iterable[LineItem],
    policy: ShippingPolicy = DEFAULT_SHIPPING_POLICY,
) -> PricingSummary:
    subtotal = Money.zero()
    original_subtotal = Money.zero()
    has_items = False
    for item in items:
        has_items = True
        subtotal = subtotal + item.line_total
        original_subtotal = original_subtotal + item.original_line_total

    shipping_fee = policy.fee_for(subtotal, has_items=has_items)
    return PricingSummary(
        subtotal=subtotal,
        original_subtotal=original_subtotal,
        savings=original_subtotal.saturating_sub(subtotal),
        shipping_fee=shipping_fee,
        total=subtotal + shipping_fee,
        has_items=has_items,
    )


def price_cart(cart: Cart, policy: ShippingPolicy = DEFAULT_SHIPPING_POLICY) -> PricingSummary:
    return price_items(cart.items, policy)
