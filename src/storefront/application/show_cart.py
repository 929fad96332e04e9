"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, pricing_to_cart_dto
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.pricing import (
    DEFAULT_SHIPPING_POLICY,
    ShippingPolicy,
    price_items,
)


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        policy: ShippingPolicy = DEFAULT_SHIPPING_POLICY,
    ) -> None:
        self._cart_repo = cart_repo
        self._policy = policy

    def handle(self, session_id: str) -> CartDTO:
        items = self._cart_repo.load(session_id).items
        pricing = price_items(items, self._policy)
        gap = self._policy.amount_to_free_shipping(pricing.subtotal)
        return pricing_to_cart_dto(items, pricing, amount_to_free_shipping=str(gap))
