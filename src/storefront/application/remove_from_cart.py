"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.domain.repository.cart_repository import CartRepository


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str, product_id: str) -> None:
        """Remove a line; removing something not in the cart is not an error."""
        cart = self._cart_repo.load(session_id)
        cart.remove(product_id)
        self._cart_repo.save(session_id, cart)
