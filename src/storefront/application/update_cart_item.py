"""Application service: Update Cart Item use case.

A quantity below 1 removes the line, mirroring the cart's own floor.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository


class UpdateCartItemHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, session_id: str, product_id: str, quantity: int) -> None:
        cart = self._cart_repo.load(session_id)
        if cart.get(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' is not in the cart")

        cart.update_quantity(product_id, quantity)
        self._cart_repo.save(session_id, cart)
