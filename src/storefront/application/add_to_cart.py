"""Application service: Add To Cart use case.

Resolves the product in the catalog and snapshots its current price
into the session's cart.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, session_id: str, product_id: str, quantity: int = 1) -> int:
        """Add a product to the cart and return the line's new quantity."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if not product.in_stock:
            raise ValidationError(f"'{product.name}' is out of stock")

        cart = self._cart_repo.load(session_id)
        cart.add(product.to_line_item(), quantity)
        self._cart_repo.save(session_id, cart)

        return cart.get(product_id).quantity.value  # type: ignore[union-attr]
