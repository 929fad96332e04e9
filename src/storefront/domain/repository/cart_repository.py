"""Abstract repository for per-session carts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self, session_id: str) -> Cart:
        """Return the session's cart, or an empty one if it has none."""

    @abstractmethod
    def save(self, session_id: str, cart: Cart) -> None:
        """Persist the session's cart."""
