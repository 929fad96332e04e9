"""Abstract repository for the Order aggregate.

Implementations wrap their backend's failures in StoreError so the
checkout sequence only ever has to handle domain exceptions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def create(self, order: Order) -> str:
        """Persist a new order, assign ``order.id`` and return it."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Order]:
        """Return a customer's orders, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist changes to an existing order."""
