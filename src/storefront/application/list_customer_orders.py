"""Application service: List Customer Orders use case (query).

Backs the account "My Orders" view; the store returns newest first.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.repository.order_repository import OrderRepository


class ListCustomerOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, customer_id: str) -> list[OrderDTO]:
        return [
            OrderDTO.from_order(order)
            for order in self._order_repo.list_by_customer(customer_id)
        ]
