"""Application service: Update Order Status use case.

Staff move an order along pending -> confirmed -> shipped -> delivered,
or cancel it before it ships.  The aggregate decides which moves are
legal.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, status: str) -> None:
        try:
            target = OrderStatus(status.strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown order status '{status}'", field="status")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.move_to(target)
        self._order_repo.save(order)
