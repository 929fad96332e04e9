"""Order aggregate — the immutable payload handed to the order store.

Once persisted, the store is the owner of record; the only change this
codebase makes afterwards is moving the order through its statuses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import LineItem
from storefront.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    CASH = "cash"

    @property
    def label(self) -> str:
        return {PaymentMethod.CASH: "Cash on Delivery"}[self]


@dataclass(frozen=True)
class Customer:
    """The signed-in shopper, as supplied by the identity provider."""

    external_id: str
    email: str = ""
    display_name: str = ""
    phone: str = ""

    @property
    def name_or_default(self) -> str:
        return self.display_name or "Customer"


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    customer: Customer
    items: tuple[LineItem, ...]
    subtotal: Money
    shipping_fee: Money
    total_amount: Money
    delivery_address: str
    payment_method: PaymentMethod = PaymentMethod.CASH
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer: Customer | None,
        items: tuple[LineItem, ...] | list[LineItem],
        delivery_address: str,
        phone: str,
        subtotal: Money,
        shipping_fee: Money,
        payment_method: PaymentMethod = PaymentMethod.CASH,
        created_at: datetime | None = None,
    ) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not delivery_address or not delivery_address.strip():
            raise ValidationError(
                "Please enter a delivery address", field="delivery_address"
            )

        if not phone or not phone.strip():
            raise ValidationError("Please enter your phone number", field="phone")

        if not items:
            raise ValidationError("Your cart is empty", field="items")

        if customer is None or not customer.external_id:
            raise ValidationError("Please sign in to place an order", field="customer")

        return Order(
            id=None,
            customer=Customer(
                external_id=customer.external_id,
                email=customer.email,
                display_name=customer.name_or_default,
                phone=phone.strip(),
            ),
            items=tuple(items),
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            total_amount=subtotal + shipping_fee,
            delivery_address=delivery_address.strip(),
            payment_method=payment_method,
            status=OrderStatus.PENDING,
            created_at=created_at or datetime.now(timezone.utc),
        )

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        """Transition PENDING -> CONFIRMED (staff accepted the order)."""
        self._transition(OrderStatus.CONFIRMED, allowed_from=(OrderStatus.PENDING,))

    def ship(self) -> None:
        """Transition CONFIRMED -> SHIPPED."""
        self._transition(OrderStatus.SHIPPED, allowed_from=(OrderStatus.CONFIRMED,))

    def deliver(self) -> None:
        """Transition SHIPPED -> DELIVERED."""
        self._transition(OrderStatus.DELIVERED, allowed_from=(OrderStatus.SHIPPED,))

    def cancel(self) -> None:
        """Transition PENDING|CONFIRMED -> CANCELLED.

        Orders already handed to the courier cannot be cancelled.
        """
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        self._transition(
            OrderStatus.CANCELLED,
            allowed_from=(OrderStatus.PENDING, OrderStatus.CONFIRMED),
        )

    def move_to(self, status: OrderStatus) -> None:
        """Apply the transition that leads to *status*."""
        transitions = {
            OrderStatus.CONFIRMED: self.confirm,
            OrderStatus.SHIPPED: self.ship,
            OrderStatus.DELIVERED: self.deliver,
            OrderStatus.CANCELLED: self.cancel,
        }
        if status not in transitions:
            raise ValidationError(f"Cannot move an order back to {status.value}")
        transitions[status]()

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def is_open(self) -> bool:
        return self.status not in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    # --- Internal helpers -----------------------------------------------------

    def _transition(
        self,
        target: OrderStatus,
        allowed_from: tuple[OrderStatus, ...],
    ) -> None:
        if self.status not in allowed_from:
            expected = "|".join(s.value for s in allowed_from)
            raise ValidationError(
                f"Cannot mark order {target.value} — current status is "
                f"{self.status.value}, expected {expected}"
            )
        self.status = target
