"""Application service: Place Order use case.

Runs the checkout as a short, strictly sequential state machine:

    BUILDING --(assemble)--> SUBMITTED --(notify)--> NOTIFIED
        |                        |
        +--> FAILED              +--> (notification failed) stays SUBMITTED

- Assembly failure raises ValidationError; the cart is untouched.
- Persistence failure raises StoreError; the cart is untouched and no
  order id exists.  Nothing is retried; the shopper resubmits.
- Notification failure is logged and swallowed: the order record is
  the source of truth, the staff message is best effort.

The cart is cleared only after the order has been persisted.  Once it
is persisted the checkout succeeds: a failure to clear the cart is
logged, never raised, so the shopper is not invited to order twice.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import (
    NotifyError,
    StoreError,
    SubmissionInProgressError,
    ValidationError,
)
from storefront.domain.gateway.notification_gateway import NotificationGateway
from storefront.domain.model.notification import OrderNotification
from storefront.domain.model.order import Customer, PaymentMethod
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.order_assembler import assemble_order
from storefront.domain.service.pricing import DEFAULT_SHIPPING_POLICY, ShippingPolicy

logger = logging.getLogger(__name__)


class SubmissionState(Enum):
    BUILDING = "building"
    SUBMITTED = "submitted"
    NOTIFIED = "notified"
    FAILED = "failed"


@dataclass(frozen=True)
class CheckoutResult:
    """Output of a successful checkout.

    ``state`` is NOTIFIED when staff were messaged, SUBMITTED when the
    order was stored but the message could not be delivered.
    ``cart_cleared`` is False when the order was stored but emptying
    the cart failed; the order still stands.
    """

    order_id: str
    state: SubmissionState
    order: OrderDTO
    notification_error: str | None = None
    cart_cleared: bool = True

    @property
    def notified(self) -> bool:
        return self.state == SubmissionState.NOTIFIED


class PlaceOrderHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
        gateway: NotificationGateway,
        policy: ShippingPolicy = DEFAULT_SHIPPING_POLICY,
    ) -> None:
        self._cart_repo = cart_repo
        self._order_repo = order_repo
        self._gateway = gateway
        self._policy = policy
        # Sessions with a checkout in progress, and the state each has reached.
        self._in_flight: dict[str, SubmissionState] = {}
        self._in_flight_lock = threading.Lock()

    def state_of(self, session_id: str) -> SubmissionState | None:
        """State of the session's checkout in progress, None when idle."""
        with self._in_flight_lock:
            return self._in_flight.get(session_id)

    def handle(
        self,
        session_id: str,
        customer: Customer | None,
        delivery_address: str,
        phone: str,
        payment_method: PaymentMethod = PaymentMethod.CASH,
    ) -> CheckoutResult:
        """Place an order from the session's cart.

        At most one submission per session may be in flight; a second
        call while the first is outstanding raises
        SubmissionInProgressError and changes nothing.
        """
        with self._in_flight_lock:
            if session_id in self._in_flight:
                raise SubmissionInProgressError(
                    "Your order is already being placed, please wait"
                )
            self._in_flight[session_id] = SubmissionState.BUILDING

        try:
            return self._run(session_id, customer, delivery_address, phone, payment_method)
        finally:
            with self._in_flight_lock:
                final_state = self._in_flight.pop(session_id)
            logger.debug("Checkout for session %s ended in state %s", session_id, final_state.value)

    # --- Sequence -------------------------------------------------------------

    def _set_state(self, session_id: str, state: SubmissionState) -> None:
        with self._in_flight_lock:
            self._in_flight[session_id] = state

    def _run(
        self,
        session_id: str,
        customer: Customer | None,
        delivery_address: str,
        phone: str,
        payment_method: PaymentMethod,
    ) -> CheckoutResult:
        try:
            cart = self._cart_repo.load(session_id)
            order = assemble_order(
                cart,
                customer,
                delivery_address=delivery_address,
                phone=phone,
                payment_method=payment_method,
                policy=self._policy,
            )
        except (ValidationError, StoreError):
            self._set_state(session_id, SubmissionState.FAILED)
            raise

        try:
            order_id = self._order_repo.create(order)
        except StoreError:
            self._set_state(session_id, SubmissionState.FAILED)
            logger.error(
                "Order persistence failed for customer %s (%d items, total %s)",
                order.customer.external_id,
                len(order.items),
                order.total_amount,
                exc_info=True,
            )
            raise

        # From here on the order exists: nothing below may turn this into a failure.
        state = SubmissionState.SUBMITTED
        self._set_state(session_id, state)
        logger.info(
            "Order %s created for customer %s: %d items, total %s",
            order_id,
            order.customer.external_id,
            len(order.items),
            order.total_amount,
        )

        notification_error: str | None = None
        try:
            message_id = self._gateway.notify(OrderNotification.from_order(order))
        except NotifyError as exc:
            notification_error = str(exc)
            logger.warning("Order %s stored but staff notification failed: %s", order_id, exc)
        else:
            state = SubmissionState.NOTIFIED
            self._set_state(session_id, state)
            logger.info("Order %s notification sent (message %s)", order_id, message_id)

        cart_cleared = True
        cart.clear()
        try:
            self._cart_repo.save(session_id, cart)
        except StoreError:
            cart_cleared = False
            logger.error(
                "Order %s stored but the cart for session %s could not be cleared",
                order_id,
                session_id,
                exc_info=True,
            )

        return CheckoutResult(
            order_id=order_id,
            state=state,
            order=OrderDTO.from_order(order),
            notification_error=notification_error,
            cart_cleared=cart_cleared,
        )
