"""Firestore-backed implementation of OrderRepository.

Orders live in the ``orders`` collection of the storefront's Firebase
project, one document per order with an auto-generated id.  Amounts are
stored as numbers and ``createdAt`` as a native timestamp, matching the
documents the web storefront writes, so ordering by ``createdAt`` works
across old and new orders.
"""

from __future__ import annotations

import logging
from typing import Any

import firebase_admin
from firebase_admin import credentials, firestore
from google.api_core import exceptions as google_exceptions
from google.cloud.firestore_v1.base_query import FieldFilter

from storefront.domain.exceptions import StoreError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.order_document import (
    from_document,
    to_document,
)

logger = logging.getLogger(__name__)

ORDERS_COLLECTION = "orders"
AMOUNT_FIELDS = ("subtotal", "shipping", "totalAmount")


class FirestoreOrderRepository(OrderRepository):

    def __init__(self, client) -> None:
        self._collection = client.collection(ORDERS_COLLECTION)

    # --- OrderRepository interface --------------------------------------------

    def create(self, order: Order) -> str:
        document = _firestore_document(order)
        try:
            _, ref = self._collection.add(document)
        except google_exceptions.GoogleAPIError as exc:
            raise StoreError("Failed to create order") from exc
        order.id = ref.id
        return ref.id

    def get_by_id(self, order_id: str) -> Order | None:
        try:
            snapshot = self._collection.document(order_id).get()
        except google_exceptions.GoogleAPIError as exc:
            raise StoreError(f"Failed to load order #{order_id}") from exc
        if not snapshot.exists:
            return None
        return from_document(snapshot.id, snapshot.to_dict() or {})

    def list_by_customer(self, customer_id: str) -> list[Order]:
        query = (
            self._collection.where(filter=FieldFilter("user.uid", "==", customer_id))
            .order_by("createdAt", direction=firestore.Query.DESCENDING)
        )
        try:
            snapshots = list(query.stream())
        except google_exceptions.GoogleAPIError as exc:
            raise StoreError(f"Failed to list orders for customer {customer_id}") from exc
        return [from_document(s.id, s.to_dict() or {}) for s in snapshots]

    def save(self, order: Order) -> None:
        # Only the status of a stored order ever changes.
        if order.id is None:
            raise StoreError("Cannot update an order that was never created")
        try:
            self._collection.document(order.id).update(
                {"status": order.status.value, "updatedAt": firestore.SERVER_TIMESTAMP}
            )
        except google_exceptions.NotFound as exc:
            raise StoreError(f"Order #{order.id} does not exist in the store") from exc
        except google_exceptions.GoogleAPIError as exc:
            raise StoreError(f"Failed to update order #{order.id}") from exc
        logger.info("Order %s moved to %s", order.id, order.status.value)


def _firestore_document(order: Order) -> dict[str, Any]:
    document = to_document(order)
    for field in AMOUNT_FIELDS:
        document[field] = float(document[field])
    for item in document["items"]:
        item["price"] = float(item["price"])
        if item["originalPrice"] is not None:
            item["originalPrice"] = float(item["originalPrice"])
    document["createdAt"] = order.created_at
    document["updatedAt"] = firestore.SERVER_TIMESTAMP
    return document


def firestore_client(credentials_path: str):
    """Initialise the Firebase app once and return its Firestore client."""
    try:
        app = firebase_admin.get_app()
    except ValueError:
        cred = credentials.Certificate(credentials_path) if credentials_path else None
        app = firebase_admin.initialize_app(cred)
    return firestore.client(app)
