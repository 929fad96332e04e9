"""JSON-file-backed implementation of OrderRepository.

The local stand-in for the hosted document store: one file holding a
list of order documents, each with its generated ``id``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from uuid import uuid4

from storefront.domain.exceptions import StoreError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.order_document import (
    from_document,
    to_document,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def create(self, order: Order) -> str:
        documents = self._load_raw()
        order_id = uuid4().hex
        documents.append({"id": order_id, **to_document(order)})
        self._persist_raw(documents)
        order.id = order_id
        return order_id

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return from_document(raw["id"], raw)
        return None

    def list_by_customer(self, customer_id: str) -> list[Order]:
        orders = [
            from_document(raw["id"], raw)
            for raw in self._load_raw()
            if (raw.get("user") or {}).get("uid") == customer_id
        ]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def save(self, order: Order) -> None:
        if order.id is None:
            raise StoreError("Cannot update an order that was never created")

        documents = self._load_raw()
        for i, raw in enumerate(documents):
            if raw["id"] == order.id:
                documents[i] = {"id": order.id, **to_document(order)}
                break
        else:
            raise StoreError(f"Order #{order.id} does not exist in the store")

        self._persist_raw(documents)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict[str, Any]]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreError(f"Could not read orders from {self._file_path}") from exc

    def _persist_raw(self, documents: list[dict[str, Any]]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(documents, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise StoreError(f"Could not write orders to {self._file_path}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
