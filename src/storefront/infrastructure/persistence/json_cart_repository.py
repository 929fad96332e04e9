"""JSON-file-backed implementation of CartRepository.

Keeps every session's cart in one file keyed by session id, the way a
browser keeps its cart in local storage.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from storefront.domain.exceptions import StoreError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.order_document import (
    item_from_document,
    item_to_document,
)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def load(self, session_id: str) -> Cart:
        raw_items = self._load_raw().get(session_id, [])
        return Cart(lines=[item_from_document(item) for item in raw_items])

    def save(self, session_id: str, cart: Cart) -> None:
        carts = self._load_raw()
        if cart.is_empty:
            carts.pop(session_id, None)
        else:
            carts[session_id] = [item_to_document(item) for item in cart.items]
        self._persist_raw(carts)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, list[dict[str, Any]]]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreError(f"Could not read carts from {self._file_path}") from exc

    def _persist_raw(self, carts: dict[str, list[dict[str, Any]]]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(carts, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StoreError(f"Could not write carts to {self._file_path}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
