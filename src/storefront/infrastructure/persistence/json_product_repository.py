"""JSON-file-backed implementation of ProductRepository.

Reads a catalog export in the storefront's document shape
(``price``, ``originalPrice``, ``images``/``image``, ``inStock``).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        products = (self._to_domain(item) for item in raw)
        return {p.id: p for p in products}

    @staticmethod
    def _to_domain(item: dict[str, Any]) -> Product:
        original = item.get("originalPrice")
        images = item.get("images") or []
        return Product(
            id=str(item["id"]),
            name=item["name"],
            price=Money.of(item["price"]),
            original_price=Money.of(original) if original is not None else None,
            image=item.get("image") or (images[0] if images else ""),
            weight=item.get("weight") or None,
            in_stock=item.get("inStock", True),
            category=item.get("category") or "",
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
