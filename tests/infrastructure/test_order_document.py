"""Tests for reading loosely-shaped order documents."""

from datetime import datetime, timezone

from storefront.domain.model.order import OrderStatus, PaymentMethod
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.order_document import from_document


class TestFromDocument:

    def test_fills_defaults_for_sparse_document(self):
        order = from_document("abc", {"items": [{"id": "a", "price": 100}]})

        assert order.id == "abc"
        assert order.customer.display_name == "Customer"
        assert order.customer.external_id == ""
        assert order.status == OrderStatus.PENDING
        assert order.payment_method == PaymentMethod.CASH
        assert order.items[0].quantity.value == 1
        assert order.total_amount == Money.zero()

    def test_subtotal_falls_back_to_total(self):
        order = from_document("abc", {"totalAmount": 640, "items": []})
        assert order.subtotal == Money.of("640")
        assert order.total_amount == Money.of("640")

    def test_total_computed_when_missing(self):
        order = from_document("abc", {"subtotal": "100", "shipping": "50"})
        assert order.total_amount == Money.of("150")

    def test_accepts_native_and_string_timestamps(self):
        native = datetime(2025, 1, 2, 3, 4, tzinfo=timezone.utc)
        assert from_document("a", {"createdAt": native}).created_at == native
        assert from_document("b", {"createdAt": "2025-01-02T03:04:00Z"}).created_at == native
        naive = from_document("c", {"createdAt": "2025-01-02T03:04:00"}).created_at
        assert naive.tzinfo is timezone.utc
