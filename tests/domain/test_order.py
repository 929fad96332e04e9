"""Unit tests for the Order aggregate and its business rules."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderStatus, PaymentMethod
from storefront.domain.model.value_objects import Money
from tests.fakes import FIXED_NOW, make_customer, make_item


def _create(**overrides) -> Order:
    kwargs = dict(
        customer=make_customer(),
        items=[make_item("a", "100", 2)],
        delivery_address="12 MG Road, Pune",
        phone="9876543210",
        subtotal=Money.of("200"),
        shipping_fee=Money.of("50"),
        created_at=FIXED_NOW,
    )
    kwargs.update(overrides)
    return Order.create(**kwargs)


class TestOrderCreation:

    def test_happy_path(self):
        order = _create()
        assert order.id is None  # assigned by the store
        assert order.status == OrderStatus.PENDING
        assert order.payment_method == PaymentMethod.CASH
        assert order.total_amount == Money.of("250")
        assert order.created_at == FIXED_NOW

    def test_total_is_subtotal_plus_shipping(self):
        order = _create(subtotal=Money.of("640"), shipping_fee=Money.zero())
        assert order.total_amount == order.subtotal + order.shipping_fee

    def test_inputs_are_trimmed(self):
        order = _create(delivery_address="  12 MG Road  ", phone=" 98765 ")
        assert order.delivery_address == "12 MG Road"
        assert order.customer.phone == "98765"

    def test_missing_display_name_defaults(self):
        order = _create(customer=make_customer(display_name=""))
        assert order.customer.display_name == "Customer"


class TestOrderValidation:

    @pytest.mark.parametrize("address", ["", "   "])
    def test_blank_address_rejected(self, address):
        with pytest.raises(ValidationError, match="delivery address") as exc_info:
            _create(delivery_address=address)
        assert exc_info.value.field == "delivery_address"

    def test_blank_phone_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _create(phone="  ")
        assert exc_info.value.field == "phone"

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _create(items=[])
        assert exc_info.value.field == "items"

    def test_anonymous_customer_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            _create(customer=None)
        assert exc_info.value.field == "customer"

    def test_address_checked_before_phone(self):
        with pytest.raises(ValidationError) as exc_info:
            _create(delivery_address="", phone="", items=[])
        assert exc_info.value.field == "delivery_address"


class TestOrderStatusTransitions:

    def test_full_lifecycle(self):
        order = _create()
        order.confirm()
        order.ship()
        order.deliver()
        assert order.status == OrderStatus.DELIVERED
        assert not order.is_open

    def test_cannot_ship_pending_order(self):
        order = _create()
        with pytest.raises(ValidationError, match="expected confirmed"):
            order.ship()

    def test_cancel_pending_and_confirmed(self):
        pending = _create()
        pending.cancel()
        assert pending.status == OrderStatus.CANCELLED

        confirmed = _create()
        confirmed.confirm()
        confirmed.cancel()
        assert confirmed.status == OrderStatus.CANCELLED

    def test_cannot_cancel_shipped_order(self):
        order = _create()
        order.move_to(OrderStatus.CONFIRMED)
        order.move_to(OrderStatus.SHIPPED)
        with pytest.raises(ValidationError, match="current status is shipped"):
            order.cancel()

    def test_cancel_twice_rejected(self):
        order = _create()
        order.cancel()
        with pytest.raises(ValidationError, match="already cancelled"):
            order.cancel()

    def test_cannot_move_back_to_pending(self):
        order = _create()
        with pytest.raises(ValidationError, match="back to pending"):
            order.move_to(OrderStatus.PENDING)
