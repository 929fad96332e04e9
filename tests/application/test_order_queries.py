"""Integration tests for showing, listing and updating placed orders."""

from datetime import timedelta

import pytest

from storefront.application.list_customer_orders import ListCustomerOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderStatus
from storefront.domain.service.order_assembler import assemble_order
from tests.fakes import FIXED_NOW, FakeOrderRepository, make_customer, make_item


def _store_order(order_repo, customer_id="uid-1", minutes=0, price="100"):
    cart = Cart()
    cart.add(make_item("a", price))
    order = assemble_order(
        cart,
        make_customer(customer_id),
        "12 MG Road",
        "9876543210",
        now=FIXED_NOW + timedelta(minutes=minutes),
    )
    return order_repo.create(order)


class TestShowOrder:

    def test_show_existing(self):
        repo = FakeOrderRepository()
        order_id = _store_order(repo)
        dto = ShowOrderHandler(repo).handle(order_id)
        assert dto.id == order_id
        assert dto.total == "₹150.00"
        assert dto.payment_method == "Cash on Delivery"
        assert dto.created_at == "2025-03-14 09:30 UTC"

    def test_show_missing(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowOrderHandler(FakeOrderRepository()).handle("nope")


class TestListCustomerOrders:

    def test_newest_first_and_scoped_to_customer(self):
        repo = FakeOrderRepository()
        first = _store_order(repo, minutes=0)
        second = _store_order(repo, minutes=5)
        _store_order(repo, customer_id="uid-2")

        dtos = ListCustomerOrdersHandler(repo).handle("uid-1")

        assert [d.id for d in dtos] == [second, first]

    def test_no_orders(self):
        assert ListCustomerOrdersHandler(FakeOrderRepository()).handle("uid-9") == []


class TestUpdateOrderStatus:

    def test_confirm_then_ship(self):
        repo = FakeOrderRepository()
        order_id = _store_order(repo)
        handler = UpdateOrderStatusHandler(repo)

        handler.handle(order_id, "confirmed")
        handler.handle(order_id, "SHIPPED")

        assert repo.get_by_id(order_id).status == OrderStatus.SHIPPED

    def test_illegal_transition(self):
        repo = FakeOrderRepository()
        order_id = _store_order(repo)
        with pytest.raises(ValidationError, match="expected shipped"):
            UpdateOrderStatusHandler(repo).handle(order_id, "delivered")

    def test_unknown_status(self):
        repo = FakeOrderRepository()
        order_id = _store_order(repo)
        with pytest.raises(ValidationError, match="Unknown order status"):
            UpdateOrderStatusHandler(repo).handle(order_id, "lost")

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError):
            UpdateOrderStatusHandler(FakeOrderRepository()).handle("nope", "confirmed")
