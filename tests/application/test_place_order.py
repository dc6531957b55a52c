"""Tests for the buyer-side Place Order use case."""

from decimal import Decimal

import pytest

from titan.application.cart_engine import CartEngine
from titan.application.checkout import CheckoutHandler
from titan.application.checkout_gateway import CheckoutGateway, LocalCheckoutGateway
from titan.application.dto import CheckoutReceipt, CheckoutRequest, CustomerSpec
from titan.application.place_order import PlaceOrderHandler
from titan.domain.exceptions import (
    PersistenceError,
    UnknownProductError,
    ValidationError,
)
from tests.fakes import FakeCartStore, FakeOrderRepository, FakeProductRepository
from tests.helpers import make_product

ADA = CustomerSpec(name="Ada", email="ada@example.com")


def _setup(order_kwargs=None):
    catalog = FakeProductRepository([
        make_product("p1", price="10.00"),
        make_product("p2", price="5.50"),
    ])
    orders = FakeOrderRepository(**(order_kwargs or {}))
    store = FakeCartStore()
    engine = CartEngine(store)
    gateway = LocalCheckoutGateway(CheckoutHandler(orders, catalog))
    return PlaceOrderHandler(engine, gateway), engine, store, orders, catalog


class TestPlaceOrder:

    def test_success_clears_cart_after_order_exists(self):
        handler, engine, store, orders, _ = _setup()
        engine.add(make_product("p1", price="10.00"))
        engine.add(make_product("p1", price="10.00"))
        engine.add(make_product("p2", price="5.50"))

        receipt = handler.handle(ADA)

        assert receipt.total == Decimal("25.50")
        assert orders.get_by_id(receipt.order_id) is not None
        assert engine.cart.is_empty
        assert store.saved.is_empty

    def test_stale_cart_price_is_repriced(self):
        handler, engine, _, _, _ = _setup()
        engine.add(make_product("p1", price="0.01"))
        receipt = handler.handle(ADA)
        assert receipt.total == Decimal("10.00")

    def test_validation_failure_keeps_cart(self):
        handler, engine, _, _, _ = _setup()
        engine.add(make_product("p1"))
        with pytest.raises(ValidationError):
            handler.handle(CustomerSpec(name="", email=""))
        assert engine.count() == 1

    def test_unknown_product_keeps_cart(self):
        handler, engine, _, orders, _ = _setup()
        engine.add(make_product("p1"))
        engine.add(make_product("retired"))
        with pytest.raises(UnknownProductError):
            handler.handle(ADA)
        assert engine.count() == 2
        assert orders.all() == []

    def test_persistence_failure_keeps_cart(self):
        handler, engine, store, _, _ = _setup(order_kwargs={"fail_on_add": True})
        engine.add(make_product("p1"))
        with pytest.raises(PersistenceError):
            handler.handle(ADA)
        assert engine.count() == 1
        assert store.saved.count == 1

    def test_cart_clear_write_failure_still_returns_receipt(self):
        handler, engine, store, orders, _ = _setup()
        engine.add(make_product("p1"))
        store.fail_on_save = True
        receipt = handler.handle(ADA)
        assert orders.get_by_id(receipt.order_id) is not None
        assert engine.cart.is_empty
        assert engine.is_dirty


class _ReentrantGateway(CheckoutGateway):
    """Simulates a second click arriving while the first request is pending."""

    def __init__(self) -> None:
        self.handler: PlaceOrderHandler | None = None
        self.calls = 0
        self.nested_error: Exception | None = None

    def submit(self, request: CheckoutRequest) -> CheckoutReceipt:
        self.calls += 1
        try:
            self.handler.handle(ADA)
        except ValidationError as exc:
            self.nested_error = exc
        return CheckoutReceipt(order_id="o-1", total=Decimal("10.00"))


class TestDoubleSubmit:

    def test_second_submit_refused_while_in_flight(self):
        engine = CartEngine(FakeCartStore())
        engine.add(make_product("p1"))
        gateway = _ReentrantGateway()
        handler = PlaceOrderHandler(engine, gateway)
        gateway.handler = handler

        handler.handle(ADA)

        assert gateway.calls == 1
        assert "already in progress" in str(gateway.nested_error)
        assert not handler.in_flight

    def test_guard_released_after_failure(self):
        handler, engine, _, _, catalog = _setup()
        engine.add(make_product("p1"))
        catalog.fail_on_read = True
        with pytest.raises(PersistenceError):
            handler.handle(ADA)
        assert not handler.in_flight
        catalog.fail_on_read = False
        assert handler.handle(ADA).total == Decimal("10.00")
