"""Unit tests for the Order aggregate and Customer normalization."""

import pytest

from titan.domain.exceptions import ValidationError
from titan.domain.model.order import Customer, Order, OrderLineItem, OrderStatus
from titan.domain.model.value_objects import Money, Quantity


def _make_item(qty: int = 1, price: str = "15.00", product_id: str = "p1") -> OrderLineItem:
    return OrderLineItem(
        product_id=product_id,
        product_name="Widget",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


class TestCustomer:

    def test_normalizes_fields(self):
        c = Customer.create("  Ada Lovelace ", "  Ada@Example.COM ", None)
        assert c.name == "Ada Lovelace"
        assert c.email == "ada@example.com"
        assert c.address == ""

    @pytest.mark.parametrize("name, email", [
        ("", "a@b.c"),
        ("   ", "a@b.c"),
        (None, "a@b.c"),
        ("Ada", ""),
        ("Ada", None),
    ])
    def test_missing_name_or_email_rejected(self, name, email):
        with pytest.raises(ValidationError, match="name and email are required"):
            Customer.create(name, email)


class TestOrderCreation:

    def test_new_order_is_pending(self):
        order = Order.create(Customer.create("Ada", "a@b.c"), [_make_item()])
        assert order.status == OrderStatus.PENDING
        assert order.id is None  # assigned by repository
        assert order.created_at.tzinfo is not None

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create(Customer.create("Ada", "a@b.c"), [])

    def test_total_is_sum_of_line_items(self):
        order = Order.create(
            Customer.create("Ada", "a@b.c"),
            [_make_item(qty=2, price="10.00"), _make_item(qty=1, price="5.50", product_id="p2")],
        )
        assert order.total == Money.of("25.50")

    def test_total_rounded_half_up_to_cents(self):
        order = Order.create(
            Customer.create("Ada", "a@b.c"),
            [_make_item(qty=1, price="0.105")],
        )
        assert order.total == Money.of("0.11")


class TestOrderLineItem:

    def test_line_total_calculation(self):
        assert _make_item(qty=3, price="15.00").line_total == Money.of("45.00")
