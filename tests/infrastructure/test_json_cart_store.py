"""Tests for the JSON-file cart store (durable client-side storage)."""

import json
from dataclasses import replace

from titan.domain.model.cart import Cart
from titan.domain.model.value_objects import Money
from titan.infrastructure.persistence.json_cart_store import JsonCartStore
from tests.helpers import make_product


def _cart() -> Cart:
    cart = Cart()
    cart.add(make_product("p1", name="Widget", price="19.99", description="Small"))
    cart.add(make_product("p2", name="Gadget", price="5.50"))
    cart.add(make_product("p1", name="Widget", price="19.99", description="Small"))
    return cart


class TestRoundTrip:

    def test_restore_of_persist_is_identity(self, tmp_path):
        store = JsonCartStore(tmp_path / "cart.json")
        cart = _cart()
        store.save(cart)
        assert store.load() == cart

    def test_totals_survive_many_round_trips(self, tmp_path):
        store = JsonCartStore(tmp_path / "cart.json")
        cart = _cart()
        for _ in range(10):
            store.save(cart)
            cart = store.load()
        assert cart.total == Money.of("45.48")

    def test_file_layout(self, tmp_path):
        path = tmp_path / "cart.json"
        JsonCartStore(path, key="titan_cart").save(_cart())
        document = json.loads(path.read_text())
        lines = document["titan_cart"]
        assert [line["productId"] for line in lines] == ["p1", "p2"]
        assert lines[0]["quantity"] == 2
        assert lines[0]["name"] == "Widget"
        assert lines[0]["price"] == "19.99"

    def test_empty_badge_survives_round_trip(self, tmp_path):
        store = JsonCartStore(tmp_path / "cart.json")
        cart = Cart()
        cart.add(replace(make_product("p1"), badge=""))
        cart.add(replace(make_product("p2"), badge="Sale"))
        store.save(cart)
        restored = store.load()
        assert restored == cart
        assert restored.line_for("p1").product.badge == ""

    def test_other_keys_preserved(self, tmp_path):
        path = tmp_path / "cart.json"
        path.write_text(json.dumps({"theme": "dark"}))
        JsonCartStore(path).save(_cart())
        assert json.loads(path.read_text())["theme"] == "dark"


class TestDegradedReads:

    def test_missing_file_is_empty_cart(self, tmp_path):
        assert JsonCartStore(tmp_path / "absent.json").load().is_empty

    def test_corrupt_json_is_empty_cart(self, tmp_path):
        path = tmp_path / "cart.json"
        path.write_text("{not json")
        assert JsonCartStore(path).load().is_empty

    def test_wrong_shape_is_empty_cart(self, tmp_path):
        path = tmp_path / "cart.json"
        path.write_text(json.dumps({"titan_cart": "oops"}))
        assert JsonCartStore(path).load().is_empty

    def test_bad_record_is_empty_cart(self, tmp_path):
        path = tmp_path / "cart.json"
        path.write_text(json.dumps({"titan_cart": [{"productId": "p1", "price": "-3"}]}))
        assert JsonCartStore(path).load().is_empty

    def test_legacy_numeric_price_and_duplicates(self, tmp_path):
        path = tmp_path / "cart.json"
        path.write_text(json.dumps({"titan_cart": [
            {"_id": "p1", "name": "Widget", "price": 19.99, "quantity": 1},
            {"_id": "p1", "name": "Widget", "price": 19.99, "quantity": 2},
        ]}))
        cart = JsonCartStore(path).load()
        assert len(cart) == 1
        assert cart.line_for("p1").quantity == 3
        assert cart.total == Money.of("59.97")

    def test_corrupt_file_is_overwritten_on_save(self, tmp_path):
        path = tmp_path / "cart.json"
        path.write_text("garbage")
        store = JsonCartStore(path)
        store.save(_cart())
        assert store.load() == _cart()

    def test_infinite_quantity_is_empty_cart(self, tmp_path):
        path = tmp_path / "cart.json"
        path.write_text(
            '{"titan_cart": [{"productId": "p1", "name": "W", "price": "1.00", "quantity": 1e400}]}'
        )
        assert JsonCartStore(path).load().is_empty

    def test_nan_quantity_is_empty_cart(self, tmp_path):
        path = tmp_path / "cart.json"
        path.write_text(
            '{"titan_cart": [{"productId": "p1", "name": "W", "price": "1.00", "quantity": NaN}]}'
        )
        assert JsonCartStore(path).load().is_empty
