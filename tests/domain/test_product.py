"""Unit tests for the Product aggregate."""

import pytest

from titan.domain.exceptions import ValidationError
from titan.domain.model.product import Product
from titan.domain.model.value_objects import Money
from tests.helpers import make_product


class TestProduct:

    def test_rating_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="rating"):
            Product(id="p1", name="X", price=Money.of("1"), rating=5.5)

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError, match="id is required"):
            Product(id="", name="X", price=Money.of("1"))

    def test_update_price(self):
        p = make_product(price="10.00")
        p.update_price(Money.of("12.50"))
        assert p.price == Money.of("12.50")

    def test_price_can_drop_to_zero(self):
        p = make_product(price="10.00")
        p.update_price(Money.of("0"))
        assert p.price == Money.zero()

    def test_matches_name_or_description_case_insensitively(self):
        p = make_product(name="Noise Cancelling Headphones", description="Over-ear, wireless")
        assert p.matches("headphones")
        assert p.matches("WIRELESS")
        assert not p.matches("keyboard")
