"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from titan.domain.exceptions import ValidationError
from titan.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_cents(self):
        assert Money.of(19.99).amount == Decimal("19.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)  # type: ignore[arg-type]

    def test_addition_is_exact(self):
        total = Money.zero()
        for _ in range(10):
            total = total + Money.of("0.10")
        assert total == Money.of("1.00")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5  # type: ignore[operator]

    def test_rounded_half_up(self):
        assert Money.of("0.125").rounded() == Money.of("0.13")
        assert Money.of("0.135").rounded() == Money.of("0.14")
        assert Money.of("2.004").rounded() == Money.of("2.00")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_str(self):
        assert str(Quantity(7)) == "7"


class TestQuantityNormalize:

    @pytest.mark.parametrize("raw, expected", [
        (3, 3),
        ("4", 4),
        (" 2 ", 2),
        ("2.7", 2),
        (2.9, 2),
        ("abc", 1),
        ("", 1),
        (None, 1),
        (0, 1),
        (-5, 1),
        ("-2", 1),
        (True, 1),
        ([1, 2], 1),
        (float("nan"), 1),
    ])
    def test_clamps_untrusted_input(self, raw, expected):
        assert Quantity.normalize(raw).value == expected
