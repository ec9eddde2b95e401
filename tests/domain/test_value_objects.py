"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "INR"

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(40).amount == Decimal("40")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(0.1)

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("forty")

    def test_fractions_of_a_paisa_rejected(self):
        with pytest.raises(ValidationError, match="two decimal places"):
            Money.of("40.125")

    def test_held_to_two_places(self):
        assert str(Money.of("40.1").amount) == "40.10"
        assert str(Money.of("12.500").amount) == "12.50"
        assert str(Money.of(40).amount) == "40.00"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_zero_allowed(self):
        assert Money.of("0") == Money.zero()

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_exact_decimal_sum(self):
        total = Money.of("0.10") + Money.of("0.20")
        assert total == Money.of("0.30")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot add"):
            Money(Decimal("10"), "INR") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "₹15.00"
        assert str(Money.of("9.5")) == "₹9.50"


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

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)
