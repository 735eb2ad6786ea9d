"""Unit tests for domain value objects."""

import hashlib
from decimal import Decimal

import pytest

from mythic.domain.exceptions import ValidationError
from mythic.domain.model.value_objects import EmailAddress, Money, PasswordHash, new_id


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_goes_through_str(self):
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money(Decimal("Infinity"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


class TestMoneyScaling:

    def test_scaled_rounds_to_cents(self):
        assert Money.of("15.00").scaled(Decimal("1.2")).amount == Decimal("18.00")

    def test_half_even_rounds_down_to_even_cent(self):
        # 0.10 x 1.25 = 0.125 -> 0.12
        assert Money.of("0.10").scaled(Decimal("1.25")).amount == Decimal("0.12")

    def test_half_even_rounds_up_to_even_cent(self):
        # 0.30 x 1.25 = 0.375 -> 0.38
        assert Money.of("0.30").scaled(Decimal("1.25")).amount == Decimal("0.38")

    def test_scaling_keeps_currency(self):
        assert Money(Decimal("1"), "EUR").scaled(Decimal("2")).currency == "EUR"


# ── EmailAddress ─────────────────────────────────────────────────────────────


class TestEmailAddress:

    def test_normalised(self):
        assert str(EmailAddress.of("  Alice@Example.COM ")) == "alice@example.com"

    @pytest.mark.parametrize("raw", ["", "alice", "alice@", "@example.com", "a b@example.com"])
    def test_invalid_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid e-mail"):
            EmailAddress.of(raw)


# ── PasswordHash ─────────────────────────────────────────────────────────────


class TestPasswordHash:

    def test_sha512_hex_digest(self):
        expected = hashlib.sha512(b"hunter2").hexdigest()
        assert PasswordHash.from_plain("hunter2").digest == expected
        assert len(expected) == 128

    def test_empty_password_rejected(self):
        with pytest.raises(ValidationError, match="Password is required"):
            PasswordHash.from_plain("")


def test_new_id_is_unique_hex():
    a, b = new_id(), new_id()
    assert a != b
    int(a, 16)
