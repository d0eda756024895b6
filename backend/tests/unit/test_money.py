"""Unit tests for fixed-point conversions."""

from decimal import Decimal

import pytest

from challenge_tracker.engine import (
    MAX_CENTS,
    InvalidInputError,
    from_cents,
    odds_to_scaled,
    scaled_to_odds,
    to_cents,
)


@pytest.mark.parametrize(
    "amount, cents",
    [
        (Decimal("10.50"), 1050),
        ("0.01", 1),
        (10, 1000),
        (0.1, 10),
        (Decimal("1.005"), 101),  # half-up
        (Decimal("1.004"), 100),
    ],
)
def test_to_cents(amount, cents):
    assert to_cents(amount) == cents


def test_from_cents_keeps_two_places():
    assert from_cents(1050) == Decimal("10.50")
    assert str(from_cents(5)) == "0.05"
    assert str(from_cents(-1300)) == "-13.00"


def test_odds_scaling():
    assert odds_to_scaled(Decimal("1.30")) == 130
    assert odds_to_scaled(1.3) == 130
    assert odds_to_scaled("2.05") == 205
    assert str(scaled_to_odds(130)) == "1.30"


@pytest.mark.parametrize("amount", ["1e27", Decimal("1e13") + 1, -(10**14)])
def test_to_cents_rejects_amounts_beyond_storage_range(amount):
    with pytest.raises(InvalidInputError) as exc_info:
        to_cents(amount, field="target_amount")
    assert exc_info.value.field == "target_amount"


def test_to_cents_accepts_the_largest_amount():
    assert to_cents(Decimal("1e13")) == MAX_CENTS


@pytest.mark.parametrize("amount", ["NaN", "Infinity", "ten"])
def test_to_cents_rejects_non_numbers(amount):
    with pytest.raises(InvalidInputError):
        to_cents(amount)


def test_odds_with_more_than_two_places_are_rejected_not_rounded():
    with pytest.raises(InvalidInputError, match="1.004") as exc_info:
        odds_to_scaled("1.004")
    assert exc_info.value.field == "odds"


@pytest.mark.parametrize("odds", ["1e27", "1000.01"])
def test_odds_beyond_range_are_rejected(odds):
    with pytest.raises(InvalidInputError):
        odds_to_scaled(odds)
