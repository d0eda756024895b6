"""Unit tests for the days-needed calculator."""

import math

import pytest

from challenge_tracker.engine import InvalidInputError, compound_growth, days_needed


def test_reference_case():
    # ceil(ln(500) / ln(1.3)) = ceil(23.69)
    assert days_needed(1000, 500_000, 130) == 24


@pytest.mark.parametrize(
    "stake, target, odds",
    [
        (1000, 500_000, 130),
        (1000, 1001, 101),
        (1000, 2000, 200),  # exact power: one day reaches the target exactly
        (1000, 1690, 130),  # exact power: 1.3 ** 2 == 1.69
        (500, 1_000_000, 150),
        (1, 10**9, 105),
    ],
)
def test_days_needed_is_tight(stake, target, odds):
    days = days_needed(stake, target, odds)

    assert compound_growth(stake, odds, days) >= target
    assert compound_growth(stake, odds, days - 1) < target


def test_exact_powers_need_no_extra_day():
    assert days_needed(1000, 2000, 200) == 1
    assert days_needed(1000, 1690, 130) == 2


def test_matches_logarithmic_formula():
    expected = math.ceil(math.log(5000 / 10) / math.log(1.3))
    assert days_needed(10, 5000, 130) == expected


@pytest.mark.parametrize(
    "stake, target, odds, field",
    [
        (0, 5000, 130, "stake"),
        (-100, 5000, 130, "stake"),
        (1000, 1000, 130, "target"),
        (1000, 500, 130, "target"),
        (1000, 5000, 100, "odds"),
        (1000, 5000, 90, "odds"),
    ],
)
def test_invalid_inputs_are_rejected(stake, target, odds, field):
    with pytest.raises(InvalidInputError) as exc_info:
        days_needed(stake, target, odds)
    assert exc_info.value.field == field


def test_compound_growth_has_no_intermediate_rounding():
    assert compound_growth(1000, 130, 2) == 1690
    assert compound_growth(1, 150, 3) * 8 == 27
