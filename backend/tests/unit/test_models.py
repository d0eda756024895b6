"""Unit tests for table definitions."""

import pytest
from sqlalchemy import BigInteger

from challenge_tracker.models import Bet, Budget, Challenge, Expense, GamblingHabits


@pytest.mark.parametrize(
    "model, columns",
    [
        (Challenge, ["initial_stake", "target_amount"]),
        (Bet, ["stake_amount", "profit"]),
        (Budget, ["amount", "spent"]),
        (Expense, ["amount"]),
        (
            GamblingHabits,
            [
                "daily_limit",
                "weekly_limit",
                "monthly_limit",
                "today_spent",
                "this_week_spent",
                "this_month_spent",
            ],
        ),
    ],
)
def test_cents_columns_are_64_bit(model, columns):
    for name in columns:
        assert isinstance(model.__table__.c[name].type, BigInteger), name
