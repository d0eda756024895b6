"""
Unit Tests: Aggregates

Test cases:
- Portfolio win rate, net profit and ROI
- Budget and gambling limit usage
- Spending breakdown by category
"""

from decimal import Decimal

import pytest

from challenge_tracker.engine import (
    BetLine,
    BetResult,
    ChallengeTerms,
    InvalidInputError,
    limit_usage,
    spending_by_category,
    summarize_portfolio,
)


def test_portfolio_stats_across_challenges():
    first = ChallengeTerms(1000, 5000, 130, 10)
    second = ChallengeTerms(3000, 9000, 120, 5)
    portfolio = [
        (
            first,
            [
                BetLine(1, 1000, 130, BetResult.WIN, 300),
                BetLine(2, 1300, 130, BetResult.LOSS, -1300),
            ],
        ),
        (
            second,
            [
                BetLine(1, 3000, 120, BetResult.WIN, 600),
                BetLine(2, 3600, 120),
            ],
        ),
    ]

    stats = summarize_portfolio(portfolio)

    assert stats.total_profit == 900
    assert stats.total_loss == 1300
    assert stats.net_profit == -400
    assert stats.total_bets == 4
    assert stats.win_bets == 2
    assert stats.win_rate == Decimal(50)
    assert stats.total_staked == 4000
    assert stats.roi == Decimal(-10)


def test_empty_portfolio_has_zero_rates():
    stats = summarize_portfolio([])
    assert stats.total_bets == 0
    assert stats.win_rate == 0
    assert stats.roi == 0


def test_limit_usage_under_threshold():
    usage = limit_usage(spent=2500, limit=10000)
    assert usage.percentage == Decimal(25)
    assert usage.alert is False
    assert usage.exceeded is False


def test_limit_usage_alert_at_threshold():
    usage = limit_usage(spent=8000, limit=10000, alert_threshold=80)
    assert usage.alert is True
    assert usage.exceeded is False


def test_limit_usage_exceeded_is_clamped_for_display():
    usage = limit_usage(spent=15000, limit=10000)
    assert usage.percentage == Decimal(150)
    assert usage.display_percentage == Decimal(100)
    assert usage.exceeded is True


def test_limit_usage_exactly_at_limit_is_not_exceeded():
    assert limit_usage(spent=10000, limit=10000).exceeded is False


@pytest.mark.parametrize("limit, threshold", [(0, 80), (-1, 80), (100, 101), (100, -1)])
def test_limit_usage_rejects_invalid_limits(limit, threshold):
    with pytest.raises(InvalidInputError):
        limit_usage(spent=0, limit=limit, alert_threshold=threshold)


def test_spending_by_category_sorted_largest_first():
    totals = spending_by_category(
        [("food", 1000), ("rent", 5000), ("food", 1500), ("fun", 2500)]
    )

    assert [t.category for t in totals] == ["rent", "food", "fun"]
    assert [t.amount for t in totals] == [5000, 2500, 2500]
    assert totals[0].percentage == Decimal(50)
    assert totals[1].percentage == Decimal(25)


def test_spending_by_category_empty():
    assert spending_by_category([]) == []
