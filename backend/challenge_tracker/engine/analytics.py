"""Portfolio and spending aggregates built on top of the balance engine."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Sequence

from challenge_tracker.engine.balance import coerce_result
from challenge_tracker.engine.exceptions import InvalidInputError
from challenge_tracker.engine.types import (
    BetLike,
    BetResult,
    CategoryTotal,
    ChallengeLike,
    LimitUsage,
    PortfolioStats,
)

_HUNDRED = Decimal(100)
_ZERO = Decimal(0)


def _percent(part: int, whole: int) -> Decimal:
    if whole == 0:
        return _ZERO
    return Decimal(part) / Decimal(whole) * _HUNDRED


def summarize_portfolio(
    challenges: Iterable[tuple[ChallengeLike, Sequence[BetLike]]],
) -> PortfolioStats:
    """Win rate, net profit and ROI across a set of challenges.

    Pending bets count toward ``total_bets`` (and so dilute the win rate) but
    contribute no profit or loss. ROI is measured against the sum of initial
    stakes.
    """
    total_profit = 0
    total_loss = 0
    total_bets = 0
    win_bets = 0
    total_staked = 0

    for challenge, bets in challenges:
        total_staked += challenge.initial_stake
        for bet in bets:
            total_bets += 1
            result = coerce_result(bet)
            if result is BetResult.WIN:
                win_bets += 1
                total_profit += bet.profit
            elif result is BetResult.LOSS:
                total_loss += abs(bet.profit)

    net_profit = total_profit - total_loss
    return PortfolioStats(
        total_profit=total_profit,
        total_loss=total_loss,
        net_profit=net_profit,
        total_bets=total_bets,
        win_bets=win_bets,
        win_rate=_percent(win_bets, total_bets),
        total_staked=total_staked,
        roi=_percent(net_profit, total_staked),
    )


def limit_usage(spent: int, limit: int, alert_threshold: int = 80) -> LimitUsage:
    """Share of a budget or gambling limit that has been used."""
    if limit <= 0:
        raise InvalidInputError(f"Limit must be positive, got {limit}", field="limit")
    if not (0 <= alert_threshold <= 100):
        raise InvalidInputError(
            f"Alert threshold must be between 0 and 100, got {alert_threshold}",
            field="alert_threshold",
        )

    percentage = _percent(spent, limit)
    return LimitUsage(
        spent=spent,
        limit=limit,
        percentage=percentage,
        display_percentage=min(percentage, _HUNDRED),
        exceeded=percentage > _HUNDRED,
        alert=percentage >= alert_threshold,
    )


def spending_by_category(expenses: Iterable[tuple[str, int]]) -> list[CategoryTotal]:
    """Totals per category, largest first, each with its share of the total."""
    totals: dict[str, int] = defaultdict(int)
    for category, amount in expenses:
        totals[category] += amount

    grand_total = sum(totals.values())
    ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        CategoryTotal(
            category=category,
            amount=amount,
            percentage=_percent(amount, grand_total),
        )
        for category, amount in ranked
    ]
