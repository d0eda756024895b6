"""Analytics and calculator Pydantic schemas."""

from challenge_tracker.engine import PortfolioStats, from_cents
from challenge_tracker.schemas.common import BaseSchema, Money, Odds, Percent


class PortfolioStatsResponse(BaseSchema):
    total_profit: Money
    total_loss: Money
    net_profit: Money
    total_bets: int
    win_bets: int
    win_rate: Percent
    total_staked: Money
    roi: Percent

    @classmethod
    def from_stats(cls, stats: PortfolioStats) -> "PortfolioStatsResponse":
        return cls(
            total_profit=from_cents(stats.total_profit),
            total_loss=from_cents(stats.total_loss),
            net_profit=from_cents(stats.net_profit),
            total_bets=stats.total_bets,
            win_bets=stats.win_bets,
            win_rate=stats.win_rate,
            total_staked=from_cents(stats.total_staked),
            roi=stats.roi,
        )


class DaysNeededResponse(BaseSchema):
    """Result of the standalone days-needed calculator."""

    stake: Money
    target: Money
    odds: Odds
    days_needed: int
    projected_balance: Money
