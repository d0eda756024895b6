"""Portfolio analytics service."""

from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.engine import PortfolioStats, summarize_portfolio
from challenge_tracker.services.challenge_service import challenge_service


class AnalyticsService:
    """Aggregates results across all of a user's challenges."""

    async def get_portfolio_stats(self, db: AsyncSession, user_id: int) -> PortfolioStats:
        challenges = await challenge_service.list_challenges(db, user_id)
        return summarize_portfolio((c, c.bets) for c in challenges)


# Singleton instance
analytics_service = AnalyticsService()
