"""Analytics API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.database import get_current_user_id, get_db
from challenge_tracker.schemas import CategoryTotalResponse, PortfolioStatsResponse
from challenge_tracker.services import analytics_service, budget_service

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/summary", response_model=PortfolioStatsResponse)
async def get_summary(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Profit, win rate and ROI across all of the caller's challenges."""
    stats = await analytics_service.get_portfolio_stats(db, user_id)
    return PortfolioStatsResponse.from_stats(stats)


@router.get("/spending", response_model=list[CategoryTotalResponse])
async def get_spending(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    totals = await budget_service.get_spending_breakdown(db, user_id)
    return [CategoryTotalResponse.from_total(total) for total in totals]
