"""Bet API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.config import Settings
from challenge_tracker.database import get_app_settings, get_current_user_id, get_db
from challenge_tracker.engine import odds_to_scaled
from challenge_tracker.schemas import BetCreate, BetResponse, BetResultUpdate
from challenge_tracker.services import bet_service

router = APIRouter(tags=["Bets"])


@router.post(
    "/challenges/{challenge_id}/bets",
    response_model=BetResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_bet(
    challenge_id: int,
    body: BetCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Place the next day's bet.

    The stake is taken from the challenge's current next stake; odds default
    to the challenge odds.
    """
    bet = await bet_service.add_bet(
        db,
        challenge_id=challenge_id,
        user_id=user_id,
        team_name=body.team_name,
        config=settings.challenge,
        match_details=body.match_details,
        odds=odds_to_scaled(body.odds) if body.odds is not None else None,
    )
    return BetResponse.from_model(bet)


@router.post("/bets/{bet_id}/result", response_model=BetResponse)
async def settle_bet(
    bet_id: int,
    body: BetResultUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Settle a pending bet as a win or a loss."""
    bet = await bet_service.settle_bet(db, bet_id, user_id, body.result)
    return BetResponse.from_model(bet)
