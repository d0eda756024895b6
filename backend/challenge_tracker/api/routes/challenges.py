"""Challenge API routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.database import get_current_user_id, get_db
from challenge_tracker.engine import odds_to_scaled, to_cents
from challenge_tracker.schemas import (
    ChallengeCreate,
    ChallengeDetailResponse,
    ChallengeResponse,
    ChallengeStatusUpdate,
    MessageResponse,
)
from challenge_tracker.services import challenge_service

router = APIRouter(prefix="/challenges", tags=["Challenges"])


@router.post("", response_model=ChallengeResponse, status_code=status.HTTP_201_CREATED)
async def create_challenge(
    body: ChallengeCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create a challenge."""
    challenge = await challenge_service.create_challenge(
        db,
        user_id=user_id,
        name=body.name,
        initial_stake=to_cents(body.initial_stake, field="initial_stake"),
        target_amount=to_cents(body.target_amount, field="target_amount"),
        odds=odds_to_scaled(body.odds),
        days_total=body.days_total,
        strategy=body.strategy,
    )
    return ChallengeResponse.from_model(challenge, challenge_service.get_progress(challenge))


@router.get("", response_model=list[ChallengeResponse])
async def list_challenges(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """List the caller's challenges, newest first."""
    challenges = await challenge_service.list_challenges(db, user_id)
    return [
        ChallengeResponse.from_model(challenge, challenge_service.get_progress(challenge))
        for challenge in challenges
    ]


@router.get("/{challenge_id}", response_model=ChallengeDetailResponse)
async def get_challenge(
    challenge_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get a challenge with its bets and progress."""
    challenge = await challenge_service.get_owned_challenge(db, challenge_id, user_id)
    return ChallengeDetailResponse.from_model(
        challenge, challenge_service.get_progress(challenge)
    )


@router.patch("/{challenge_id}/status", response_model=ChallengeResponse)
async def update_challenge_status(
    challenge_id: int,
    body: ChallengeStatusUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    challenge = await challenge_service.update_status(db, challenge_id, user_id, body.status)
    return ChallengeResponse.from_model(challenge, challenge_service.get_progress(challenge))


@router.post("/{challenge_id}/finalize", response_model=ChallengeResponse)
async def finalize_challenge(
    challenge_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Close the challenge as completed or failed, depending on its balance."""
    challenge = await challenge_service.finalize_challenge(db, challenge_id, user_id)
    return ChallengeResponse.from_model(challenge, challenge_service.get_progress(challenge))


@router.delete("/{challenge_id}", response_model=MessageResponse)
async def delete_challenge(
    challenge_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await challenge_service.delete_challenge(db, challenge_id, user_id)
    return MessageResponse(message=f"Challenge {challenge_id} deleted")
