"""Challenge Pydantic schemas."""

from pydantic import Field, field_validator

from challenge_tracker.engine import (
    ChallengeProgress,
    ChallengeStatus,
    Strategy,
    from_cents,
    scaled_to_odds,
)
from challenge_tracker.models import Challenge
from challenge_tracker.schemas.bet import BetResponse
from challenge_tracker.schemas.common import BaseSchema, Money, Odds, Percent, TimestampSchema


class ChallengeCreate(BaseSchema):
    """Challenge creation schema; amounts in currency units, odds as decimals."""

    name: str = Field(min_length=1, max_length=255)
    initial_stake: Money
    target_amount: Money
    odds: Odds = Field(description="Maximum odds any bet in the challenge may use")
    days_total: int
    strategy: Strategy = Strategy.COMPOUND

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Please enter a challenge name")
        return v


class ChallengeStatusUpdate(BaseSchema):
    status: ChallengeStatus


class ChallengeProgressResponse(BaseSchema):
    """Figures derived by the balance engine."""

    current_balance: Money
    display_balance: Money
    accumulated_profit: Money
    next_stake: Money
    progress_percentage: Percent
    settled_bets: int
    wins: int
    losses: int
    next_day_number: int
    plan_complete: bool

    @classmethod
    def from_progress(cls, progress: ChallengeProgress) -> "ChallengeProgressResponse":
        return cls(
            current_balance=from_cents(progress.current_balance),
            display_balance=from_cents(progress.display_balance),
            accumulated_profit=from_cents(progress.accumulated_profit),
            next_stake=from_cents(progress.next_stake),
            progress_percentage=progress.progress_percentage,
            settled_bets=progress.settled_bets,
            wins=progress.wins,
            losses=progress.losses,
            next_day_number=progress.next_day_number,
            plan_complete=progress.plan_complete,
        )


class ChallengeResponse(TimestampSchema):
    """Challenge response schema."""

    id: int
    user_id: int
    name: str
    initial_stake: Money
    target_amount: Money
    odds: Odds
    days_total: int
    strategy: Strategy
    status: ChallengeStatus
    progress: ChallengeProgressResponse

    @classmethod
    def _fields_from_model(cls, challenge: Challenge, progress: ChallengeProgress) -> dict:
        return dict(
            id=challenge.id,
            user_id=challenge.user_id,
            name=challenge.name,
            initial_stake=from_cents(challenge.initial_stake),
            target_amount=from_cents(challenge.target_amount),
            odds=scaled_to_odds(challenge.odds),
            days_total=challenge.days_total,
            strategy=challenge.strategy,
            status=challenge.status,
            progress=ChallengeProgressResponse.from_progress(progress),
            created_at=challenge.created_at,
            updated_at=challenge.updated_at,
        )

    @classmethod
    def from_model(cls, challenge: Challenge, progress: ChallengeProgress) -> "ChallengeResponse":
        return cls(**cls._fields_from_model(challenge, progress))


class ChallengeDetailResponse(ChallengeResponse):
    """Challenge with its bets in day order."""

    bets: list[BetResponse]

    @classmethod
    def from_model(
        cls, challenge: Challenge, progress: ChallengeProgress
    ) -> "ChallengeDetailResponse":
        return cls(
            **cls._fields_from_model(challenge, progress),
            bets=[BetResponse.from_model(bet) for bet in challenge.bets],
        )
