"""Bet Pydantic schemas."""

from typing import Optional

from pydantic import Field

from challenge_tracker.engine import BetResult, from_cents, scaled_to_odds
from challenge_tracker.models import Bet
from challenge_tracker.schemas.common import BaseSchema, Money, Odds, TimestampSchema


class BetCreate(BaseSchema):
    """Bet creation schema; stake and day number are assigned by the server."""

    team_name: str = Field(min_length=1, max_length=255)
    match_details: Optional[str] = None
    odds: Optional[Odds] = Field(
        default=None,
        description="Decimal odds; defaults to the challenge odds ceiling",
    )


class BetResultUpdate(BaseSchema):
    """Bet settlement schema."""

    result: BetResult = Field(description="win or loss")


class BetResponse(TimestampSchema):
    """Bet response schema."""

    id: int
    challenge_id: int
    day_number: int
    team_name: str
    match_details: Optional[str]
    stake_amount: Money
    odds: Odds
    result: BetResult
    profit: Money

    @classmethod
    def from_model(cls, bet: Bet) -> "BetResponse":
        return cls(
            id=bet.id,
            challenge_id=bet.challenge_id,
            day_number=bet.day_number,
            team_name=bet.team_name,
            match_details=bet.match_details,
            stake_amount=from_cents(bet.stake_amount),
            odds=scaled_to_odds(bet.odds),
            result=bet.result,
            profit=from_cents(bet.profit),
            created_at=bet.created_at,
            updated_at=bet.updated_at,
        )
