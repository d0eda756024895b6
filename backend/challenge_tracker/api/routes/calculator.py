"""Days-needed calculator route."""

from decimal import Decimal

from fastapi import APIRouter, Query

from challenge_tracker.engine import (
    compound_growth,
    days_needed,
    from_cents,
    odds_to_scaled,
    scaled_to_odds,
    to_cents,
)
from challenge_tracker.schemas import DaysNeededResponse

router = APIRouter(prefix="/calculator", tags=["Calculator"])


@router.get("/days-needed", response_model=DaysNeededResponse)
async def calculate_days_needed(
    stake: Decimal = Query(..., description="Starting stake"),
    target: Decimal = Query(..., description="Target amount"),
    odds: Decimal = Query(..., description="Decimal odds of every bet"),
):
    """Minimum number of consecutive compounding wins to reach ``target``."""
    stake_cents = to_cents(stake, field="stake")
    target_cents = to_cents(target, field="target")
    odds_scaled = odds_to_scaled(odds)

    days = days_needed(stake_cents, target_cents, odds_scaled)
    # Balance after that many wins, rounded down to the cent
    projected = int(compound_growth(stake_cents, odds_scaled, days))

    return DaysNeededResponse(
        stake=from_cents(stake_cents),
        target=from_cents(target_cents),
        odds=scaled_to_odds(odds_scaled),
        days_needed=days,
        projected_balance=from_cents(projected),
    )
