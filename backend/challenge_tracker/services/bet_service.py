"""Bet placement and settlement service."""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.config import ChallengeConfig
from challenge_tracker.engine import (
    BetResult,
    ChallengeStatus,
    MAX_CENTS,
    InvalidInputError,
    compute_bet_profit,
    next_stake,
    odds_to_scaled,
    validate_bet_odds,
)
from challenge_tracker.models import Bet
from challenge_tracker.services.challenge_service import challenge_service
from challenge_tracker.services.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class BetService:
    """
    Handles bet placement and one-way settlement.
    """

    async def add_bet(
        self,
        db: AsyncSession,
        challenge_id: int,
        user_id: int,
        team_name: str,
        config: ChallengeConfig,
        match_details: Optional[str] = None,
        odds: Optional[int] = None,
    ) -> Bet:
        """
        Add the next day's bet to a challenge.

        Process:
        1. Check the challenge is active and its plan still has a free day
        2. Validate odds (default: the challenge ceiling) against the odds rule
        3. Take the stake from the engine's next stake and freeze it
        4. Number the bet as day ``len(bets) + 1``
        """
        challenge = await challenge_service.get_owned_challenge(db, challenge_id, user_id)

        if challenge.status != ChallengeStatus.ACTIVE:
            raise ConflictError(f"Challenge {challenge_id} is {challenge.status.value}")

        team_name = team_name.strip()
        if not team_name:
            raise InvalidInputError("Please enter a team name", field="team_name")

        existing = list(challenge.bets)
        if len(existing) >= challenge.days_total:
            raise ConflictError(
                f"All {challenge.days_total} days of challenge {challenge_id} already have a bet"
            )

        bet_odds = validate_bet_odds(
            odds if odds is not None else challenge.odds,
            ceiling=challenge.odds,
            rule=config.odds_rule,
            min_odds=odds_to_scaled(config.min_odds),
            fixed_cap=odds_to_scaled(config.fixed_odds_cap),
        )

        stake = next_stake(challenge, existing)
        if stake <= 0:
            raise ConflictError(f"Challenge {challenge_id} has no balance left to stake")
        if stake > MAX_CENTS:
            raise ConflictError(
                f"Challenge {challenge_id} balance is too large to stake in one bet"
            )

        bet = Bet(
            day_number=len(existing) + 1,
            team_name=team_name,
            match_details=(match_details or "").strip() or None,
            stake_amount=stake,
            odds=bet_odds,
            result=BetResult.PENDING,
            profit=0,
        )
        challenge.bets.append(bet)

        try:
            await db.commit()
        except IntegrityError:
            # Another request took this day number first
            await db.rollback()
            raise ConflictError(
                f"Day {bet.day_number} of challenge {challenge_id} already has a bet"
            )
        await db.refresh(bet)

        logger.info(
            f"Placed bet {bet.id}: challenge {challenge_id} day {bet.day_number} "
            f"{team_name} {stake}c @ {bet_odds}"
        )
        return bet

    async def get_bet(self, db: AsyncSession, bet_id: int) -> Optional[Bet]:
        """Get a bet by ID."""
        result = await db.execute(select(Bet).where(Bet.id == bet_id))
        return result.scalar_one_or_none()

    async def settle_bet(
        self,
        db: AsyncSession,
        bet_id: int,
        user_id: int,
        result: BetResult,
    ) -> Bet:
        """
        Settle a bet as a win or a loss.

        Only bets of an active challenge can be settled, so a finalized
        challenge keeps the balance it was closed with.

        The profit is computed once here and frozen onto the bet. The write is
        conditional on the bet still being pending, so of two concurrent
        settlements only one succeeds.
        """
        bet = await self.get_bet(db, bet_id)
        if not bet:
            raise NotFoundError(f"Bet {bet_id} not found")

        challenge = await challenge_service.get_owned_challenge(db, bet.challenge_id, user_id)

        if bet.result != BetResult.PENDING:
            raise ConflictError(f"Bet {bet_id} already settled")
        if challenge.status != ChallengeStatus.ACTIVE:
            raise ConflictError(
                f"Challenge {challenge.id} is {challenge.status.value}; "
                "its bets can no longer be settled"
            )

        profit = compute_bet_profit(bet.stake_amount, bet.odds, result)
        result = BetResult(result)

        outcome = await db.execute(
            update(Bet)
            .where(Bet.id == bet_id)
            .where(Bet.result == BetResult.PENDING)
            .values(result=result, profit=profit)
        )
        if outcome.rowcount == 0:
            await db.rollback()
            raise ConflictError(f"Bet {bet_id} already settled")

        await db.commit()
        await db.refresh(bet)

        logger.info(f"Settled bet {bet_id}: {result.value} ({profit:+d}c)")
        return bet


# Singleton instance
bet_service = BetService()
