"""Challenge lifecycle service."""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.engine import (
    ChallengeProgress,
    ChallengeStatus,
    Strategy,
    display_balance,
    resolve_final_status,
    summarize_challenge,
    validate_challenge_terms,
)
from challenge_tracker.models import Challenge
from challenge_tracker.services.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


class ChallengeService:
    """
    Creates challenges, loads them with their bets and moves them through
    ``active -> completed | failed``.
    """

    async def create_challenge(
        self,
        db: AsyncSession,
        user_id: int,
        name: str,
        initial_stake: int,
        target_amount: int,
        odds: int,
        days_total: int,
        strategy: Strategy = Strategy.COMPOUND,
    ) -> Challenge:
        """
        Create a challenge.

        Amounts are in cents and odds scaled by 100; the engine validates the
        terms before anything is written.
        """
        validate_challenge_terms(initial_stake, target_amount, odds, days_total)
        strategy = Strategy(strategy)

        challenge = Challenge(
            user_id=user_id,
            name=name,
            initial_stake=initial_stake,
            target_amount=target_amount,
            odds=odds,
            days_total=days_total,
            strategy=strategy,
            status=ChallengeStatus.ACTIVE,
        )
        db.add(challenge)
        await db.commit()
        await db.refresh(challenge)

        logger.info(
            f"Created challenge {challenge.id} '{name}' for user {user_id}: "
            f"{initial_stake}c -> {target_amount}c @ {odds} over {days_total} days "
            f"({strategy.value})"
        )
        return challenge

    async def get_challenge(self, db: AsyncSession, challenge_id: int) -> Challenge | None:
        """Get a challenge by ID, bets included."""
        result = await db.execute(select(Challenge).where(Challenge.id == challenge_id))
        return result.scalar_one_or_none()

    async def get_owned_challenge(
        self, db: AsyncSession, challenge_id: int, user_id: int
    ) -> Challenge:
        """Get a challenge, failing unless it exists and belongs to ``user_id``."""
        challenge = await self.get_challenge(db, challenge_id)
        if not challenge:
            raise NotFoundError("Challenge not found")
        if challenge.user_id != user_id:
            raise ForbiddenError("Not your challenge")
        return challenge

    async def list_challenges(self, db: AsyncSession, user_id: int) -> list[Challenge]:
        """All challenges of a user, newest first."""
        result = await db.execute(
            select(Challenge)
            .where(Challenge.user_id == user_id)
            .order_by(Challenge.created_at.desc(), Challenge.id.desc())
        )
        return list(result.scalars().all())

    def get_progress(self, challenge: Challenge) -> ChallengeProgress:
        """Derived balance and progress figures for a loaded challenge."""
        return summarize_challenge(challenge, challenge.bets)

    async def update_status(
        self,
        db: AsyncSession,
        challenge_id: int,
        user_id: int,
        status: ChallengeStatus,
    ) -> Challenge:
        """
        Set the status of a challenge.

        Only an active challenge can change status; re-sending the current
        status is a no-op.
        """
        challenge = await self.get_owned_challenge(db, challenge_id, user_id)
        status = ChallengeStatus(status)

        if challenge.status == status:
            return challenge
        if challenge.status != ChallengeStatus.ACTIVE:
            raise ConflictError(
                f"Challenge {challenge_id} is already {challenge.status.value}"
            )
        # Conditional update: concurrent finalizations resolve to one winner
        result = await db.execute(
            update(Challenge)
            .where(Challenge.id == challenge_id)
            .where(Challenge.status == ChallengeStatus.ACTIVE)
            .values(status=status)
        )
        if result.rowcount == 0:
            await db.rollback()
            raise ConflictError(f"Challenge {challenge_id} is no longer active")

        await db.commit()
        await db.refresh(challenge)

        logger.info(f"Challenge {challenge_id} marked {status.value}")
        return challenge

    async def finalize_challenge(
        self, db: AsyncSession, challenge_id: int, user_id: int
    ) -> Challenge:
        """Close a challenge as completed or failed depending on its balance."""
        challenge = await self.get_owned_challenge(db, challenge_id, user_id)
        balance = display_balance(challenge, challenge.bets)
        status = resolve_final_status(balance, challenge.target_amount)

        logger.info(
            f"Finalizing challenge {challenge_id}: balance {balance}c vs "
            f"target {challenge.target_amount}c -> {status.value}"
        )
        return await self.update_status(db, challenge_id, user_id, status)

    async def delete_challenge(
        self, db: AsyncSession, challenge_id: int, user_id: int
    ) -> None:
        """Delete a challenge and all of its bets."""
        challenge = await self.get_owned_challenge(db, challenge_id, user_id)
        await db.delete(challenge)
        await db.commit()

        logger.info(f"Deleted challenge {challenge_id}")


# Singleton instance
challenge_service = ChallengeService()
