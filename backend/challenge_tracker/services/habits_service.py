"""Gambling limits service."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.config import HabitsConfig
from challenge_tracker.engine import InvalidInputError, LimitUsage, limit_usage, to_cents
from challenge_tracker.models import GamblingHabits

logger = logging.getLogger(__name__)


class HabitsService:
    """
    Keeps each user's daily, weekly and monthly gambling limits.
    """

    async def get_or_create(
        self, db: AsyncSession, user_id: int, config: HabitsConfig
    ) -> GamblingHabits:
        """Load the user's limits, creating them from the configured defaults."""
        result = await db.execute(
            select(GamblingHabits).where(GamblingHabits.user_id == user_id)
        )
        habits = result.scalar_one_or_none()
        if habits:
            return habits

        habits = GamblingHabits(
            user_id=user_id,
            daily_limit=to_cents(config.default_daily_limit),
            weekly_limit=to_cents(config.default_weekly_limit),
            monthly_limit=to_cents(config.default_monthly_limit),
            enable_alerts=True,
            alert_threshold=config.default_alert_threshold,
            today_spent=0,
            this_week_spent=0,
            this_month_spent=0,
        )
        db.add(habits)
        try:
            await db.commit()
        except IntegrityError:
            # Created concurrently by another request
            await db.rollback()
            result = await db.execute(
                select(GamblingHabits).where(GamblingHabits.user_id == user_id)
            )
            return result.scalar_one()
        await db.refresh(habits)

        logger.info(f"Created default gambling limits for user {user_id}")
        return habits

    async def update_limits(
        self,
        db: AsyncSession,
        user_id: int,
        config: HabitsConfig,
        daily_limit: Optional[int] = None,
        weekly_limit: Optional[int] = None,
        monthly_limit: Optional[int] = None,
        enable_alerts: Optional[bool] = None,
        alert_threshold: Optional[int] = None,
    ) -> GamblingHabits:
        """
        Apply a partial update; limits are in cents and ``None`` leaves a
        field unchanged.
        """
        for field, value in (
            ("daily_limit", daily_limit),
            ("weekly_limit", weekly_limit),
            ("monthly_limit", monthly_limit),
        ):
            if value is not None and value <= 0:
                raise InvalidInputError(f"{field} must be positive", field=field)

        cap = to_cents(config.monthly_limit_cap)
        if monthly_limit is not None and monthly_limit > cap:
            raise InvalidInputError(
                f"Maximum monthly limit is {config.monthly_limit_cap:,.2f}",
                field="monthly_limit",
            )
        if alert_threshold is not None and not (0 <= alert_threshold <= 100):
            raise InvalidInputError(
                "Alert threshold must be between 0 and 100", field="alert_threshold"
            )

        habits = await self.get_or_create(db, user_id, config)

        updates = {
            "daily_limit": daily_limit,
            "weekly_limit": weekly_limit,
            "monthly_limit": monthly_limit,
            "enable_alerts": enable_alerts,
            "alert_threshold": alert_threshold,
        }
        changed = {key: value for key, value in updates.items() if value is not None}
        for key, value in changed.items():
            setattr(habits, key, value)

        await db.commit()
        await db.refresh(habits)

        logger.info(f"Updated gambling limits for user {user_id}: {sorted(changed)}")
        return habits

    def get_usage(self, habits: GamblingHabits) -> dict[str, LimitUsage]:
        """Usage of each limit window."""
        return {
            "daily": limit_usage(habits.today_spent, habits.daily_limit, habits.alert_threshold),
            "weekly": limit_usage(
                habits.this_week_spent, habits.weekly_limit, habits.alert_threshold
            ),
            "monthly": limit_usage(
                habits.this_month_spent, habits.monthly_limit, habits.alert_threshold
            ),
        }


# Singleton instance
habits_service = HabitsService()
