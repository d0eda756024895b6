"""Gambling limits API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.config import Settings
from challenge_tracker.database import get_app_settings, get_current_user_id, get_db
from challenge_tracker.engine import to_cents
from challenge_tracker.schemas import HabitsResponse, HabitsUpdate
from challenge_tracker.services import habits_service

router = APIRouter(prefix="/habits", tags=["Habits"])


def _cents_or_none(value, field):
    return to_cents(value, field=field) if value is not None else None


@router.get("", response_model=HabitsResponse)
async def get_habits(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Get the caller's gambling limits, creating defaults on first access."""
    habits = await habits_service.get_or_create(db, user_id, settings.habits)
    return HabitsResponse.from_model(habits, habits_service.get_usage(habits))


@router.patch("", response_model=HabitsResponse)
async def update_habits(
    body: HabitsUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    habits = await habits_service.update_limits(
        db,
        user_id,
        settings.habits,
        daily_limit=_cents_or_none(body.daily_limit, "daily_limit"),
        weekly_limit=_cents_or_none(body.weekly_limit, "weekly_limit"),
        monthly_limit=_cents_or_none(body.monthly_limit, "monthly_limit"),
        enable_alerts=body.enable_alerts,
        alert_threshold=body.alert_threshold,
    )
    return HabitsResponse.from_model(habits, habits_service.get_usage(habits))
