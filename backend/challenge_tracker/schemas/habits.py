"""Gambling habits Pydantic schemas."""

from typing import Optional

from pydantic import Field

from challenge_tracker.engine import LimitUsage, from_cents
from challenge_tracker.models import GamblingHabits
from challenge_tracker.schemas.budget import LimitUsageResponse
from challenge_tracker.schemas.common import BaseSchema, Money


class HabitsUpdate(BaseSchema):
    """Partial update of gambling limits; omitted fields stay unchanged."""

    daily_limit: Optional[Money] = None
    weekly_limit: Optional[Money] = None
    monthly_limit: Optional[Money] = None
    enable_alerts: Optional[bool] = None
    alert_threshold: Optional[int] = Field(default=None, ge=0, le=100)


class HabitsResponse(BaseSchema):
    daily_limit: Money
    weekly_limit: Money
    monthly_limit: Money
    enable_alerts: bool
    alert_threshold: int
    today_spent: Money
    this_week_spent: Money
    this_month_spent: Money
    usage: dict[str, LimitUsageResponse]

    @classmethod
    def from_model(
        cls, habits: GamblingHabits, usage: dict[str, LimitUsage]
    ) -> "HabitsResponse":
        return cls(
            daily_limit=from_cents(habits.daily_limit),
            weekly_limit=from_cents(habits.weekly_limit),
            monthly_limit=from_cents(habits.monthly_limit),
            enable_alerts=habits.enable_alerts,
            alert_threshold=habits.alert_threshold,
            today_spent=from_cents(habits.today_spent),
            this_week_spent=from_cents(habits.this_week_spent),
            this_month_spent=from_cents(habits.this_month_spent),
            usage={
                window: LimitUsageResponse.from_usage(window_usage)
                for window, window_usage in usage.items()
            },
        )
