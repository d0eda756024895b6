"""Gambling habits database model."""

from sqlalchemy import BigInteger, Boolean, CheckConstraint, Column, Integer

from challenge_tracker.database.base import Base
from challenge_tracker.models.base import IntegerIDMixin, TimestampMixin


class GamblingHabits(Base, IntegerIDMixin, TimestampMixin):
    """Self-imposed gambling limits and running spend, one row per user."""

    __tablename__ = "gambling_habits"

    user_id = Column(Integer, nullable=False, unique=True, index=True)

    # Limits in cents
    daily_limit = Column(BigInteger, nullable=False)
    weekly_limit = Column(BigInteger, nullable=False)
    monthly_limit = Column(BigInteger, nullable=False)

    # Alerts
    enable_alerts = Column(Boolean, nullable=False, default=True)
    alert_threshold = Column(Integer, nullable=False, default=80, comment="Percent")

    # Running spend in cents
    today_spent = Column(BigInteger, nullable=False, default=0)
    this_week_spent = Column(BigInteger, nullable=False, default=0)
    this_month_spent = Column(BigInteger, nullable=False, default=0)

    # Constraints
    __table_args__ = (
        CheckConstraint(
            "daily_limit > 0 AND weekly_limit > 0 AND monthly_limit > 0",
            name="positive_limits",
        ),
        CheckConstraint(
            "alert_threshold >= 0 AND alert_threshold <= 100",
            name="valid_alert_threshold",
        ),
    )

    def __repr__(self) -> str:
        return f"<GamblingHabits user {self.user_id}>"
