"""Budget and expense database models."""

from enum import Enum

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from challenge_tracker.database.base import Base
from challenge_tracker.models.base import IntegerIDMixin, TimestampMixin, enum_column_type


class BudgetPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class BudgetStatus(str, Enum):
    ACTIVE = "active"
    EXCEEDED = "exceeded"
    COMPLETED = "completed"


class Budget(Base, IntegerIDMixin, TimestampMixin):
    """Spending limit over a date range."""

    __tablename__ = "budgets"

    user_id = Column(Integer, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(BigInteger, nullable=False, comment="Limit in cents")
    period = Column(enum_column_type(BudgetPeriod, "budget_period"), nullable=False)
    spent = Column(BigInteger, nullable=False, default=0, comment="Cents")
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(
        enum_column_type(BudgetStatus, "budget_status"),
        nullable=False,
        default=BudgetStatus.ACTIVE,
    )

    # Relationships
    expenses = relationship("Expense", back_populates="budget", lazy="noload")

    # Constraints
    __table_args__ = (
        CheckConstraint("amount > 0", name="positive_budget_amount"),
        CheckConstraint("end_date >= start_date", name="budget_date_order"),
    )

    def __repr__(self) -> str:
        return f"<Budget {self.name} {self.spent}/{self.amount}c ({self.period})>"


class Expense(Base, IntegerIDMixin, TimestampMixin):
    """A single spend, optionally counted against a budget."""

    __tablename__ = "expenses"

    user_id = Column(Integer, nullable=False)
    budget_id = Column(
        Integer,
        ForeignKey("budgets.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    category = Column(String(100), nullable=False)
    amount = Column(BigInteger, nullable=False, comment="Cents")
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False)

    # Relationships
    budget = relationship("Budget", back_populates="expenses", lazy="noload")

    # Constraints
    __table_args__ = (
        CheckConstraint("amount > 0", name="positive_expense_amount"),
        Index("idx_expenses_user_date", "user_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<Expense {self.category} {self.amount}c on {self.date}>"
