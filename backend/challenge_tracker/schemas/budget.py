"""Budget and expense Pydantic schemas."""

import datetime
from typing import Optional

from pydantic import Field, model_validator

from challenge_tracker.engine import CategoryTotal, LimitUsage, from_cents
from challenge_tracker.models import Budget, BudgetPeriod, BudgetStatus, Expense
from challenge_tracker.schemas.common import BaseSchema, Money, Percent, TimestampSchema


class LimitUsageResponse(BaseSchema):
    """Usage of a budget or gambling limit."""

    spent: Money
    limit: Money
    percentage: Percent
    display_percentage: Percent
    exceeded: bool
    alert: bool

    @classmethod
    def from_usage(cls, usage: LimitUsage) -> "LimitUsageResponse":
        return cls(
            spent=from_cents(usage.spent),
            limit=from_cents(usage.limit),
            percentage=usage.percentage,
            display_percentage=usage.display_percentage,
            exceeded=usage.exceeded,
            alert=usage.alert,
        )


class BudgetCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=255)
    amount: Money
    period: BudgetPeriod
    start_date: datetime.date
    end_date: datetime.date

    @model_validator(mode="after")
    def check_dates(self) -> "BudgetCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class BudgetResponse(TimestampSchema):
    id: int
    name: str
    amount: Money
    period: BudgetPeriod
    spent: Money
    start_date: datetime.date
    end_date: datetime.date
    status: BudgetStatus
    usage: LimitUsageResponse

    @classmethod
    def from_model(cls, budget: Budget, usage: LimitUsage) -> "BudgetResponse":
        return cls(
            id=budget.id,
            name=budget.name,
            amount=from_cents(budget.amount),
            period=budget.period,
            spent=from_cents(budget.spent),
            start_date=budget.start_date,
            end_date=budget.end_date,
            status=budget.status,
            usage=LimitUsageResponse.from_usage(usage),
            created_at=budget.created_at,
            updated_at=budget.updated_at,
        )


class ExpenseCreate(BaseSchema):
    budget_id: Optional[int] = None
    category: str = Field(min_length=1, max_length=100)
    amount: Money
    description: Optional[str] = None
    date: datetime.date


class ExpenseResponse(TimestampSchema):
    id: int
    budget_id: Optional[int]
    category: str
    amount: Money
    description: Optional[str]
    date: datetime.date

    @classmethod
    def from_model(cls, expense: Expense) -> "ExpenseResponse":
        return cls(
            id=expense.id,
            budget_id=expense.budget_id,
            category=expense.category,
            amount=from_cents(expense.amount),
            description=expense.description,
            date=expense.date,
            created_at=expense.created_at,
            updated_at=expense.updated_at,
        )


class CategoryTotalResponse(BaseSchema):
    category: str
    amount: Money
    percentage: Percent

    @classmethod
    def from_total(cls, total: CategoryTotal) -> "CategoryTotalResponse":
        return cls(
            category=total.category,
            amount=from_cents(total.amount),
            percentage=total.percentage,
        )
