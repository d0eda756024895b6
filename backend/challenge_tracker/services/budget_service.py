"""Budget and expense tracking service."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from challenge_tracker.engine import (
    CategoryTotal,
    MAX_CENTS,
    InvalidInputError,
    LimitUsage,
    limit_usage,
    spending_by_category,
)
from challenge_tracker.models import Budget, BudgetPeriod, BudgetStatus, Expense
from challenge_tracker.services.exceptions import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class BudgetService:
    """
    Manages spending budgets and the expenses recorded against them.
    """

    async def create_budget(
        self,
        db: AsyncSession,
        user_id: int,
        name: str,
        amount: int,
        period: BudgetPeriod,
        start_date: date,
        end_date: date,
    ) -> Budget:
        """Create a budget; ``amount`` is in cents."""
        if amount <= 0:
            raise InvalidInputError("Budget amount must be positive", field="amount")
        if end_date < start_date:
            raise InvalidInputError(
                "Budget end date cannot be before its start date", field="end_date"
            )

        budget = Budget(
            user_id=user_id,
            name=name,
            amount=amount,
            period=BudgetPeriod(period),
            spent=0,
            start_date=start_date,
            end_date=end_date,
            status=BudgetStatus.ACTIVE,
        )
        db.add(budget)
        await db.commit()
        await db.refresh(budget)

        logger.info(f"Created budget {budget.id} '{name}' for user {user_id}: {amount}c")
        return budget

    async def list_budgets(self, db: AsyncSession, user_id: int) -> list[Budget]:
        """All budgets of a user, newest first."""
        result = await db.execute(
            select(Budget)
            .where(Budget.user_id == user_id)
            .order_by(Budget.created_at.desc(), Budget.id.desc())
        )
        return list(result.scalars().all())

    async def get_owned_budget(
        self, db: AsyncSession, budget_id: int, user_id: int
    ) -> Budget:
        result = await db.execute(select(Budget).where(Budget.id == budget_id))
        budget = result.scalar_one_or_none()
        if not budget:
            raise NotFoundError("Budget not found")
        if budget.user_id != user_id:
            raise ForbiddenError("Not your budget")
        return budget

    def get_usage(self, budget: Budget) -> LimitUsage:
        return limit_usage(budget.spent, budget.amount)

    async def create_expense(
        self,
        db: AsyncSession,
        user_id: int,
        category: str,
        amount: int,
        expense_date: date,
        budget_id: Optional[int] = None,
        description: Optional[str] = None,
    ) -> Expense:
        """
        Record an expense.

        When linked to a budget the amount is added to the budget's spend, and
        an active budget pushed past its limit is marked exceeded.
        """
        if amount <= 0:
            raise InvalidInputError("Expense amount must be positive", field="amount")

        budget = None
        if budget_id is not None:
            budget = await self.get_owned_budget(db, budget_id, user_id)
            if budget.spent + amount > MAX_CENTS:
                raise InvalidInputError(
                    f"Budget {budget_id} cannot record more spending", field="amount"
                )

        expense = Expense(
            user_id=user_id,
            budget_id=budget_id,
            category=category,
            amount=amount,
            description=description,
            date=expense_date,
        )
        db.add(expense)

        if budget is not None:
            budget.spent += amount
            if budget.status == BudgetStatus.ACTIVE and self.get_usage(budget).exceeded:
                budget.status = BudgetStatus.EXCEEDED
                logger.info(f"Budget {budget.id} exceeded: {budget.spent}c of {budget.amount}c")

        await db.commit()
        await db.refresh(expense)
        if budget is not None:
            await db.refresh(budget)

        logger.info(f"Recorded expense {expense.id} for user {user_id}: {category} {amount}c")
        return expense

    async def list_expenses(self, db: AsyncSession, user_id: int) -> list[Expense]:
        """All expenses of a user, most recent first."""
        result = await db.execute(
            select(Expense)
            .where(Expense.user_id == user_id)
            .order_by(Expense.date.desc(), Expense.id.desc())
        )
        return list(result.scalars().all())

    async def get_spending_breakdown(
        self, db: AsyncSession, user_id: int
    ) -> list[CategoryTotal]:
        """Expense totals per category."""
        expenses = await self.list_expenses(db, user_id)
        return spending_by_category((e.category, e.amount) for e in expenses)


# Singleton instance
budget_service = BudgetService()
