"""Expense service."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping, Optional

from pennywise.domain.expense import Expense
from pennywise.domain.shared import Err, ErrorCode, Ok, Result, today_utc

if TYPE_CHECKING:
    from pennywise.domain.category import CategoryRepository
    from pennywise.domain.expense import ExpenseRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("amount", "category_id", "description", "date")


def _expense_not_found() -> Err:
    return Err(ErrorCode.EXPENSE_NOT_FOUND, "Expense not found.")


class ExpenseService:
    """Application service for a user's expenses.

    Expenses are scoped to their owner: another user's expense is reported
    as not found.
    """

    def __init__(
        self,
        expense_repository: ExpenseRepository,
        category_repository: CategoryRepository,
    ):
        self._expense_repo = expense_repository
        self._category_repo = category_repository

    async def _check_category(self, category_id: int) -> Optional[Err]:
        if await self._category_repo.find_by_id(category_id) is None:
            return Err(
                ErrorCode.CATEGORY_NOT_FOUND,
                "Category not found.",
                [f"No category exists with ID {category_id}."],
            )
        return None

    async def list_expenses(self, user_id: int) -> Result[list[Expense]]:
        return Ok(await self._expense_repo.list_by_user(user_id))

    async def create_expense(
        self,
        user_id: int,
        amount: Decimal,
        category_id: int,
        description: Optional[str] = None,
        expense_date: Optional[date] = None,
    ) -> Result[Expense]:
        problem = await self._check_category(category_id)
        if problem:
            return problem

        expense = await self._expense_repo.create(
            Expense(
                amount=amount,
                category_id=category_id,
                user_id=user_id,
                description=description,
                date=expense_date or today_utc(),
            ),
        )
        logger.info("Expense created: %s (user: %s, amount: %s)", expense.id, user_id, amount)
        return Ok(expense)

    async def update_expense(
        self,
        user_id: int,
        expense_id: int,
        changes: Mapping[str, Any],
    ) -> Result[Expense]:
        expense = await self._expense_repo.find_by_id(expense_id)
        if expense is None or expense.user_id != user_id:
            return _expense_not_found()

        applied = {
            name: value
            for name, value in changes.items()
            if name in UPDATABLE_FIELDS and value is not None
        }
        if "category_id" in applied and applied["category_id"] != expense.category_id:
            problem = await self._check_category(applied["category_id"])
            if problem:
                return problem

        for name, value in applied.items():
            setattr(expense, name, value)

        expense = await self._expense_repo.update(expense)
        logger.info("Expense updated: %s (fields: %s)", expense.id, sorted(applied))
        return Ok(expense)

    async def delete_expense(self, user_id: int, expense_id: int) -> Result[None]:
        expense = await self._expense_repo.find_by_id(expense_id)
        if expense is None or expense.user_id != user_id:
            return _expense_not_found()

        await self._expense_repo.delete(expense_id)
        logger.info("Expense deleted: %s", expense_id)
        return Ok(None)
