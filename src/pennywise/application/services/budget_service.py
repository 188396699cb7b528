"""Budget service: alert derivation and one-budget-per-category rule."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from pennywise.domain.budget import Budget, BudgetAlreadyExistsError, compute_alert
from pennywise.domain.shared import Err, ErrorCode, Ok, Result

if TYPE_CHECKING:
    from pennywise.domain.budget import BudgetRepository
    from pennywise.domain.category import CategoryRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("amount", "category_id")


def _budget_not_found() -> Err:
    return Err(ErrorCode.BUDGET_NOT_FOUND, "Budget not found.")


def _category_not_found(category_id: int) -> Err:
    return Err(
        ErrorCode.CATEGORY_NOT_FOUND,
        "Category not found.",
        [f"No category exists with ID {category_id}."],
    )


class BudgetService:
    """
    Application service for budgets.

    Enforces that a user holds at most one budget per category and that
    ``alert`` always equals ``compute_alert(amount)``. The store carries
    the matching unique constraint; the pre-checks here only produce the
    friendly error first.
    """

    def __init__(
        self,
        budget_repository: BudgetRepository,
        category_repository: CategoryRepository,
    ):
        self._budget_repo = budget_repository
        self._category_repo = category_repository

    async def list_budgets(self, user_id: int) -> Result[list[Budget]]:
        return Ok(await self._budget_repo.list_by_user(user_id))

    async def create_budget(
        self,
        user_id: int,
        amount: int,
        category_id: int,
    ) -> Result[Budget]:
        existing = await self._budget_repo.find_by_user_and_category(user_id, category_id)
        if existing is not None:
            return Err(
                ErrorCode.DUPLICATE_BUDGET,
                "You already have a budget for this category.",
            )

        if await self._category_repo.find_by_id(category_id) is None:
            return _category_not_found(category_id)

        try:
            budget = await self._budget_repo.create(
                Budget.create(amount=amount, category_id=category_id, user_id=user_id),
            )
        except BudgetAlreadyExistsError:
            return Err(
                ErrorCode.DUPLICATE_BUDGET,
                "You already have a budget for this category.",
            )

        logger.info(
            "Budget created: %s (user: %s, category: %s, amount: %s, alert: %s)",
            budget.id,
            user_id,
            category_id,
            budget.amount,
            budget.alert,
        )
        return Ok(budget)

    async def update_budget(
        self,
        user_id: int,
        budget_id: int,
        changes: Mapping[str, Any],
    ) -> Result[Budget]:
        """Apply a partial update to one of the caller's budgets.

        A category change is checked against the target category before
        anything is applied. Provided fields are then applied as given,
        and ``alert`` is recomputed once from the final amount whenever
        ``amount`` was among them.
        """
        budget = await self._budget_repo.find_by_id(budget_id)
        if budget is None or budget.user_id != user_id:
            return _budget_not_found()

        new_category_id = changes.get("category_id")
        if new_category_id is not None and new_category_id != budget.category_id:
            clash = await self._budget_repo.find_by_user_and_category(
                budget.user_id,
                new_category_id,
            )
            if clash is not None:
                return Err(
                    ErrorCode.DUPLICATE_BUDGET,
                    "A budget already exists for this user and category.",
                )
            if await self._category_repo.find_by_id(new_category_id) is None:
                return _category_not_found(new_category_id)

        applied = {
            name: value
            for name, value in changes.items()
            if name in UPDATABLE_FIELDS and value is not None
        }
        for name, value in applied.items():
            setattr(budget, name, value)
        if "amount" in applied:
            budget.alert = compute_alert(budget.amount)

        try:
            budget = await self._budget_repo.update(budget)
        except BudgetAlreadyExistsError:
            return Err(
                ErrorCode.DUPLICATE_BUDGET,
                "A budget already exists for this user and category.",
            )

        logger.info("Budget updated: %s (fields: %s)", budget.id, sorted(applied))
        return Ok(budget)

    async def delete_budget(self, user_id: int, budget_id: int) -> Result[None]:
        budget = await self._budget_repo.find_by_id(budget_id)
        if budget is None or budget.user_id != user_id:
            return _budget_not_found()

        await self._budget_repo.delete(budget_id)
        logger.info("Budget deleted: %s", budget_id)
        return Ok(None)
