"""Budget repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pennywise.domain.budget.budget import Budget


class BudgetRepository(ABC):
    """Repository interface for Budget records."""

    @abstractmethod
    async def list_by_user(self, user_id: int) -> list[Budget]:
        """List a user's budgets, newest first, with category names."""

    @abstractmethod
    async def find_by_id(self, budget_id: int) -> Optional[Budget]:
        """Find a budget by its ID."""

    @abstractmethod
    async def find_by_user_and_category(
        self,
        user_id: int,
        category_id: int,
    ) -> Optional[Budget]:
        """Find the budget a user holds for a category, if any."""

    @abstractmethod
    async def create(self, budget: Budget) -> Budget:
        """
        Persist a new budget and return it with its assigned ID.

        Raises
        ------
        BudgetAlreadyExistsError
            If the (user_id, category_id) unique constraint rejects the insert
        """

    @abstractmethod
    async def update(self, budget: Budget) -> Budget:
        """
        Persist changes to an existing budget.

        Raises
        ------
        BudgetAlreadyExistsError
            If the new category is already budgeted by the same user
        """

    @abstractmethod
    async def delete(self, budget_id: int) -> bool:
        """Delete a budget by ID."""
