"""Expense repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pennywise.domain.expense.expense import Expense


class ExpenseRepository(ABC):
    """Repository interface for Expense records."""

    @abstractmethod
    async def list_by_user(self, user_id: int) -> list[Expense]:
        """List a user's expenses by date (most recent first)."""

    @abstractmethod
    async def find_by_id(self, expense_id: int) -> Optional[Expense]:
        """Find an expense by its ID."""

    @abstractmethod
    async def create(self, expense: Expense) -> Expense:
        """Persist a new expense and return it with its assigned ID."""

    @abstractmethod
    async def update(self, expense: Expense) -> Expense:
        """Persist changes to an existing expense."""

    @abstractmethod
    async def delete(self, expense_id: int) -> bool:
        """Delete an expense by ID."""
