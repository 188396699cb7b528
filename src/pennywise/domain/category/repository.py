"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pennywise.domain.category.category import Category


class CategoryRepository(ABC):
    """Repository interface for Category records."""

    @abstractmethod
    async def list_all(self) -> list[Category]:
        """List every category ordered by ID."""

    @abstractmethod
    async def find_by_id(self, category_id: int) -> Optional[Category]:
        """Find a category by its ID."""

    @abstractmethod
    async def create(self, category: Category) -> Category:
        """
        Persist a new category and return it with its assigned ID.

        Raises
        ------
        CategoryAlreadyExistsError
            If the name is already taken
        """

    @abstractmethod
    async def update(self, category: Category) -> Category:
        """
        Persist changes to an existing category.

        Raises
        ------
        CategoryAlreadyExistsError
            If the new name is already taken
        """

    @abstractmethod
    async def delete(self, category_id: int) -> bool:
        """Delete a category (and its budgets and expenses) by ID."""
