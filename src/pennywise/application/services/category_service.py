"""Category service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pennywise.domain.category import Category, CategoryAlreadyExistsError
from pennywise.domain.shared import Err, ErrorCode, Ok, Result

if TYPE_CHECKING:
    from pennywise.domain.category import CategoryRepository

logger = logging.getLogger(__name__)


def _not_found() -> Err:
    return Err(ErrorCode.CATEGORY_NOT_FOUND, "Category not found.")


def _blank_name() -> Err:
    return Err(
        ErrorCode.VALIDATION_ERROR,
        "Invalid category name.",
        ["The category name must not be blank."],
    )


def _name_taken(name: str) -> Err:
    return Err(
        ErrorCode.CATEGORY_NAME_TAKEN,
        "Category name unavailable.",
        [f"A category named '{name}' already exists."],
    )


class CategoryService:
    """Application service for the shared category list."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    async def list_categories(self) -> Result[list[Category]]:
        categories = await self._category_repo.list_all()
        if not categories:
            return Err(ErrorCode.CATEGORY_NOT_FOUND, "No categories found.")
        return Ok(categories)

    async def get_category(self, category_id: int) -> Result[Category]:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            return _not_found()
        return Ok(category)

    async def create_category(self, name: str) -> Result[Category]:
        name = name.strip()
        if not name:
            return _blank_name()
        try:
            category = await self._category_repo.create(Category(name=name))
        except CategoryAlreadyExistsError:
            return _name_taken(name)
        logger.info("Category created: %s (%s)", category.id, category.name)
        return Ok(category)

    async def rename_category(self, category_id: int, name: str) -> Result[Category]:
        name = name.strip()
        if not name:
            return _blank_name()

        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            return _not_found()

        category.name = name
        category.touch()
        try:
            category = await self._category_repo.update(category)
        except CategoryAlreadyExistsError:
            return _name_taken(category.name)
        logger.info("Category renamed: %s -> %s", category.id, category.name)
        return Ok(category)

    async def delete_category(self, category_id: int) -> Result[None]:
        if not await self._category_repo.delete(category_id):
            return _not_found()
        logger.info("Category deleted: %s", category_id)
        return Ok(None)
