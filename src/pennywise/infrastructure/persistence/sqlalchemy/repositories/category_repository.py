"""SQLAlchemy implementation of CategoryRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.domain.category import (
    Category,
    CategoryAlreadyExistsError,
    CategoryRepository,
)
from pennywise.infrastructure.persistence.sqlalchemy.models import CategoryModel
from pennywise.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    """SQLAlchemy implementation of the CategoryRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.id)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, category_id: int) -> Optional[Category]:
        model = await self._session.get(CategoryModel, category_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def create(self, category: Category) -> Category:
        model = CategoryModel(
            name=category.name,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
        self._session.add(model)
        await self._flush(category.name)
        return self._map_to_domain(model)

    async def update(self, category: Category) -> Category:
        model = await self._session.get(CategoryModel, category.id)
        if model is None:
            msg = f"Category {category.id} does not exist"
            raise LookupError(msg)

        model.name = category.name
        model.updated_at = category.updated_at
        await self._flush(category.name)
        return self._map_to_domain(model)

    async def delete(self, category_id: int) -> bool:
        model = await self._session.get(CategoryModel, category_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted category: %s", category_id)
        return True

    async def _flush(self, name: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise CategoryAlreadyExistsError(name) from e
            raise

    def _map_to_domain(self, model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            name=model.name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
