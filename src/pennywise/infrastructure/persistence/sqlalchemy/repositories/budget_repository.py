"""SQLAlchemy implementation of BudgetRepository."""

import logging
from typing import Optional

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.domain.budget import Budget, BudgetAlreadyExistsError, BudgetRepository
from pennywise.infrastructure.persistence.sqlalchemy.models import (
    BudgetModel,
    CategoryModel,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class BudgetRepositorySQLAlchemy(BudgetRepository):
    """SQLAlchemy implementation of the BudgetRepository interface.

    Reads join the category so returned budgets carry ``category_name``.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select_with_category(self) -> Select:
        return select(BudgetModel, CategoryModel.name).join(
            CategoryModel,
            BudgetModel.category_id == CategoryModel.id,
        )

    async def list_by_user(self, user_id: int) -> list[Budget]:
        stmt = (
            self._select_with_category()
            .where(BudgetModel.user_id == user_id)
            .order_by(BudgetModel.created_at.desc(), BudgetModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model, name) for model, name in result.all()]

    async def find_by_id(self, budget_id: int) -> Optional[Budget]:
        stmt = self._select_with_category().where(BudgetModel.id == budget_id)
        row = (await self._session.execute(stmt)).one_or_none()
        if row is None:
            return None
        return self._map_to_domain(row[0], row[1])

    async def find_by_user_and_category(
        self,
        user_id: int,
        category_id: int,
    ) -> Optional[Budget]:
        stmt = self._select_with_category().where(
            BudgetModel.user_id == user_id,
            BudgetModel.category_id == category_id,
        )
        row = (await self._session.execute(stmt)).one_or_none()
        if row is None:
            return None
        return self._map_to_domain(row[0], row[1])

    async def create(self, budget: Budget) -> Budget:
        model = BudgetModel(
            amount=budget.amount,
            alert=budget.alert,
            category_id=budget.category_id,
            user_id=budget.user_id,
        )
        self._session.add(model)
        await self._flush(budget)
        logger.debug("Created budget: %s", model.id)
        return await self._reload(model.id)

    async def update(self, budget: Budget) -> Budget:
        model = await self._session.get(BudgetModel, budget.id)
        if model is None:
            msg = f"Budget {budget.id} does not exist"
            raise LookupError(msg)

        model.amount = budget.amount
        model.alert = budget.alert
        model.category_id = budget.category_id
        await self._flush(budget)
        return await self._reload(model.id)

    async def delete(self, budget_id: int) -> bool:
        model = await self._session.get(BudgetModel, budget_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _reload(self, budget_id: int) -> Budget:
        budget = await self.find_by_id(budget_id)
        if budget is None:
            msg = f"Budget {budget_id} vanished after flush"
            raise LookupError(msg)
        return budget

    async def _flush(self, budget: Budget) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise BudgetAlreadyExistsError(budget.user_id, budget.category_id) from e
            raise

    def _map_to_domain(self, model: BudgetModel, category_name: str | None) -> Budget:
        return Budget(
            id=model.id,
            amount=model.amount,
            alert=model.alert,
            category_id=model.category_id,
            user_id=model.user_id,
            category_name=category_name,
        )
