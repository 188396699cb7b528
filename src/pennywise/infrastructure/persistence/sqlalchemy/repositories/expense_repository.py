"""SQLAlchemy implementation of ExpenseRepository."""

from typing import Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.domain.expense import Expense, ExpenseRepository
from pennywise.infrastructure.persistence.sqlalchemy.models import (
    CategoryModel,
    ExpenseModel,
)


class ExpenseRepositorySQLAlchemy(ExpenseRepository):
    """SQLAlchemy implementation of the ExpenseRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select_with_category(self) -> Select:
        return select(ExpenseModel, CategoryModel.name).join(
            CategoryModel,
            ExpenseModel.category_id == CategoryModel.id,
        )

    async def list_by_user(self, user_id: int) -> list[Expense]:
        stmt = (
            self._select_with_category()
            .where(ExpenseModel.user_id == user_id)
            .order_by(ExpenseModel.date.desc(), ExpenseModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model, name) for model, name in result.all()]

    async def find_by_id(self, expense_id: int) -> Optional[Expense]:
        stmt = self._select_with_category().where(ExpenseModel.id == expense_id)
        row = (await self._session.execute(stmt)).one_or_none()
        if row is None:
            return None
        return self._map_to_domain(row[0], row[1])

    async def create(self, expense: Expense) -> Expense:
        model = ExpenseModel(
            amount=expense.amount,
            description=expense.description,
            category_id=expense.category_id,
            user_id=expense.user_id,
        )
        if expense.date is not None:
            model.date = expense.date
        self._session.add(model)
        await self._session.flush()
        return await self._reload(model.id)

    async def update(self, expense: Expense) -> Expense:
        model = await self._session.get(ExpenseModel, expense.id)
        if model is None:
            msg = f"Expense {expense.id} does not exist"
            raise LookupError(msg)

        model.amount = expense.amount
        model.description = expense.description
        if expense.date is not None:
            model.date = expense.date
        model.category_id = expense.category_id
        await self._session.flush()
        return await self._reload(model.id)

    async def delete(self, expense_id: int) -> bool:
        model = await self._session.get(ExpenseModel, expense_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _reload(self, expense_id: int) -> Expense:
        expense = await self.find_by_id(expense_id)
        if expense is None:
            msg = f"Expense {expense_id} vanished after flush"
            raise LookupError(msg)
        return expense

    def _map_to_domain(self, model: ExpenseModel, category_name: str | None) -> Expense:
        return Expense(
            id=model.id,
            amount=model.amount,
            description=model.description,
            date=model.date,
            category_id=model.category_id,
            user_id=model.user_id,
            category_name=category_name,
        )
