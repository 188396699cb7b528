"""Integration tests for ExpenseRepositorySQLAlchemy."""

from datetime import date
from decimal import Decimal

from pennywise.domain.expense import Expense
from pennywise.domain.shared import today_utc
from pennywise.infrastructure.persistence.sqlalchemy import (
    ExpenseRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)


class TestExpenseRepository:
    async def test_create_defaults_date(self, db_session, user, food):
        repo = ExpenseRepositorySQLAlchemy(db_session)

        expense = await repo.create(
            Expense(amount=Decimal("12.50"), category_id=food.id, user_id=user.id),
        )

        assert expense.id is not None
        assert expense.date == today_utc()
        assert expense.amount == Decimal("12.50")
        assert expense.category_name == "Food"

    async def test_list_most_recent_first(self, db_session, user, food):
        repo = ExpenseRepositorySQLAlchemy(db_session)
        for day in (1, 15, 7):
            await repo.create(
                Expense(
                    amount=Decimal("1.00"),
                    category_id=food.id,
                    user_id=user.id,
                    date=date(2024, 3, day),
                ),
            )

        expenses = await repo.list_by_user(user.id)

        assert [e.date.day for e in expenses] == [15, 7, 1]

    async def test_list_only_own_expenses(self, db_session, user, other_user, food):
        repo = ExpenseRepositorySQLAlchemy(db_session)
        await repo.create(Expense(amount=Decimal("1.00"), category_id=food.id, user_id=user.id))

        assert await repo.list_by_user(other_user.id) == []

    async def test_update(self, db_session, user, food, travel):
        repo = ExpenseRepositorySQLAlchemy(db_session)
        expense = await repo.create(
            Expense(amount=Decimal("1.00"), category_id=food.id, user_id=user.id),
        )
        expense.amount = Decimal("99.99")
        expense.category_id = travel.id
        expense.description = "Train"

        updated = await repo.update(expense)

        assert updated.amount == Decimal("99.99")
        assert updated.category_name == "Travel"
        assert updated.description == "Train"

    async def test_deleting_user_removes_expenses(self, db_session, user, food):
        repo = ExpenseRepositorySQLAlchemy(db_session)
        expense = await repo.create(
            Expense(amount=Decimal("1.00"), category_id=food.id, user_id=user.id),
        )

        await UserRepositorySQLAlchemy(db_session).delete(user.id)
        db_session.expunge_all()

        assert await repo.find_by_id(expense.id) is None

    async def test_delete(self, db_session, user, food):
        repo = ExpenseRepositorySQLAlchemy(db_session)
        expense = await repo.create(
            Expense(amount=Decimal("1.00"), category_id=food.id, user_id=user.id),
        )

        assert await repo.delete(expense.id) is True
        assert await repo.delete(expense.id) is False
