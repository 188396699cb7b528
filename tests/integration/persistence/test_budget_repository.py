"""Integration tests for BudgetRepositorySQLAlchemy."""

import pytest

from pennywise.domain.budget import Budget, BudgetAlreadyExistsError
from pennywise.infrastructure.persistence.sqlalchemy import (
    BudgetRepositorySQLAlchemy,
    CategoryRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)


class TestBudgetRepository:
    async def test_create_returns_category_name(self, db_session, user, food):
        repo = BudgetRepositorySQLAlchemy(db_session)

        budget = await repo.create(
            Budget.create(amount=500, category_id=food.id, user_id=user.id),
        )

        assert budget.id is not None
        assert budget.alert == 400
        assert budget.category_name == "Food"

    async def test_one_budget_per_user_and_category(self, db_session, user, food):
        repo = BudgetRepositorySQLAlchemy(db_session)
        await repo.create(Budget.create(amount=500, category_id=food.id, user_id=user.id))

        with pytest.raises(BudgetAlreadyExistsError):
            await repo.create(Budget.create(amount=100, category_id=food.id, user_id=user.id))

    async def test_same_category_for_different_users(self, db_session, user, other_user, food):
        repo = BudgetRepositorySQLAlchemy(db_session)

        await repo.create(Budget.create(amount=500, category_id=food.id, user_id=user.id))
        await repo.create(Budget.create(amount=100, category_id=food.id, user_id=other_user.id))

        assert len(await repo.list_by_user(user.id)) == 1
        assert len(await repo.list_by_user(other_user.id)) == 1

    async def test_list_newest_first(self, db_session, user, food, travel):
        repo = BudgetRepositorySQLAlchemy(db_session)
        first = await repo.create(Budget.create(amount=500, category_id=food.id, user_id=user.id))
        second = await repo.create(
            Budget.create(amount=300, category_id=travel.id, user_id=user.id),
        )

        budgets = await repo.list_by_user(user.id)

        assert [b.id for b in budgets] == [second.id, first.id]

    async def test_find_by_user_and_category(self, db_session, user, food, travel):
        repo = BudgetRepositorySQLAlchemy(db_session)
        budget = await repo.create(Budget.create(amount=500, category_id=food.id, user_id=user.id))

        assert (await repo.find_by_user_and_category(user.id, food.id)).id == budget.id
        assert await repo.find_by_user_and_category(user.id, travel.id) is None

    async def test_update_moves_category(self, db_session, user, food, travel):
        repo = BudgetRepositorySQLAlchemy(db_session)
        budget = await repo.create(Budget.create(amount=500, category_id=food.id, user_id=user.id))
        budget.category_id = travel.id

        updated = await repo.update(budget)

        assert updated.category_name == "Travel"

    async def test_deleting_category_removes_budget(self, db_session, user, food):
        repo = BudgetRepositorySQLAlchemy(db_session)
        budget = await repo.create(Budget.create(amount=500, category_id=food.id, user_id=user.id))

        await CategoryRepositorySQLAlchemy(db_session).delete(food.id)
        db_session.expunge_all()

        assert await repo.find_by_id(budget.id) is None

    async def test_deleting_user_removes_budget(self, db_session, user, food):
        repo = BudgetRepositorySQLAlchemy(db_session)
        budget = await repo.create(Budget.create(amount=500, category_id=food.id, user_id=user.id))

        await UserRepositorySQLAlchemy(db_session).delete(user.id)
        db_session.expunge_all()

        assert await repo.find_by_id(budget.id) is None
