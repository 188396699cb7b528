"""Integration tests for UserRepositorySQLAlchemy."""

import pytest

from pennywise.domain.user import EmailAlreadyExistsError, User
from pennywise.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy


class TestUserRepository:
    async def test_create_assigns_id(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        user = await repo.create(User(email="alice@example.com", password_hash="hash"))

        assert user.id is not None
        assert user.email == "alice@example.com"
        assert user.password_hash == "hash"

    async def test_find_by_email_and_id(self, db_session, user):
        repo = UserRepositorySQLAlchemy(db_session)

        assert (await repo.find_by_email("alice@example.com")).id == user.id
        assert (await repo.find_by_id(user.id)).email == "alice@example.com"
        assert await repo.find_by_email("Alice@example.com") is None
        assert await repo.find_by_id(999) is None

    async def test_duplicate_email_rejected_by_store(self, db_session, user):
        repo = UserRepositorySQLAlchemy(db_session)

        with pytest.raises(EmailAlreadyExistsError):
            await repo.create(User(email="alice@example.com", password_hash="other"))

    async def test_update(self, db_session, user):
        repo = UserRepositorySQLAlchemy(db_session)
        user.email = "carol@example.com"
        user.password_hash = "new-hash"

        await repo.update(user)

        stored = await repo.find_by_id(user.id)
        assert stored.email == "carol@example.com"
        assert stored.password_hash == "new-hash"

    async def test_update_to_taken_email(self, db_session, user, other_user):
        repo = UserRepositorySQLAlchemy(db_session)
        other_user.email = user.email

        with pytest.raises(EmailAlreadyExistsError):
            await repo.update(other_user)

    async def test_delete(self, db_session, user):
        repo = UserRepositorySQLAlchemy(db_session)

        assert await repo.delete(user.id) is True
        assert await repo.find_by_id(user.id) is None
        assert await repo.delete(user.id) is False
