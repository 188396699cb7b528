"""Fixtures for repository tests against an in-memory SQLite database."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pennywise.domain.category import Category
from pennywise.domain.user import User
from pennywise.infrastructure.persistence.sqlalchemy import (
    CategoryRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    create_engine,
    create_tables,
)


@pytest.fixture
async def db_engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    session_maker = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session


@pytest.fixture
async def user(db_session) -> User:
    return await UserRepositorySQLAlchemy(db_session).create(
        User(email="alice@example.com", password_hash="hash"),
    )


@pytest.fixture
async def other_user(db_session) -> User:
    return await UserRepositorySQLAlchemy(db_session).create(
        User(email="bob@example.com", password_hash="hash"),
    )


@pytest.fixture
async def food(db_session) -> Category:
    return await CategoryRepositorySQLAlchemy(db_session).create(Category(name="Food"))


@pytest.fixture
async def travel(db_session) -> Category:
    return await CategoryRepositorySQLAlchemy(db_session).create(Category(name="Travel"))
