"""SQLAlchemy persistence: models, repositories, engine and maintenance."""

from pennywise.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_tables,
    drop_tables,
)
from pennywise.infrastructure.persistence.sqlalchemy.models import Base
from pennywise.infrastructure.persistence.sqlalchemy.repositories import (
    BudgetRepositorySQLAlchemy,
    CategoryRepositorySQLAlchemy,
    ExpenseRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "BudgetRepositorySQLAlchemy",
    "CategoryRepositorySQLAlchemy",
    "ExpenseRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "create_tables",
    "drop_tables",
]
