"""SQLAlchemy repository implementations."""

from pennywise.infrastructure.persistence.sqlalchemy.repositories.budget_repository import (
    BudgetRepositorySQLAlchemy,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.category_repository import (
    CategoryRepositorySQLAlchemy,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.expense_repository import (
    ExpenseRepositorySQLAlchemy,
)
from pennywise.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "BudgetRepositorySQLAlchemy",
    "CategoryRepositorySQLAlchemy",
    "ExpenseRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
