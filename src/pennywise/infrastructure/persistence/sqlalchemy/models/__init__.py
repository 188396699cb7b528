"""SQLAlchemy models.

Importing this package registers every table on ``Base.metadata``.
"""

from pennywise.infrastructure.persistence.sqlalchemy.models.base import (
    MAX_INTEGER,
    Base,
    TimestampMixin,
)
from pennywise.infrastructure.persistence.sqlalchemy.models.budget_model import BudgetModel
from pennywise.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from pennywise.infrastructure.persistence.sqlalchemy.models.expense_model import (
    ExpenseModel,
)
from pennywise.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "MAX_INTEGER",
    "Base",
    "TimestampMixin",
    "BudgetModel",
    "CategoryModel",
    "ExpenseModel",
    "UserModel",
]
