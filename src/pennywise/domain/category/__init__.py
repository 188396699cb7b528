"""Category domain: shared spending categories."""

from pennywise.domain.category.category import MAX_NAME_LENGTH, Category
from pennywise.domain.category.exceptions import CategoryAlreadyExistsError
from pennywise.domain.category.repository import CategoryRepository

__all__ = [
    "MAX_NAME_LENGTH",
    "Category",
    "CategoryAlreadyExistsError",
    "CategoryRepository",
]
