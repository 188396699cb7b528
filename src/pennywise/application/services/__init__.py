"""Application services."""

from pennywise.application.services.account_service import AccountService
from pennywise.application.services.budget_service import BudgetService
from pennywise.application.services.category_service import CategoryService
from pennywise.application.services.expense_service import ExpenseService

__all__ = [
    "AccountService",
    "BudgetService",
    "CategoryService",
    "ExpenseService",
]
