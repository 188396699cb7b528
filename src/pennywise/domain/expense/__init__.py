"""Expense domain."""

from pennywise.domain.expense.expense import Expense
from pennywise.domain.expense.repository import ExpenseRepository

__all__ = [
    "Expense",
    "ExpenseRepository",
]
