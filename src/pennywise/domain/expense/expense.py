"""Expense record."""

from dataclasses import dataclass
from datetime import date as date_type
from decimal import Decimal


@dataclass
class Expense:
    """A single spending entry owned by one user."""

    amount: Decimal
    category_id: int
    user_id: int
    description: str | None = None
    date: date_type | None = None
    id: int | None = None
    category_name: str | None = None
