"""Expense schemas."""

import datetime as dt
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pennywise.infrastructure.persistence.sqlalchemy.models.expense_model import (
    MAX_DESCRIPTION_LENGTH,
)
from pennywise.presentation.api.schemas.common import StoredInt, require_any_field

# Positive, at most two decimal places
Amount = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]
Description = Annotated[str, Field(max_length=MAX_DESCRIPTION_LENGTH)]


class ExpenseCreateRequest(BaseModel):
    """Request schema for recording an expense. ``date`` defaults to today."""

    amount: Amount
    category_id: StoredInt
    description: Description | None = None
    date: dt.date | None = None

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "amount": "42.50",
                "category_id": 3,
                "description": "Weekly groceries",
                "date": "2024-03-15",
            },
        },
    )


class ExpenseUpdateRequest(BaseModel):
    """Partial expense update; at least one field is required."""

    amount: Amount | None = None
    category_id: StoredInt | None = None
    description: Description | None = None
    date: dt.date | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _require_any_field(self) -> "ExpenseUpdateRequest":
        return require_any_field(self)


class ExpenseResponse(BaseModel):
    id: int
    amount: Decimal
    description: str | None = None
    date: dt.date
    category_id: int
    category_name: str | None = None
    user_id: int
