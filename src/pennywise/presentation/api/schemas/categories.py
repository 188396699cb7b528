"""Category schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

from pennywise.domain.category import MAX_NAME_LENGTH


class CategoryRequest(BaseModel):
    """Request schema for creating or renaming a category."""

    name: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_NAME_LENGTH),
    ]

    model_config = ConfigDict(json_schema_extra={"example": {"name": "Groceries"}})


class CategoryResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime
