"""Budget schemas."""

from pydantic import BaseModel, ConfigDict, model_validator

from pennywise.presentation.api.schemas.common import StoredInt, require_any_field


class BudgetCreateRequest(BaseModel):
    """Request schema for creating a budget.

    The alert threshold is derived from ``amount`` and cannot be sent.
    """

    amount: StoredInt
    category_id: StoredInt

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"amount": 500, "category_id": 1}},
    )


class BudgetUpdateRequest(BaseModel):
    """Partial budget update; at least one field is required."""

    amount: StoredInt | None = None
    category_id: StoredInt | None = None

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"amount": 625}},
    )

    @model_validator(mode="after")
    def _require_any_field(self) -> "BudgetUpdateRequest":
        return require_any_field(self)


class BudgetResponse(BaseModel):
    id: int
    amount: int
    alert: int
    category_id: int
    category_name: str | None = None
    user_id: int
