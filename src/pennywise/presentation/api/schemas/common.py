"""Common schemas shared across API endpoints."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from pennywise.infrastructure.persistence.sqlalchemy.models.base import MAX_INTEGER

# Positive and small enough for an Integer column
StoredInt = Annotated[int, Field(gt=0, le=MAX_INTEGER)]


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Error message")
    details: list[str] = Field(default_factory=list, description="Every problem found")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": 404,
                "message": "Budget not found.",
                "details": [],
                "code": "BUDGET_NOT_FOUND",
            },
        },
    )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


def require_any_field(model: BaseModel) -> BaseModel:
    """Reject a partial-update body in which every field is missing or null."""
    if all(getattr(model, name) is None for name in type(model).model_fields):
        msg = "At least one field must be provided."
        raise ValueError(msg)
    return model
