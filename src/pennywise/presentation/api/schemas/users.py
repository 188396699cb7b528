"""Profile schemas."""

from pydantic import BaseModel, ConfigDict, model_validator


class ProfileUpdateRequest(BaseModel):
    """Request schema for updating the caller's email and/or password.

    Changing the password requires ``old_password``.
    """

    email: str | None = None
    password: str | None = None
    old_password: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "password": "NewPassword123!",
                "old_password": "Password123!",
            },
        },
    )

    @model_validator(mode="after")
    def _require_change(self) -> "ProfileUpdateRequest":
        if not self.email and not self.password:
            msg = "Provide an email or a password to update."
            raise ValueError(msg)
        return self
