"""User record."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pennywise.domain.shared.time import utc_now


@dataclass
class User:
    """A registered account.

    ``email`` is stored normalized (trimmed, lower-cased) and is unique
    across users. ``password_hash`` is the argon2 encoding of the password
    and never leaves the service layer.
    """

    email: str
    password_hash: str = field(repr=False)
    id: int | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def touch(self) -> None:
        self.updated_at = utc_now()

    def public_view(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
