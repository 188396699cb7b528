"""Category record."""

from dataclasses import dataclass, field
from datetime import datetime

from pennywise.domain.shared.time import utc_now

MAX_NAME_LENGTH = 50


@dataclass
class Category:
    """A spending category shared by all users (e.g. "Housing")."""

    name: str
    id: int | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def touch(self) -> None:
        self.updated_at = utc_now()
