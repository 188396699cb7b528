"""DTOs for account operations."""

from dataclasses import dataclass
from typing import Optional

from pennywise.domain.user import User


@dataclass(frozen=True)
class LoginResult:
    """Successful login: the user and a fresh token pair."""

    user: User
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial profile change. ``None`` or an empty string leaves a field untouched."""

    email: Optional[str] = None
    password: Optional[str] = None
    old_password: Optional[str] = None
