"""User domain: account identity and credentials."""

from pennywise.domain.user.exceptions import EmailAlreadyExistsError
from pennywise.domain.user.repository import UserRepository
from pennywise.domain.user.user import User

__all__ = [
    "EmailAlreadyExistsError",
    "User",
    "UserRepository",
]
