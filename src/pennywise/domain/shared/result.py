"""Tagged result types and stable error codes.

Core operations never raise for expected failures. They return either
``Ok(value)`` or ``Err(code, message, details)``, and the presentation
layer turns an ``Err`` into the HTTP error envelope.

Examples
--------
>>> result = validate_password("short")
>>> if isinstance(result, Err):
...     print(result.code, result.details)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Sequence, TypeVar, Union

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_ID = "INVALID_ID"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    PASSWORD_UNCHANGED = "PASSWORD_UNCHANGED"
    OLD_PASSWORD_REQUIRED = "OLD_PASSWORD_REQUIRED"
    OLD_PASSWORD_WRONG = "OLD_PASSWORD_WRONG"
    DUPLICATE_BUDGET = "DUPLICATE_BUDGET"

    # Authentication Errors (401)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHORIZED = "UNAUTHORIZED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"

    # Refresh Errors (403)
    SESSION_EXPIRED = "SESSION_EXPIRED"
    FORBIDDEN = "FORBIDDEN"

    # Not Found Errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"
    BUDGET_NOT_FOUND = "BUDGET_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    EXPENSE_NOT_FOUND = "EXPENSE_NOT_FOUND"

    # Conflict Errors (409)
    EMAIL_TAKEN = "EMAIL_TAKEN"
    CATEGORY_NAME_TAKEN = "CATEGORY_NAME_TAKEN"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    Attributes
    ----------
    code
        Stable error code for programmatic handling
    message
        Human-readable error message (safe for end users)
    details
        Every individual problem found, in the order they were detected
    """

    code: ErrorCode
    message: str
    details: Sequence[str] = ()

    def __post_init__(self) -> None:
        # Freeze details (frozen dataclass workaround)
        object.__setattr__(self, "details", tuple(self.details))

    def __str__(self) -> str:
        return self.message


Result = Union[Ok[T], Err]
