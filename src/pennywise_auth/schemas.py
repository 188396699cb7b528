"""Authentication data classes."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The user's unique identifier (from the 'id' claim)
    exp
        Token expiration timestamp
    token_type
        Either "access" or "refresh"
    """

    user_id: int
    exp: datetime
    token_type: str = "access"
