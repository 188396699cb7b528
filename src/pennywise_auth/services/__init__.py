"""Authentication services.

Provides password hashing and JWT token management.
"""

from pennywise_auth.services.jwt_service import JWTService
from pennywise_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
