"""Pennywise Auth - authentication building blocks.

This package handles:
- Email, password and identifier validation
- Password hashing (argon2id)
- JWT access/refresh token creation and verification

Architecture:
    pennywise_auth/
    ├── services/       # Password hashing, JWT
    ├── validators.py   # Input validation (returns Ok/Err results)
    └── schemas.py      # Data classes

Usage:
    from pennywise_auth import JWTService, PasswordHashingService
    from pennywise_auth import validate_email, validate_password
"""

from pennywise_auth.schemas import TokenPayload
from pennywise_auth.services import JWTService, PasswordHashingService
from pennywise_auth.validators import (
    is_positive_integer,
    lookup_mx,
    validate_email,
    validate_password,
)

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Validators
    "is_positive_integer",
    "lookup_mx",
    "validate_email",
    "validate_password",
]
