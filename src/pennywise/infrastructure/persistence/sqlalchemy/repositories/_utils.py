"""Shared utilities for SQLAlchemy repositories."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: IntegrityError) -> bool:
    """
    Tell whether an IntegrityError comes from a unique constraint.

    Covers the SQLite ("UNIQUE constraint failed") and PostgreSQL
    ("duplicate key value violates unique constraint") messages.
    """
    message = str(error.orig if error.orig is not None else error).lower()
    return "unique" in message or "duplicate key" in message
