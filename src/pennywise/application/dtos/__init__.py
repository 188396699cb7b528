"""Data Transfer Objects for the presentation layer."""

from pennywise.application.dtos.account_dto import LoginResult, ProfileUpdate

__all__ = [
    "LoginResult",
    "ProfileUpdate",
]
