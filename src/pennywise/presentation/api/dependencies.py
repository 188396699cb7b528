"""FastAPI dependency injection for the Pennywise API.

Provides dependencies for:
- Database sessions
- Authentication (current user id from the access token)
- Path id validation
- Service instances
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pennywise.application.services import (
    AccountService,
    BudgetService,
    CategoryService,
    ExpenseService,
)
from pennywise.domain.shared import Err, ErrorCode
from pennywise.infrastructure.persistence.sqlalchemy import (
    BudgetRepositorySQLAlchemy,
    CategoryRepositorySQLAlchemy,
    ExpenseRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    create_engine,
)
from pennywise.infrastructure.persistence.sqlalchemy.models import MAX_INTEGER
from pennywise.presentation.api.config import get_api_settings
from pennywise.presentation.api.errors import ResultError
from pennywise_auth import JWTService, PasswordHashingService, is_positive_integer, lookup_mx
from pennywise_auth.validators import MxLookup
from pennywise_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (one per database URL)
# -----------------------------------------------------------------------------


@lru_cache()
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for a URL.

    The engine manages the connection pool and is reused across all requests.
    """
    return create_engine(database_url)


@lru_cache()
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker for a URL."""
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(settings: SettingsDep) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Routers commit after a successful operation; anything left uncommitted
    is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker(settings.database_url)() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        access_secret_key=settings.jwt_access_secret_key.get_secret_value(),
        refresh_secret_key=settings.jwt_refresh_secret_key.get_secret_value(),
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(
        time_cost=settings.password_hash_time_cost,
        memory_cost=settings.password_hash_memory_cost,
        parallelism=settings.password_hash_parallelism,
    )


def get_mx_lookup() -> MxLookup:
    """Get the MX resolver used for email validation."""
    return lookup_mx


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


def get_account_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: PasswordServiceDep,
    mx_lookup: Annotated[MxLookup, Depends(get_mx_lookup)],
) -> AccountService:
    return AccountService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        mx_lookup=mx_lookup,
    )


def get_budget_service(session: DBSession) -> BudgetService:
    return BudgetService(
        budget_repository=BudgetRepositorySQLAlchemy(session),
        category_repository=CategoryRepositorySQLAlchemy(session),
    )


def get_category_service(session: DBSession) -> CategoryService:
    return CategoryService(category_repository=CategoryRepositorySQLAlchemy(session))


def get_expense_service(session: DBSession) -> ExpenseService:
    return ExpenseService(
        expense_repository=ExpenseRepositorySQLAlchemy(session),
        category_repository=CategoryRepositorySQLAlchemy(session),
    )


AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
BudgetServiceDep = Annotated[BudgetService, Depends(get_budget_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
ExpenseServiceDep = Annotated[ExpenseService, Depends(get_expense_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def get_current_user_id(
    jwt_service: JWTServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> int:
    """
    Resolve the caller's user id from the Bearer access token.

    Raises
    ------
    ResultError
        401 "Session expired." for an expired token, 401 "Unauthorized
        access." when the token is missing, forged, malformed or a
        refresh token
    """
    if credentials is None:
        raise ResultError(Err(ErrorCode.UNAUTHORIZED, "Unauthorized access."))

    verified = jwt_service.verify_access_token(credentials.credentials)
    if isinstance(verified, Err):
        logger.warning("Access token rejected: %s", verified.message)
        if verified.code == ErrorCode.TOKEN_EXPIRED:
            raise ResultError(
                Err(ErrorCode.TOKEN_EXPIRED, "Session expired.", ["Please log in again."]),
            )
        raise ResultError(Err(ErrorCode.UNAUTHORIZED, "Unauthorized access."))

    return verified.value.user_id


# Type alias for the authenticated caller
CurrentUserId = Annotated[int, Depends(get_current_user_id)]


# -----------------------------------------------------------------------------
# Path Parameters
# -----------------------------------------------------------------------------


def get_path_id(id: Annotated[str, Path()]) -> int:  # noqa: A002
    """Accept only plain positive integers as resource ids."""
    if not is_positive_integer(id) or int(id) > MAX_INTEGER:
        raise ResultError(
            Err(
                ErrorCode.INVALID_ID,
                "The provided ID is not valid.",
                ["The ID must be a positive integer without spaces or special characters."],
            ),
        )
    return int(id)


PathId = Annotated[int, Depends(get_path_id)]
