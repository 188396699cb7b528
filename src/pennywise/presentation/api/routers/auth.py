"""Authentication router for registration, login and token refresh."""

import logging

from fastapi import APIRouter, status

from pennywise.presentation.api.dependencies import AccountServiceDep, DBSession
from pennywise.presentation.api.errors import unwrap
from pennywise.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserResponse,
)
from pennywise.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid email and/or password"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    account_service: AccountServiceDep,
    session: DBSession,
) -> RegisterResponse:
    """
    Create an account.

    The email must be well-formed, not disposable and on a domain that
    receives mail. The password needs 8+ characters with a lowercase and
    an uppercase letter, a digit and a symbol. Every failed rule is listed
    in ``details``.
    """
    user = unwrap(await account_service.register(request.email, request.password))
    await session.commit()

    return RegisterResponse(
        message="User created successfully.",
        user=UserResponse(**user.public_view()),
    )


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    account_service: AccountServiceDep,
    session: DBSession,
) -> LoginResponse:
    """Exchange email and password for an access and a refresh token."""
    result = unwrap(await account_service.login(request.email, request.password))
    # Persists a transparently upgraded password hash, if any
    await session.commit()

    return LoginResponse(
        access_token=result.access_token,
        refresh_token=result.refresh_token,
        user=UserResponse(**result.user.public_view()),
    )


@router.post(
    "/refresh",
    summary="Refresh access token",
    responses={
        200: {"description": "New access token issued"},
        403: {"model": ErrorResponse, "description": "Missing, invalid or expired refresh token"},
    },
)
async def refresh_token(
    account_service: AccountServiceDep,
    request: RefreshRequest | None = None,
) -> TokenResponse:
    """
    Get a new access token using a valid refresh token.

    The refresh token is not rotated; it stays valid until it expires.
    """
    token = request.refresh_token if request else None
    access_token = unwrap(account_service.refresh(token))
    return TokenResponse(access_token=access_token)
