"""Profile router for the authenticated user."""

from fastapi import APIRouter

from pennywise.application.dtos import ProfileUpdate
from pennywise.presentation.api.dependencies import (
    AccountServiceDep,
    CurrentUserId,
    DBSession,
)
from pennywise.presentation.api.errors import unwrap
from pennywise.presentation.api.schemas.auth import UserResponse
from pennywise.presentation.api.schemas.common import ErrorResponse, MessageResponse
from pennywise.presentation.api.schemas.users import ProfileUpdateRequest

router = APIRouter()


@router.get(
    "",
    summary="Get my profile",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_profile(
    user_id: CurrentUserId,
    account_service: AccountServiceDep,
) -> UserResponse:
    user = unwrap(await account_service.get_profile(user_id))
    return UserResponse(**user.public_view())


@router.patch(
    "",
    summary="Update my email and/or password",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid data or password rules"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Email already in use"},
    },
)
async def update_profile(
    request: ProfileUpdateRequest,
    user_id: CurrentUserId,
    account_service: AccountServiceDep,
    session: DBSession,
) -> UserResponse:
    """
    Change email and/or password.

    A new email is validated like at registration. A new password requires
    ``old_password`` and must differ from the current one.
    """
    user = unwrap(
        await account_service.update_profile(
            user_id,
            ProfileUpdate(
                email=request.email,
                password=request.password,
                old_password=request.old_password,
            ),
        ),
    )
    await session.commit()
    return UserResponse(**user.public_view())


@router.delete(
    "",
    summary="Delete my account",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def delete_account(
    user_id: CurrentUserId,
    account_service: AccountServiceDep,
    session: DBSession,
) -> MessageResponse:
    """Delete the account together with its budgets and expenses."""
    unwrap(await account_service.delete_account(user_id))
    await session.commit()
    return MessageResponse(message="Account deleted successfully.")
