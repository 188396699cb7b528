"""Account service for registration, login, token refresh and profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pennywise.application.dtos import LoginResult, ProfileUpdate
from pennywise.domain.shared import Err, ErrorCode, Ok, Result
from pennywise.domain.user import EmailAlreadyExistsError, User
from pennywise_auth import (
    JWTService,
    PasswordHashingService,
    lookup_mx,
    validate_email,
    validate_password,
)
from pennywise_auth.validators import MxLookup

if TYPE_CHECKING:
    from pennywise.domain.user import UserRepository

logger = logging.getLogger(__name__)

EMAIL_TAKEN_DETAIL = "The email address is already associated with another account."


def _email_taken() -> Err:
    return Err(ErrorCode.EMAIL_TAKEN, "Email address unavailable.", [EMAIL_TAKEN_DETAIL])


def _user_not_found() -> Err:
    return Err(ErrorCode.USER_NOT_FOUND, "User not found.")


class AccountService:
    """
    Application service for the account lifecycle.

    Combines the validators, the password hasher and the token service
    with the user store to provide:
    - Registration
    - Login (access + refresh token pair)
    - Access token refresh
    - Profile read, update (email/password rotation) and deletion

    Every operation returns an ``Ok``/``Err`` result; nothing here raises
    for an expected failure.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        mx_lookup: MxLookup = lookup_mx,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._mx_lookup = mx_lookup

    async def register(self, email: str, password: str) -> Result[User]:
        email_result = await validate_email(email, self._mx_lookup)
        password_result = validate_password(password)

        if isinstance(email_result, Err) and isinstance(password_result, Err):
            return Err(
                ErrorCode.VALIDATION_ERROR,
                "Invalid email and password.",
                [*email_result.details, *password_result.details],
            )
        if isinstance(email_result, Err):
            return email_result
        if isinstance(password_result, Err):
            return password_result

        normalized_email = email_result.value
        if await self._user_repo.find_by_email(normalized_email) is not None:
            logger.warning("Registration rejected, email taken: %s", normalized_email)
            return _email_taken()

        password_hash = await self._password_service.hash_async(password)
        try:
            user = await self._user_repo.create(
                User(email=normalized_email, password_hash=password_hash),
            )
        except EmailAlreadyExistsError:
            logger.warning("Registration lost a race on email: %s", normalized_email)
            return _email_taken()

        logger.info("User registered: %s (id: %s)", user.email, user.id)
        return Ok(user)

    async def login(self, email: str, password: str) -> Result[LoginResult]:
        # Looked up as submitted, without normalization
        user = await self._user_repo.find_by_email(email)
        if user is None:
            logger.warning("Login failed, unknown email: %s", email)
            return Err(
                ErrorCode.INVALID_CREDENTIALS,
                "No account found with this email.",
                ["Please check your email address or create an account."],
            )

        if not await self._password_service.verify_async(password, user.password_hash):
            logger.warning("Login failed, wrong password for user: %s", user.id)
            return Err(
                ErrorCode.INVALID_CREDENTIALS,
                "Incorrect password.",
                ["The information entered is incorrect."],
            )

        if self._password_service.needs_rehash(user.password_hash):
            user.password_hash = await self._password_service.hash_async(password)
            user = await self._user_repo.update(user)
            logger.info("Password hash upgraded for user: %s", user.id)

        if user.id is None:
            msg = f"Stored user {user.email} has no id"
            raise ValueError(msg)
        result = LoginResult(
            user=user,
            access_token=self._jwt_service.create_access_token(user.id),
            refresh_token=self._jwt_service.create_refresh_token(user.id),
        )
        logger.info("User logged in: %s", user.id)
        return Ok(result)

    def refresh(self, refresh_token: str | None) -> Result[str]:
        """Exchange a refresh token for a new access token.

        The refresh token itself is not rotated. An expired token yields
        SESSION_EXPIRED; every other failure collapses into FORBIDDEN.
        """
        if not refresh_token:
            return Err(ErrorCode.FORBIDDEN, "Unauthorized access.")

        verified = self._jwt_service.verify_refresh_token(refresh_token)
        if isinstance(verified, Err):
            if verified.code == ErrorCode.TOKEN_EXPIRED:
                return Err(
                    ErrorCode.SESSION_EXPIRED,
                    "Session expired.",
                    ["Please log in again."],
                )
            logger.debug("Refresh rejected: %s", verified.message)
            return Err(ErrorCode.FORBIDDEN, "Unauthorized access.")

        user_id = verified.value.user_id
        logger.debug("Access token refreshed for user: %s", user_id)
        return Ok(self._jwt_service.create_access_token(user_id))

    async def get_profile(self, user_id: int) -> Result[User]:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return _user_not_found()
        return Ok(user)

    async def update_profile(
        self,
        user_id: int,
        update: ProfileUpdate,
    ) -> Result[User]:
        """Apply an email and/or password change.

        Steps run in order and the first failure aborts without writing:
        email re-validation and uniqueness, then the old password check,
        the no-op check, and new password strength. The user is saved once.
        """
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return _user_not_found()

        changed = False

        if update.email and update.email.strip().lower() != user.email:
            email_result = await validate_email(update.email, self._mx_lookup)
            if isinstance(email_result, Err):
                return email_result
            other = await self._user_repo.find_by_email(email_result.value)
            if other is not None and other.id != user.id:
                return _email_taken()
            user.email = email_result.value
            changed = True

        if update.password:
            if not update.old_password:
                return Err(
                    ErrorCode.OLD_PASSWORD_REQUIRED,
                    "Current password required.",
                    ["Please provide your current password to set a new one."],
                )
            if not await self._password_service.verify_async(
                update.old_password,
                user.password_hash,
            ):
                return Err(
                    ErrorCode.OLD_PASSWORD_WRONG,
                    "Incorrect current password.",
                    ["The current password you entered is incorrect."],
                )
            if await self._password_service.verify_async(
                update.password,
                user.password_hash,
            ):
                return Err(
                    ErrorCode.PASSWORD_UNCHANGED,
                    "Password unchanged.",
                    ["The new password must be different from the current one."],
                )
            password_result = validate_password(update.password)
            if isinstance(password_result, Err):
                return password_result
            user.password_hash = await self._password_service.hash_async(
                password_result.value,
            )
            changed = True

        if not changed:
            return Ok(user)

        user.touch()
        try:
            user = await self._user_repo.update(user)
        except EmailAlreadyExistsError:
            return _email_taken()

        logger.info("Profile updated for user: %s", user.id)
        return Ok(user)

    async def delete_account(self, user_id: int) -> Result[None]:
        if not await self._user_repo.delete(user_id):
            return _user_not_found()
        logger.info("Account deleted: %s", user_id)
        return Ok(None)
