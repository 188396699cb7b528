"""JWT token service.

Provides access and refresh token creation and verification. Tokens are
stateless: nothing is stored server-side, so a token stays valid until it
expires.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from pennywise.domain.shared.result import Err, ErrorCode, Ok, Result
from pennywise_auth.schemas import TokenPayload


class JWTService:
    """Issues and verifies HS256 tokens for a user id.

    Access tokens (short-lived) and refresh tokens (long-lived) are signed
    with distinct secrets.

    Examples
    --------
    >>> service = JWTService("access-secret", "refresh-secret")
    >>> token = service.create_access_token(user_id=1)
    >>> result = service.verify_access_token(token)
    >>> print(result.value.user_id)
    1
    """

    DEFAULT_ACCESS_EXPIRE_MINUTES = 15
    DEFAULT_REFRESH_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"

    def __init__(
        self,
        access_secret_key: str,
        refresh_secret_key: str,
        access_token_expire_minutes: int = DEFAULT_ACCESS_EXPIRE_MINUTES,
        refresh_token_expire_days: int = DEFAULT_REFRESH_EXPIRE_DAYS,
    ):
        """Keep both secrets and the default lifetimes.

        Parameters
        ----------
        access_secret_key
            Secret key for signing access tokens
        refresh_secret_key
            Secret key for signing refresh tokens
        access_token_expire_minutes
            Minutes until an access token expires (default 15)
        refresh_token_expire_days
            Days until a refresh token expires (default 7)
        """
        if not access_secret_key or not refresh_secret_key:
            msg = "JWT secret keys cannot be empty"
            raise ValueError(msg)

        self._secrets = {"access": access_secret_key, "refresh": refresh_secret_key}
        self._access_expire = timedelta(minutes=access_token_expire_minutes)
        self._refresh_expire = timedelta(days=refresh_token_expire_days)

    def create_access_token(
        self,
        user_id: int,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a short-lived access token for ``user_id``."""
        return self._create_token(
            user_id=user_id,
            token_type="access",
            expires_delta=expires_delta or self._access_expire,
        )

    def create_refresh_token(
        self,
        user_id: int,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Sign a refresh token; it is only accepted by ``verify_refresh_token``."""
        return self._create_token(
            user_id=user_id,
            token_type="refresh",
            expires_delta=expires_delta or self._refresh_expire,
        )

    def verify_access_token(self, token: str) -> Result[TokenPayload]:
        return self._verify(token, "access")

    def verify_refresh_token(self, token: str) -> Result[TokenPayload]:
        return self._verify(token, "refresh")

    def _verify(self, token: str, token_type: str) -> Result[TokenPayload]:
        """Verify and decode a JWT token of the expected type.

        Returns
        -------
        ``Ok(TokenPayload)``, ``Err(TOKEN_EXPIRED)`` for a well-signed token
        past its expiry, or ``Err(TOKEN_INVALID)`` for anything else
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secrets[token_type],
                algorithms=[self.ALGORITHM],
            )
            user_id = int(payload["id"])
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            actual_type = payload.get("type", "access")
        except jwt.ExpiredSignatureError:
            return Err(ErrorCode.TOKEN_EXPIRED, "Token has expired")
        except jwt.InvalidTokenError as e:
            return Err(ErrorCode.TOKEN_INVALID, f"Invalid token: {e}")
        except (KeyError, TypeError, ValueError) as e:
            return Err(ErrorCode.TOKEN_INVALID, f"Malformed token payload: {e}")

        if actual_type != token_type:
            return Err(ErrorCode.TOKEN_INVALID, f"Expected a {token_type} token")

        return Ok(TokenPayload(user_id=user_id, exp=exp, token_type=actual_type))

    def _create_token(
        self,
        user_id: int,
        token_type: str,
        expires_delta: timedelta,
    ) -> str:
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user_id),
            "id": user_id,
            "type": token_type,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(payload, self._secrets[token_type], algorithm=self.ALGORITHM)
