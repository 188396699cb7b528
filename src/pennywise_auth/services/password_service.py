"""Password hashing service using argon2id.

Provides hashing, verification and parameter-upgrade detection. Strength
rules live in ``pennywise_auth.validators``.
"""

import asyncio

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Every call to ``hash`` uses a fresh random salt, so hashing the same
    password twice yields two different encodings that both verify.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("Abcd123!")
    >>> service.verify("Abcd123!", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        time_cost
            Number of argon2 iterations
        memory_cost
            Memory usage in KiB (default 64 MiB)
        parallelism
            Number of parallel lanes
        """
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=Type.ID,
        )

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Returns
        -------
        The argon2id encoded hash (parameters and salt included)
        """
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a stored hash.

        Comparison timing is handled by the argon2 primitive.

        Returns
        -------
        True if password matches, False otherwise (including a malformed
        hash)
        """
        try:
            return self._hasher.verify(password_hash, password)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Check whether a hash was produced with outdated parameters."""
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except InvalidHashError:
            return True

    async def hash_async(self, password: str) -> str:
        """Hash in a worker thread so the event loop is not blocked."""
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, password_hash: str) -> bool:
        """Verify in a worker thread so the event loop is not blocked."""
        return await asyncio.to_thread(self.verify, password, password_hash)
