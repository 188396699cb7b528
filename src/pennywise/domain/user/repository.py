"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pennywise.domain.user.user import User


class UserRepository(ABC):
    """Repository interface for User records."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by their ID.

        Parameters
        ----------
        user_id
            The user's unique identifier

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by their email address.

        The email is matched exactly as given; callers decide whether to
        normalize it first.

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Persist a new user and return it with its assigned ID.

        Raises
        ------
        EmailAlreadyExistsError
            If the email unique constraint rejects the insert
        """

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist changes to an existing user.

        Raises
        ------
        EmailAlreadyExistsError
            If the new email is already in use by another user
        """

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """
        Delete a user by ID.

        Owned budgets and expenses are removed by the store's cascading
        foreign keys.

        Returns
        -------
        True if a user was deleted, False if none existed
        """
