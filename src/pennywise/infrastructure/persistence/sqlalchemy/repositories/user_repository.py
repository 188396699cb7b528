"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.domain.user import EmailAlreadyExistsError, User, UserRepository
from pennywise.infrastructure.persistence.sqlalchemy.models import UserModel
from pennywise.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def create(self, user: User) -> User:
        model = self._map_to_model(user)
        self._session.add(model)
        await self._flush(user.email)
        logger.debug("Created user: %s", model.id)
        return self._map_to_domain(model)

    async def update(self, user: User) -> User:
        model = await self._find_model_by_id(user.id) if user.id is not None else None
        if model is None:
            msg = f"User {user.id} does not exist"
            raise LookupError(msg)

        model.email = user.email
        model.password = user.password_hash
        model.updated_at = user.updated_at
        await self._flush(user.email)
        logger.debug("Updated user: %s", model.id)
        return self._map_to_domain(model)

    async def delete(self, user_id: int) -> bool:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return False

        # Budgets and expenses go with it through FK cascades
        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted user: %s", user_id)
        return True

    async def _flush(self, email: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(email) from e
            raise

    async def _find_model_by_id(self, user_id: int) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            email=user.email,
            password=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
