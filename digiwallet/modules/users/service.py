"""Domain services for user management."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from digiwallet.modules.common.exceptions import InvalidArgumentError

from .exceptions import UserAlreadyExistsError, UserNotFoundError
from .models import User, UserCreateInput
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Encapsulates core user use cases."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "UserService":
        # deferred: the SQL repositories import this package
        from digiwallet.infrastructure.database.repositories.user_repository import SqlUserRepository

        return cls(SqlUserRepository(session))

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._repository.get_by_username(username.strip())

    async def list_users(self) -> Sequence[User]:
        return await self._repository.list_users()

    async def create_user(self, payload: UserCreateInput) -> User:
        username = payload.username.strip()
        if not username:
            raise InvalidArgumentError("username must not be blank")

        existing = await self._repository.get_by_username(username)
        if existing is not None:
            raise UserAlreadyExistsError(username)

        user = await self._repository.create_user(
            username=username,
            full_name=payload.full_name,
            email=payload.email,
            role=payload.role,
            status=payload.status,
        )
        logger.info("Created user %s", user.username, extra={"user_id": user.id})
        return user

    async def toggle_status(self, user_id: int) -> User:
        current = await self.get_user(user_id)
        updated = await self._repository.set_status(user_id, current.status.toggled())
        if updated is None:
            raise UserNotFoundError(user_id)
        return updated
