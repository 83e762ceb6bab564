"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from digiwallet.db.models import User as UserModel
from digiwallet.modules.common.repository import AsyncRepository
from digiwallet.modules.common.types import EntityStatus, UserRole
from digiwallet.modules.users.exceptions import UserAlreadyExistsError
from digiwallet.modules.users.models import User


class SqlUserRepository(AsyncRepository[UserModel]):
    """User repository backed by SQLAlchemy models."""

    async def get_by_id(self, user_id: int) -> User | None:
        model = await self.session.get(UserModel, user_id)
        return self._to_domain(model)

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self.session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def list_users(self) -> Sequence[User]:
        stmt = select(UserModel).order_by(UserModel.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_user(
        self,
        *,
        username: str,
        full_name: str | None,
        email: str | None,
        role: UserRole,
        status: EntityStatus,
    ) -> User:
        model = UserModel(
            username=username,
            full_name=full_name,
            email=email,
            role=role.value,
            status=status.value,
        )
        try:
            await self.add(model)
        except IntegrityError as exc:
            await self.session.rollback()
            raise UserAlreadyExistsError(username) from exc
        return self._to_domain(model)

    async def set_status(self, user_id: int, status: EntityStatus) -> User | None:
        model = await self.session.get(UserModel, user_id)
        if model is None:
            return None
        if model.status != status.value:
            model.status = status.value
            await self.session.flush()
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UserModel | None) -> User | None:
        if model is None:
            return None
        return User(
            id=model.id,
            username=model.username,
            role=UserRole(model.role or UserRole.USER.value),
            status=EntityStatus(model.status or EntityStatus.ACTIVE.value),
            full_name=model.full_name,
            email=model.email,
            created_at=model.created_at,
        )
