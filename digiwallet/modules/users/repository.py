"""Repository protocol for users."""

from __future__ import annotations

from typing import Protocol, Sequence

from digiwallet.modules.common.types import EntityStatus, UserRole

from .models import User


class UserRepository(Protocol):
    """Abstract repository interface for user persistence."""

    async def get_by_id(self, user_id: int) -> User | None:
        ...

    async def get_by_username(self, username: str) -> User | None:
        ...

    async def list_users(self) -> Sequence[User]:
        ...

    async def create_user(
        self,
        *,
        username: str,
        full_name: str | None,
        email: str | None,
        role: UserRole,
        status: EntityStatus,
    ) -> User:
        ...

    async def set_status(self, user_id: int, status: EntityStatus) -> User | None:
        ...
