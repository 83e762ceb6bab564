"""Repository base class for SQLAlchemy-backed implementations."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class AsyncRepository(Generic[ModelT]):
    """Base repository exposing the SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Unit of work: commit everything done inside the block, or nothing."""
        try:
            yield
        except BaseException:
            await self.session.rollback()
            raise
        await self.session.commit()
