"""Domain models for users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from digiwallet.modules.common.types import EntityStatus, UserRole


@dataclass(slots=True)
class User:
    id: int
    username: str
    role: UserRole
    status: EntityStatus
    full_name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class UserCreateInput:
    username: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    role: UserRole = UserRole.USER
    status: EntityStatus = EntityStatus.ACTIVE
