"""Domain models for wallets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from digiwallet.modules.common.types import EntityStatus


@dataclass(slots=True)
class Wallet:
    id: int
    user_id: int
    balance: Decimal
    currency: str
    status: EntityStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_active(self) -> bool:
        return self.status is EntityStatus.ACTIVE
