"""Repository protocol for wallet lifecycle operations.

There is deliberately no balance setter here: balances change only through
the transaction engine's repository.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol, Sequence

from digiwallet.modules.common.types import EntityStatus

from .models import Wallet


class WalletRepository(Protocol):
    async def get_by_id(self, wallet_id: int) -> Wallet | None:
        ...

    async def get_by_user_id(self, user_id: int) -> Wallet | None:
        ...

    async def list_wallets(self) -> Sequence[Wallet]:
        ...

    async def create_wallet(
        self,
        *,
        user_id: int,
        balance: Decimal,
        currency: str,
        status: EntityStatus,
    ) -> Wallet:
        ...

    async def set_status(self, wallet_id: int, status: EntityStatus) -> Wallet | None:
        ...
