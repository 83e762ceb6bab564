"""Repository protocol used by the balance engine.

Implementations must make ``atomic()`` a real database transaction: the
balance write and the transaction insert inside it commit together or not at
all.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from datetime import datetime
from decimal import Decimal
from typing import Protocol, Sequence

from digiwallet.modules.common.types import TransactionStatus, TransactionType
from digiwallet.modules.wallets.models import Wallet

from .models import TransactionRecord


class TransactionRepository(Protocol):
    def atomic(self) -> AbstractAsyncContextManager[None]:
        ...

    async def lock_wallet(self, wallet_id: int) -> Wallet | None:
        """Load the wallet row for update (row lock where the database supports it)."""
        ...

    async def set_wallet_balance(self, wallet_id: int, balance: Decimal) -> None:
        ...

    async def add_transaction(
        self,
        *,
        wallet_id: int,
        amount: Decimal,
        type: TransactionType,
        status: TransactionStatus,
        category: str | None,
        reference_id: str | None,
        transaction_date: datetime,
    ) -> TransactionRecord:
        ...

    async def get_transaction(self, transaction_id: int) -> TransactionRecord | None:
        ...

    async def wallet_exists(self, wallet_id: int) -> bool:
        ...

    async def list_by_wallet(self, wallet_id: int, limit: int, offset: int) -> Sequence[TransactionRecord]:
        ...
