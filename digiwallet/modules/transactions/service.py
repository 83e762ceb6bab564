"""Wallet balance engine.

Applies CREDIT/DEBIT transactions to wallets. Preconditions are checked in a
fixed order against a freshly locked wallet row:

1. the wallet exists                  -> NOT_FOUND
2. the wallet is ACTIVE               -> INVALID_STATE
3. the amount is a positive money value -> INVALID_ARGUMENT
4. a DEBIT does not exceed the balance  -> INSUFFICIENT_FUNDS

Business rejections are returned as ``TransactionOutcome.rejected`` and leave
the database untouched. On acceptance the new balance and a COMPLETED
transaction row are committed in one unit of work.

Concurrent requests against the same wallet are serialized by the per-wallet
lock registry for the whole read-check-write-commit sequence; on PostgreSQL
the ``SELECT ... FOR UPDATE`` row lock additionally covers other processes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from digiwallet.modules.common.exceptions import ErrorKind
from digiwallet.modules.common.money import MAX_AMOUNT, to_money
from digiwallet.modules.common.types import TransactionStatus, TransactionType
from digiwallet.modules.wallets.exceptions import WalletNotFoundError
from digiwallet.modules.wallets.locks import WalletLockRegistry

from .exceptions import TransactionNotFoundError
from .models import TransactionOutcome, TransactionRecord, TransactionRequest
from .reference import ReferenceIdGenerator
from .repository import TransactionRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransactionService:
    repository: TransactionRepository
    locks: WalletLockRegistry
    references: ReferenceIdGenerator

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        *,
        locks: WalletLockRegistry,
        references: ReferenceIdGenerator,
    ) -> "TransactionService":
        from digiwallet.infrastructure.database.repositories.transaction_repository import (
            SqlTransactionRepository,
        )

        return cls(SqlTransactionRepository(session), locks, references)

    async def apply_transaction(self, request: TransactionRequest) -> TransactionOutcome:
        try:
            transaction_type = TransactionType(request.type)
        except ValueError:
            return self._reject(request, ErrorKind.INVALID_ARGUMENT, f"Unknown transaction type: {request.type}")

        async with self.locks.hold(request.wallet_id):
            async with self.repository.atomic():
                wallet = await self.repository.lock_wallet(request.wallet_id)
                if wallet is None:
                    return self._reject(request, ErrorKind.NOT_FOUND, f"Wallet not found with id: {request.wallet_id}")
                if not wallet.is_active():
                    return self._reject(
                        request,
                        ErrorKind.INVALID_STATE,
                        f"Wallet {wallet.id} is {wallet.status.value}: inactive wallet cannot transact",
                    )

                amount = to_money(request.amount)
                if amount is None or amount <= 0:
                    return self._reject(
                        request,
                        ErrorKind.INVALID_ARGUMENT,
                        f"Amount must be a positive value with at most two decimal places: {request.amount}",
                    )

                if transaction_type is TransactionType.DEBIT:
                    if amount > wallet.balance:
                        return self._reject(
                            request,
                            ErrorKind.INSUFFICIENT_FUNDS,
                            f"Insufficient funds in wallet {wallet.id}: balance {wallet.balance}, requested {amount}",
                        )
                    new_balance = wallet.balance - amount
                else:
                    new_balance = wallet.balance + amount
                    if new_balance > MAX_AMOUNT:
                        return self._reject(
                            request,
                            ErrorKind.INVALID_ARGUMENT,
                            f"Credit of {amount} would take wallet {wallet.id} above the maximum balance {MAX_AMOUNT}",
                        )

                await self.repository.set_wallet_balance(wallet.id, new_balance)
                record = await self.repository.add_transaction(
                    wallet_id=wallet.id,
                    amount=amount,
                    type=transaction_type,
                    status=TransactionStatus.COMPLETED,
                    category=_clean(request.category),
                    reference_id=_clean(request.reference_id) or self.references.next_id(transaction_type),
                    transaction_date=datetime.now(timezone.utc),
                )

        logger.info(
            "Applied %s of %s to wallet %s, balance now %s",
            transaction_type.value,
            record.amount,
            record.wallet_id,
            new_balance,
            extra={
                "wallet_id": record.wallet_id,
                "transaction_id": record.id,
                "reference_id": record.reference_id,
            },
        )
        return TransactionOutcome.accepted(record)

    async def get_transaction(self, transaction_id: int) -> TransactionRecord:
        record = await self.repository.get_transaction(transaction_id)
        if record is None:
            raise TransactionNotFoundError(transaction_id)
        return record

    async def list_wallet_transactions(
        self, wallet_id: int, limit: int = 100, offset: int = 0
    ) -> Sequence[TransactionRecord]:
        if not await self.repository.wallet_exists(wallet_id):
            raise WalletNotFoundError(wallet_id)
        return await self.repository.list_by_wallet(wallet_id, limit, offset)

    @staticmethod
    def _reject(request: TransactionRequest, kind: ErrorKind, message: str) -> TransactionOutcome:
        logger.warning(
            "Rejected %s for wallet %s: %s",
            getattr(request.type, "value", request.type),
            request.wallet_id,
            message,
            extra={"wallet_id": request.wallet_id, "error_kind": kind.value},
        )
        return TransactionOutcome.rejected(kind, message)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
