"""Domain models for the wallet balance engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from digiwallet.modules.common.exceptions import ErrorKind
from digiwallet.modules.common.types import TransactionStatus, TransactionType


@dataclass(slots=True)
class TransactionRecord:
    id: int
    wallet_id: int
    amount: Decimal
    type: TransactionType
    status: TransactionStatus
    reference_id: Optional[str]
    transaction_date: datetime
    category: Optional[str] = None


@dataclass(slots=True)
class TransactionRequest:
    wallet_id: int
    type: TransactionType
    amount: Decimal | int | str
    category: Optional[str] = None
    reference_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TransactionRejection:
    kind: ErrorKind
    message: str


@dataclass(frozen=True, slots=True)
class TransactionOutcome:
    """Result of applying a transaction: exactly one of the fields is set."""

    transaction: Optional[TransactionRecord] = None
    error: Optional[TransactionRejection] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def accepted(cls, transaction: TransactionRecord) -> "TransactionOutcome":
        return cls(transaction=transaction)

    @classmethod
    def rejected(cls, kind: ErrorKind, message: str) -> "TransactionOutcome":
        return cls(error=TransactionRejection(kind=kind, message=message))
