"""Enumerations shared by the ledger entities.

All values are upper-case strings so they serialize to JSON and store in
``String`` columns without translation.
"""

from enum import Enum


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class EntityStatus(str, Enum):
    """Lifecycle status of users and wallets."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    def toggled(self) -> "EntityStatus":
        return EntityStatus.INACTIVE if self is EntityStatus.ACTIVE else EntityStatus.ACTIVE


class CardType(str, Enum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"
    PREPAID = "PREPAID"
    VIRTUAL = "VIRTUAL"


class CardStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BLOCKED = "BLOCKED"


class TransactionType(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


__all__ = [
    "UserRole",
    "EntityStatus",
    "CardType",
    "CardStatus",
    "TransactionType",
    "TransactionStatus",
]
