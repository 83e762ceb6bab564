"""Shared enums, errors and helpers for the domain modules."""

from .exceptions import (
    AlreadyExistsError,
    DomainError,
    ErrorKind,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)
from .money import to_money
from .types import CardStatus, CardType, EntityStatus, TransactionStatus, TransactionType, UserRole

__all__ = [
    "AlreadyExistsError",
    "DomainError",
    "ErrorKind",
    "InvalidArgumentError",
    "InvalidStateError",
    "NotFoundError",
    "to_money",
    "CardStatus",
    "CardType",
    "EntityStatus",
    "TransactionStatus",
    "TransactionType",
    "UserRole",
]
