"""Wallet balance engine exports"""

from .exceptions import TransactionNotFoundError
from .models import TransactionOutcome, TransactionRecord, TransactionRejection, TransactionRequest
from .reference import ReferenceIdGenerator
from .service import TransactionService

__all__ = [
    "ReferenceIdGenerator",
    "TransactionNotFoundError",
    "TransactionOutcome",
    "TransactionRecord",
    "TransactionRejection",
    "TransactionRequest",
    "TransactionService",
]
