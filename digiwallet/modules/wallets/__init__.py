"""Wallet domain exports"""

from .exceptions import UserWalletNotFoundError, WalletAlreadyExistsError, WalletNotFoundError
from .locks import WalletLockRegistry
from .models import Wallet
from .service import WalletService

__all__ = [
    "Wallet",
    "WalletService",
    "WalletLockRegistry",
    "WalletNotFoundError",
    "UserWalletNotFoundError",
    "WalletAlreadyExistsError",
]
