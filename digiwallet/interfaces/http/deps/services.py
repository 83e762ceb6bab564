"""Domain service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from digiwallet.core.container import ApplicationContainer
from digiwallet.modules.cards import CardService
from digiwallet.modules.transactions import TransactionService
from digiwallet.modules.users import UserService
from digiwallet.modules.wallets import WalletService

from .database import get_container, get_db_session


def get_user_service(db: AsyncSession = Depends(get_db_session)) -> UserService:
    return UserService.with_session(db)


def get_wallet_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> WalletService:
    return WalletService.with_session(db, default_currency=container.settings.default_currency)


def get_card_service(db: AsyncSession = Depends(get_db_session)) -> CardService:
    return CardService.with_session(db)


def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> TransactionService:
    return TransactionService.with_session(
        db,
        locks=container.wallet_locks,
        references=container.reference_ids,
    )


__all__ = [
    "get_user_service",
    "get_wallet_service",
    "get_card_service",
    "get_transaction_service",
]
