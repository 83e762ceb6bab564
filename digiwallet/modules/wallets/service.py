"""Wallet lifecycle service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from digiwallet.modules.common.exceptions import InvalidArgumentError
from digiwallet.modules.common.money import to_money
from digiwallet.modules.common.types import EntityStatus
from digiwallet.modules.users.exceptions import UserNotFoundError
from digiwallet.modules.users.repository import UserRepository

from .exceptions import UserWalletNotFoundError, WalletAlreadyExistsError, WalletNotFoundError
from .models import Wallet
from .repository import WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository
    users: UserRepository
    default_currency: str = "INR"

    @classmethod
    def with_session(cls, session: AsyncSession, *, default_currency: str = "INR") -> "WalletService":
        from digiwallet.infrastructure.database.repositories.user_repository import SqlUserRepository
        from digiwallet.infrastructure.database.repositories.wallet_repository import SqlWalletRepository

        return cls(SqlWalletRepository(session), SqlUserRepository(session), default_currency)

    async def create_wallet(
        self,
        *,
        user_id: int,
        initial_balance: Decimal | int | str = Decimal("0"),
        currency: Optional[str] = None,
    ) -> Wallet:
        if await self.users.get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)
        if await self.repository.get_by_user_id(user_id) is not None:
            raise WalletAlreadyExistsError(user_id)

        balance = to_money(initial_balance)
        if balance is None:
            raise InvalidArgumentError(f"Initial balance is not a valid amount: {initial_balance}")
        if balance < 0:
            raise InvalidArgumentError(f"Initial balance must not be negative: {balance}")

        code = (currency or self.default_currency).strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise InvalidArgumentError(f"Currency must be a three-letter code: {currency}")

        wallet = await self.repository.create_wallet(
            user_id=user_id,
            balance=balance,
            currency=code,
            status=EntityStatus.ACTIVE,
        )
        logger.info("Created wallet for user %s", user_id, extra={"wallet_id": wallet.id, "user_id": user_id})
        return wallet

    async def get_wallet(self, wallet_id: int) -> Wallet:
        wallet = await self.repository.get_by_id(wallet_id)
        if wallet is None:
            raise WalletNotFoundError(wallet_id)
        return wallet

    async def get_wallet_for_user(self, user_id: int) -> Wallet:
        wallet = await self.repository.get_by_user_id(user_id)
        if wallet is None:
            raise UserWalletNotFoundError(user_id)
        return wallet

    async def find_wallet_for_user(self, user_id: int) -> Optional[Wallet]:
        return await self.repository.get_by_user_id(user_id)

    async def list_wallets(self) -> Sequence[Wallet]:
        return await self.repository.list_wallets()

    async def update_status(self, wallet_id: int, status: EntityStatus) -> Wallet:
        wallet = await self.repository.set_status(wallet_id, status)
        if wallet is None:
            raise WalletNotFoundError(wallet_id)
        return wallet
