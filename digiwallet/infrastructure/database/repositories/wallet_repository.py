"""SQLAlchemy implementation for wallet lifecycle operations"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from digiwallet.db.models import Wallet as WalletModel
from digiwallet.modules.common.repository import AsyncRepository
from digiwallet.modules.common.types import EntityStatus
from digiwallet.modules.wallets.exceptions import WalletAlreadyExistsError
from digiwallet.modules.wallets.models import Wallet


class SqlWalletRepository(AsyncRepository[WalletModel]):
    async def get_by_id(self, wallet_id: int) -> Wallet | None:
        stmt = (
            select(WalletModel)
            .where(WalletModel.id == wallet_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return to_wallet(result.scalar_one_or_none())

    async def get_by_user_id(self, user_id: int) -> Wallet | None:
        stmt = (
            select(WalletModel)
            .where(WalletModel.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return to_wallet(result.scalar_one_or_none())

    async def list_wallets(self) -> Sequence[Wallet]:
        stmt = select(WalletModel).order_by(WalletModel.id)
        result = await self.session.execute(stmt)
        return [to_wallet(model) for model in result.scalars().all()]

    async def create_wallet(
        self,
        *,
        user_id: int,
        balance: Decimal,
        currency: str,
        status: EntityStatus,
    ) -> Wallet:
        model = WalletModel(user_id=user_id, balance=balance, currency=currency, status=status.value)
        try:
            await self.add(model)
        except IntegrityError as exc:
            # UNIQUE(user_id) lost a race with a concurrent create
            await self.session.rollback()
            raise WalletAlreadyExistsError(user_id) from exc
        return to_wallet(model)

    async def set_status(self, wallet_id: int, status: EntityStatus) -> Wallet | None:
        model = await self.session.get(WalletModel, wallet_id, populate_existing=True)
        if model is None:
            return None
        if model.status != status.value:
            model.status = status.value
            await self.session.flush()
            await self.session.refresh(model)
        return to_wallet(model)


def to_wallet(model: WalletModel | None) -> Wallet | None:
    if model is None:
        return None
    return Wallet(
        id=model.id,
        user_id=model.user_id,
        balance=Decimal(model.balance),
        currency=model.currency,
        status=EntityStatus(model.status),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
