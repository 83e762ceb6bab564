"""SQLAlchemy implementation backing the wallet balance engine"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Sequence

from sqlalchemy import desc, exists, select, update

from digiwallet.db.models import Category, Transaction, Wallet as WalletModel
from digiwallet.infrastructure.database.repositories.wallet_repository import to_wallet
from digiwallet.modules.common.repository import AsyncRepository
from digiwallet.modules.common.types import TransactionStatus, TransactionType
from digiwallet.modules.transactions.models import TransactionRecord
from digiwallet.modules.wallets.models import Wallet


class SqlTransactionRepository(AsyncRepository[Transaction]):
    async def lock_wallet(self, wallet_id: int) -> Wallet | None:
        stmt = (
            select(WalletModel)
            .where(WalletModel.id == wallet_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return to_wallet(result.scalar_one_or_none())

    async def set_wallet_balance(self, wallet_id: int, balance: Decimal) -> None:
        stmt = (
            update(WalletModel)
            .where(WalletModel.id == wallet_id)
            .values(balance=balance, updated_at=datetime.now(timezone.utc))
        )
        await self.session.execute(stmt)

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
        category_id = await self._resolve_category(category) if category else None
        tx = Transaction(
            wallet_id=wallet_id,
            category_id=category_id,
            amount=amount,
            type=type.value,
            status=status.value,
            reference_id=reference_id,
            transaction_date=transaction_date,
        )
        await self.add(tx)
        return self._to_record(tx, category)

    async def get_transaction(self, transaction_id: int) -> TransactionRecord | None:
        stmt = (
            select(Transaction, Category.name)
            .outerjoin(Category, Transaction.category_id == Category.id)
            .where(Transaction.id == transaction_id)
        )
        row = (await self.session.execute(stmt)).first()
        if row is None:
            return None
        return self._to_record(row[0], row[1])

    async def wallet_exists(self, wallet_id: int) -> bool:
        stmt = select(exists().where(WalletModel.id == wallet_id))
        return bool((await self.session.execute(stmt)).scalar())

    async def list_by_wallet(self, wallet_id: int, limit: int, offset: int) -> Sequence[TransactionRecord]:
        stmt = (
            select(Transaction, Category.name)
            .outerjoin(Category, Transaction.category_id == Category.id)
            .where(Transaction.wallet_id == wallet_id)
            .order_by(desc(Transaction.transaction_date), desc(Transaction.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_record(tx, name) for tx, name in result.all()]

    async def _resolve_category(self, name: str) -> int:
        stmt = select(Category.id).where(Category.name == name)
        category_id = (await self.session.execute(stmt)).scalar_one_or_none()
        if category_id is not None:
            return category_id
        category = await self.add(Category(name=name))
        return category.id

    @staticmethod
    def _to_record(model: Transaction, category: str | None) -> TransactionRecord:
        return TransactionRecord(
            id=model.id,
            wallet_id=model.wallet_id,
            amount=Decimal(model.amount),
            type=TransactionType(model.type),
            status=TransactionStatus(model.status),
            reference_id=model.reference_id,
            transaction_date=model.transaction_date,
            category=category,
        )
