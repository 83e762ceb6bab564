"""SQLAlchemy implementation of the card repository."""

from __future__ import annotations

from datetime import date
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from digiwallet.db.models import Card as CardModel
from digiwallet.modules.cards.exceptions import CardAlreadyExistsError
from digiwallet.modules.cards.models import Card
from digiwallet.modules.common.repository import AsyncRepository
from digiwallet.modules.common.types import CardStatus, CardType


class SqlCardRepository(AsyncRepository[CardModel]):
    async def get_by_id(self, card_id: int) -> Card | None:
        model = await self.session.get(CardModel, card_id)
        return self._to_domain(model)

    async def get_by_number(self, card_number: str) -> Card | None:
        stmt = select(CardModel).where(CardModel.card_number == card_number)
        result = await self.session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def list_by_wallet(self, wallet_id: int) -> Sequence[Card]:
        stmt = select(CardModel).where(CardModel.wallet_id == wallet_id).order_by(CardModel.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_card(
        self,
        *,
        wallet_id: int,
        card_number: str,
        card_type: CardType,
        expiry_date: date | None,
        status: CardStatus,
    ) -> Card:
        model = CardModel(
            wallet_id=wallet_id,
            card_number=card_number,
            card_type=card_type.value,
            expiry_date=expiry_date,
            status=status.value,
        )
        try:
            await self.add(model)
        except IntegrityError as exc:
            await self.session.rollback()
            raise CardAlreadyExistsError(card_number) from exc
        return self._to_domain(model)

    async def update_card(
        self,
        card_id: int,
        *,
        card_type: CardType,
        expiry_date: date | None,
        status: CardStatus,
    ) -> Card | None:
        model = await self.session.get(CardModel, card_id)
        if model is None:
            return None
        model.card_type = card_type.value
        model.expiry_date = expiry_date
        model.status = status.value
        await self.session.flush()
        return self._to_domain(model)

    async def delete_card(self, card_id: int) -> bool:
        result = await self.session.execute(delete(CardModel).where(CardModel.id == card_id))
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: CardModel | None) -> Card | None:
        if model is None:
            return None
        return Card(
            id=model.id,
            wallet_id=model.wallet_id,
            card_number=model.card_number,
            card_type=CardType(model.card_type),
            status=CardStatus(model.status),
            expiry_date=model.expiry_date,
            issued_at=model.issued_at,
        )
