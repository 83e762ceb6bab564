"""Card lifecycle service."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from digiwallet.modules.common.exceptions import InvalidArgumentError
from digiwallet.modules.wallets.exceptions import WalletNotFoundError
from digiwallet.modules.wallets.repository import WalletRepository

from .exceptions import CardAlreadyExistsError, CardNotFoundError
from .models import UNSET, Card, CardCreateInput, CardUpdateInput
from .repository import CardRepository

logger = logging.getLogger(__name__)

CARD_NUMBER_PATTERN = re.compile(r"^\d{16}$")


def normalize_card_number(raw: str) -> str:
    """Strip spaces and dashes; the result must be exactly 16 digits."""
    number = re.sub(r"[\s-]", "", raw or "")
    if not CARD_NUMBER_PATTERN.match(number):
        raise InvalidArgumentError("Card number must be exactly 16 digits")
    return number


@dataclass(slots=True)
class CardService:
    repository: CardRepository
    wallets: WalletRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "CardService":
        from digiwallet.infrastructure.database.repositories.card_repository import SqlCardRepository
        from digiwallet.infrastructure.database.repositories.wallet_repository import SqlWalletRepository

        return cls(SqlCardRepository(session), SqlWalletRepository(session))

    async def create_card(self, payload: CardCreateInput) -> Card:
        if await self.wallets.get_by_id(payload.wallet_id) is None:
            raise WalletNotFoundError(payload.wallet_id)

        number = normalize_card_number(payload.card_number)
        if await self.repository.get_by_number(number) is not None:
            raise CardAlreadyExistsError(number)

        card = await self.repository.create_card(
            wallet_id=payload.wallet_id,
            card_number=number,
            card_type=payload.card_type,
            expiry_date=payload.expiry_date,
            status=payload.status,
        )
        logger.info("Issued card %s", card.masked_number, extra={"card_id": card.id, "wallet_id": card.wallet_id})
        return card

    async def get_card(self, card_id: int) -> Card:
        card = await self.repository.get_by_id(card_id)
        if card is None:
            raise CardNotFoundError(card_id)
        return card

    async def list_wallet_cards(self, wallet_id: int) -> Sequence[Card]:
        if await self.wallets.get_by_id(wallet_id) is None:
            raise WalletNotFoundError(wallet_id)
        return await self.repository.list_by_wallet(wallet_id)

    async def update_card(self, card_id: int, payload: CardUpdateInput) -> Card:
        current = await self.get_card(card_id)

        card_type = payload.card_type if payload.card_type not in (UNSET, None) else current.card_type
        expiry_date = payload.expiry_date if payload.expiry_date is not UNSET else current.expiry_date
        status = payload.status if payload.status not in (UNSET, None) else current.status

        updated = await self.repository.update_card(
            card_id,
            card_type=card_type,
            expiry_date=expiry_date,
            status=status,
        )
        if updated is None:
            raise CardNotFoundError(card_id)
        return updated

    async def delete_card(self, card_id: int) -> None:
        if not await self.repository.delete_card(card_id):
            raise CardNotFoundError(card_id)
        logger.info("Deleted card", extra={"card_id": card_id})
