"""Repository protocol for cards."""

from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from digiwallet.modules.common.types import CardStatus, CardType

from .models import Card


class CardRepository(Protocol):
    async def get_by_id(self, card_id: int) -> Card | None:
        ...

    async def get_by_number(self, card_number: str) -> Card | None:
        ...

    async def list_by_wallet(self, wallet_id: int) -> Sequence[Card]:
        ...

    async def create_card(
        self,
        *,
        wallet_id: int,
        card_number: str,
        card_type: CardType,
        expiry_date: date | None,
        status: CardStatus,
    ) -> Card:
        ...

    async def update_card(
        self,
        card_id: int,
        *,
        card_type: CardType,
        expiry_date: date | None,
        status: CardStatus,
    ) -> Card | None:
        ...

    async def delete_card(self, card_id: int) -> bool:
        ...
