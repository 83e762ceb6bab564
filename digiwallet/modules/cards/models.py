"""Domain models for cards."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from digiwallet.modules.common.types import CardStatus, CardType


@dataclass(slots=True)
class Card:
    id: int
    wallet_id: int
    card_number: str
    card_type: CardType
    status: CardStatus
    expiry_date: Optional[date] = None
    issued_at: Optional[datetime] = None

    @property
    def masked_number(self) -> str:
        return "**** **** **** " + self.card_number[-4:]


@dataclass(slots=True)
class CardCreateInput:
    wallet_id: int
    card_number: str
    card_type: CardType
    expiry_date: Optional[date] = None
    status: CardStatus = CardStatus.ACTIVE


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class CardUpdateInput:
    card_type: Optional[CardType] | object = UNSET
    expiry_date: Optional[date] | object = UNSET
    status: Optional[CardStatus] | object = UNSET
