"""Pydantic schemas used across the HTTP surface.

JSON keys are camelCase (``walletId``, ``referenceId``); snake_case names are
accepted on input as well. Request bodies also accept the nested
``{"wallet": {"id": 1}}`` / ``{"user": {"id": 1}}`` shape sent by older
frontend builds.
"""
import calendar
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from digiwallet.modules.common.types import (
    CardStatus,
    CardType,
    EntityStatus,
    TransactionStatus,
    TransactionType,
    UserRole,
)

_MONTH_ONLY = re.compile(r"^(\d{4})-(\d{2})$")


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _lift_nested_id(data: Any, nested: str, target: str) -> Any:
    if isinstance(data, dict) and target not in data and to_camel(target) not in data:
        ref = data.get(nested)
        if isinstance(ref, dict) and "id" in ref:
            data = {**data, target: ref["id"]}
    return data


# --- users -------------------------------------------------------------------

class UserCreate(ApiModel):
    username: str = Field(..., min_length=3, max_length=50)
    full_name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=100, pattern=r"^[^@\s]+@[^@\s]+$")
    role: UserRole = UserRole.USER
    status: EntityStatus = EntityStatus.ACTIVE

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("username cannot be blank")
        return value


class UserResponse(ApiModel):
    id: int
    username: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    role: UserRole
    status: EntityStatus
    created_at: Optional[datetime] = None


# --- wallets -----------------------------------------------------------------

class WalletCreate(ApiModel):
    user_id: int
    balance: Decimal = Decimal("0")
    currency: Optional[str] = Field(None, min_length=3, max_length=3)

    @model_validator(mode="before")
    @classmethod
    def accept_nested_user(cls, data: Any) -> Any:
        return _lift_nested_id(data, "user", "user_id")


class WalletStatusUpdate(ApiModel):
    status: EntityStatus


class WalletResponse(ApiModel):
    id: int
    user_id: int
    balance: Decimal
    currency: str
    status: EntityStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --- cards -------------------------------------------------------------------

def _parse_expiry(value: Any) -> Any:
    # <input type="month"> sends YYYY-MM; cards expire at the end of that month
    if isinstance(value, str):
        match = _MONTH_ONLY.match(value.strip())
        if match:
            year, month = int(match.group(1)), int(match.group(2))
            if 1 <= month <= 12:
                return date(year, month, calendar.monthrange(year, month)[1])
    return value


class CardCreate(ApiModel):
    wallet_id: int
    card_number: str = Field(..., min_length=16, max_length=19)
    card_type: CardType
    expiry_date: Optional[date] = None
    status: CardStatus = CardStatus.ACTIVE

    @model_validator(mode="before")
    @classmethod
    def accept_nested_wallet(cls, data: Any) -> Any:
        return _lift_nested_id(data, "wallet", "wallet_id")

    @field_validator("expiry_date", mode="before")
    @classmethod
    def month_expiry(cls, value: Any) -> Any:
        return _parse_expiry(value)


class CardUpdate(ApiModel):
    card_type: Optional[CardType] = None
    expiry_date: Optional[date] = None
    status: Optional[CardStatus] = None

    @field_validator("expiry_date", mode="before")
    @classmethod
    def month_expiry(cls, value: Any) -> Any:
        return _parse_expiry(value)


class CardResponse(ApiModel):
    id: int
    wallet_id: int
    card_number: str
    card_type: CardType
    status: CardStatus
    expiry_date: Optional[date] = None
    issued_at: Optional[datetime] = None


# --- transactions ------------------------------------------------------------

class TransactionCreate(ApiModel):
    wallet_id: int
    # sign and scale are checked by the balance engine so that callers get a
    # specific rejection instead of a generic validation error
    amount: Decimal
    type: TransactionType
    category: Optional[str] = Field(None, max_length=100)
    reference_id: Optional[str] = Field(None, max_length=100)

    @model_validator(mode="before")
    @classmethod
    def accept_nested_wallet(cls, data: Any) -> Any:
        return _lift_nested_id(data, "wallet", "wallet_id")


class TransactionResponse(ApiModel):
    id: int
    wallet_id: int
    amount: Decimal
    type: TransactionType
    category: Optional[str] = None
    status: TransactionStatus
    reference_id: Optional[str] = None
    transaction_date: datetime


# --- misc --------------------------------------------------------------------

class ErrorResponse(BaseModel):
    detail: str
