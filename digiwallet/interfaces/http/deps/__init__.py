"""Reusable FastAPI dependencies."""

from .database import get_container, get_db_session
from .services import (
    get_card_service,
    get_transaction_service,
    get_user_service,
    get_wallet_service,
)

__all__ = [
    "get_container",
    "get_db_session",
    "get_card_service",
    "get_transaction_service",
    "get_user_service",
    "get_wallet_service",
]
