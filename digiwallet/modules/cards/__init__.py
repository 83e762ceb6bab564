"""Card domain services and models."""

from .exceptions import CardAlreadyExistsError, CardNotFoundError
from .models import UNSET, Card, CardCreateInput, CardUpdateInput
from .service import CardService

__all__ = [
    "Card",
    "CardCreateInput",
    "CardUpdateInput",
    "CardService",
    "CardAlreadyExistsError",
    "CardNotFoundError",
    "UNSET",
]
