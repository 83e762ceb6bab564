"""User domain services and models."""

from .exceptions import UserAlreadyExistsError, UserNotFoundError
from .models import User, UserCreateInput
from .service import UserService

__all__ = [
    "User",
    "UserCreateInput",
    "UserService",
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
