"""Error taxonomy shared by all domain modules."""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_STATE = "INVALID_STATE"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


class DomainError(Exception):
    """Base class for domain errors surfaced to API callers."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(DomainError):
    """Raised when a create would violate a uniqueness rule."""

    kind = ErrorKind.ALREADY_EXISTS


class InvalidArgumentError(DomainError):
    """Raised for malformed or out-of-range input."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidStateError(DomainError):
    """Raised when the entity status does not permit the operation."""

    kind = ErrorKind.INVALID_STATE


__all__ = [
    "ErrorKind",
    "DomainError",
    "NotFoundError",
    "AlreadyExistsError",
    "InvalidArgumentError",
    "InvalidStateError",
]
