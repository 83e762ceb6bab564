"""Mapping of domain errors onto HTTP responses.

Three handler layers: ``DomainError`` (business rules, mapped by kind),
``RequestValidationError`` (malformed bodies, 400 with field details) and a
catch-all that logs and hides internal details.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from digiwallet.modules.common.exceptions import DomainError, ErrorKind
from digiwallet.modules.transactions.models import TransactionRejection

logger = logging.getLogger(__name__)

KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INSUFFICIENT_FUNDS: 422,
}


def status_for(kind: ErrorKind) -> int:
    return KIND_STATUS[kind]


def rejection_to_http(rejection: TransactionRejection) -> HTTPException:
    return HTTPException(
        status_code=status_for(rejection.kind),
        detail=rejection.message,
        headers={"X-Error-Kind": rejection.kind.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.info(
            "%s on %s: %s",
            exc.kind.value,
            request.url.path,
            exc.message,
            extra={"error_kind": exc.kind.value, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status_for(exc.kind),
            content={"detail": exc.message},
            headers={"X-Error-Kind": exc.kind.value},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid request data",
                "errors": [
                    {
                        "field": ".".join(str(loc) for loc in error["loc"]),
                        "message": error["msg"],
                        "type": error["type"],
                    }
                    for error in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred"},
        )


__all__ = ["KIND_STATUS", "status_for", "rejection_to_http", "register_error_handlers"]
