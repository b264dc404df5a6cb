"""Translate exceptions into JSON error responses.

Every error body has the same shape::

    {"detail": "<message for humans>", "code": "<ErrorCode value>"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from cortex.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RateLimitExceededError,
)
from cortex.presentation.api.rate_limit import rate_limit_headers

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_CONTENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_QUESTION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NOTE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.RATE_LIMIT_EXCEEDED: status.HTTP_429_TOO_MANY_REQUESTS,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception; unmapped codes fall back by type."""
    mapped = ERROR_CODE_TO_STATUS.get(exc.code)
    if mapped is not None:
        return mapped
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


def error_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code.value},
        headers=headers,
    )


async def _handle_rate_limit(request: Request, exc: RateLimitExceededError) -> JSONResponse:
    logger.info(
        "Rejected %s %s: %s budget used up, retry in %ds",
        request.method,
        request.url.path,
        exc.scope,
        exc.retry_after_seconds,
    )
    headers = rate_limit_headers(
        remaining=0,
        reset_at=exc.reset_at,
        retry_after_seconds=exc.retry_after_seconds,
    )
    return error_response(
        status.HTTP_429_TOO_MANY_REQUESTS,
        exc.code,
        exc.message,
        headers=headers,
    )


async def _handle_domain_error(request: Request, exc: DomainException) -> JSONResponse:
    # Details go to the log only
    logger.warning(
        "%s %s failed with %s: %s %s",
        request.method,
        request.url.path,
        exc.code.value,
        exc.message,
        exc.details or "",
    )
    return error_response(status_for(exc), exc.code, exc.message)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_ERROR,
        "An internal error occurred",
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the handlers; Starlette picks the most specific class."""
    app.add_exception_handler(RateLimitExceededError, _handle_rate_limit)
    app.add_exception_handler(DomainException, _handle_domain_error)
    app.add_exception_handler(Exception, _handle_unexpected)
