"""Exception hierarchy shared by every Cortex layer.

Each exception carries an ``ErrorCode``; the API turns codes into HTTP
statuses in one place (``presentation.api.exception_handlers``), so raising
code never needs to know about HTTP.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Machine-readable codes returned in every error body.

    Clients branch on these values; renaming one is a breaking change.
    """

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_CONTENT = "MISSING_CONTENT"
    MISSING_QUESTION = "MISSING_QUESTION"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    NOTE_NOT_FOUND = "NOTE_NOT_FOUND"

    # 429
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """
    Base class for errors the API reports to clients.

    Parameters
    ----------
    message
        Text shown to the client
    code
        Defaults to the subclass's ``default_code``
    details
        Extra context for logs only
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value}: {self.message!r})"


class ValidationError(DomainException):
    """Input that can never succeed as given."""

    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class RateLimitExceededError(DomainException):
    """A client used up its request budget for a scope.

    ``retry_after_seconds`` and ``reset_at`` feed the ``Retry-After`` and
    ``X-RateLimit-*`` response headers.
    """

    default_code = ErrorCode.RATE_LIMIT_EXCEEDED

    def __init__(self, retry_after_seconds: int, reset_at: float, scope: str) -> None:
        super().__init__(
            f"Rate limit exceeded. Try again in {retry_after_seconds} seconds.",
            details={"scope": scope},
        )
        self.retry_after_seconds = retry_after_seconds
        self.reset_at = reset_at
        self.scope = scope
