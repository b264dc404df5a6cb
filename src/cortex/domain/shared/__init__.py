"""Shared domain building blocks."""

from cortex.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RateLimitExceededError,
    ValidationError,
)
from cortex.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "RateLimitExceededError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
