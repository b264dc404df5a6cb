"""Request rate limiting."""

from cortex.infrastructure.rate_limiting.in_memory_rate_limiter import (
    InMemoryRateLimiter,
    RateLimitDecision,
    RateLimitPolicy,
    RateLimitPreset,
)

__all__ = [
    "InMemoryRateLimiter",
    "RateLimitDecision",
    "RateLimitPolicy",
    "RateLimitPreset",
]
