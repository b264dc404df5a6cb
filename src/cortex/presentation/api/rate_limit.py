"""Per-route rate limiting as a FastAPI dependency.

Usage:
    @router.post("", dependencies=[Depends(RateLimit(RateLimitPreset.AI, "notes:create"))])

Allowed requests get ``X-RateLimit-*`` headers on the response; rejected
requests raise ``RateLimitExceededError``, which the exception handlers turn
into a 429 with ``Retry-After``.
"""

import math
from typing import Optional

from fastapi import Request, Response

from cortex.domain.shared.exceptions import RateLimitExceededError
from cortex.infrastructure.rate_limiting import InMemoryRateLimiter, RateLimitPreset

DEFAULT_CLIENT_ID = "127.0.0.1"


def get_client_ip(request: Request) -> str:
    """First X-Forwarded-For hop, then X-Real-IP, then the loopback address."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("x-real-ip")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    return DEFAULT_CLIENT_ID


def rate_limit_headers(
    remaining: int,
    reset_at: float,
    retry_after_seconds: Optional[int] = None,
) -> dict[str, str]:
    headers = {
        "X-RateLimit-Remaining": str(remaining),
        "X-RateLimit-Reset": str(math.ceil(reset_at)),
    }
    if retry_after_seconds is not None:
        headers["Retry-After"] = str(retry_after_seconds)
    return headers


class RateLimit:
    """Dependency enforcing one preset budget within one scope."""

    def __init__(self, preset: RateLimitPreset, scope: str):
        self.policy = preset.policy(scope)

    async def __call__(self, request: Request, response: Response) -> None:
        if not request.app.state.settings.rate_limit_enabled:
            return

        limiter: InMemoryRateLimiter = request.app.state.rate_limiter
        decision = limiter.check(get_client_ip(request), self.policy)

        if not decision.allowed:
            raise RateLimitExceededError(
                retry_after_seconds=decision.retry_after_seconds or 1,
                reset_at=decision.reset_at,
                scope=self.policy.scope,
            )

        response.headers.update(
            rate_limit_headers(decision.remaining, decision.reset_at),
        )
