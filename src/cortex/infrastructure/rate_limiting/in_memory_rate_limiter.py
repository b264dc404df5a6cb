"""Fixed-window, per-client request limiting held in process memory.

Each (scope, client) pair owns one counter that resets when its window
expires. State is lost on restart and is not shared between processes.
"""

import asyncio
import logging
import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL_SECONDS = 300.0


@dataclass(frozen=True)
class RateLimitPolicy:
    """How many requests a client may make per window within one scope."""

    max_requests: int
    window_seconds: float
    scope: str = "default"

    def __post_init__(self) -> None:
        if self.max_requests < 1:
            msg = f"max_requests must be positive, got {self.max_requests}"
            raise ValueError(msg)
        if self.window_seconds <= 0:
            msg = f"window_seconds must be positive, got {self.window_seconds}"
            raise ValueError(msg)

    def for_scope(self, scope: str) -> "RateLimitPolicy":
        return RateLimitPolicy(self.max_requests, self.window_seconds, scope)


class RateLimitPreset(Enum):
    """Named request budgets (per client, per minute).

    The default scope names keep member values distinct so no preset aliases
    another.
    """

    STANDARD = RateLimitPolicy(60, 60.0, "standard")
    AI = RateLimitPolicy(10, 60.0, "ai")
    PUBLIC = RateLimitPolicy(30, 60.0, "public")
    CREATE = RateLimitPolicy(20, 60.0, "create")
    QUERY = RateLimitPolicy(30, 60.0, "query")

    def policy(self, scope: str) -> RateLimitPolicy:
        return self.value.for_scope(scope)


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a single rate-limit check."""

    allowed: bool
    remaining: int
    reset_at: float
    retry_after_seconds: Optional[int] = None


@dataclass
class _Window:
    count: int
    reset_at: float


class InMemoryRateLimiter:
    """
    Thread-safe fixed-window limiter with an injectable clock.

    Rejected requests do not consume budget. Expired windows are replaced
    lazily on the next check; ``sweep`` only reclaims memory.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        sweep_interval: float = DEFAULT_SWEEP_INTERVAL_SECONDS,
    ):
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()
        self._sweeper: Optional[asyncio.Task] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)

    def check(self, client_id: str, policy: RateLimitPolicy) -> RateLimitDecision:
        key = f"{policy.scope}:{client_id}"

        with self._lock:
            now = self._clock()
            window = self._windows.get(key)

            if window is None or window.reset_at <= now:
                window = _Window(count=1, reset_at=now + policy.window_seconds)
                self._windows[key] = window
                return RateLimitDecision(
                    allowed=True,
                    remaining=policy.max_requests - 1,
                    reset_at=window.reset_at,
                )

            if window.count >= policy.max_requests:
                retry_after = max(1, math.ceil(window.reset_at - now))
                logger.warning(
                    "Rate limit exceeded for %s (retry in %ds)",
                    key,
                    retry_after,
                )
                return RateLimitDecision(
                    allowed=False,
                    remaining=0,
                    reset_at=window.reset_at,
                    retry_after_seconds=retry_after,
                )

            window.count += 1
            return RateLimitDecision(
                allowed=True,
                remaining=max(0, policy.max_requests - window.count),
                reset_at=window.reset_at,
            )

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def sweep(self) -> int:
        """Drop expired windows. Returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [key for key, w in self._windows.items() if w.reset_at <= now]
            for key in expired:
                del self._windows[key]

        if expired:
            logger.debug("Swept %d expired rate-limit windows", len(expired))
        return len(expired)

    async def run_sweeper(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval)
            self.sweep()

    def start(self) -> None:
        if self._sweeper is None or self._sweeper.done():
            self._sweeper = asyncio.create_task(self.run_sweeper())

    async def stop(self) -> None:
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None
