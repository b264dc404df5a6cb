"""Application layer ports (aka interfaces)."""

from cortex.application.ports.completion import (
    CompletionError,
    CompletionProvider,
    CompletionRateLimitedError,
)

__all__ = [
    "CompletionError",
    "CompletionProvider",
    "CompletionRateLimitedError",
]
