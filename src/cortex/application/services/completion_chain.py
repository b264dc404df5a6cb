"""Ordered fallback over completion providers.

Providers are tried strictly one after another. A throttled provider is
skipped with a warning; any other failure (transport error, timeout,
unparseable or unusable JSON) is logged as an error before moving on. The
first provider whose response parses successfully wins.
"""

import asyncio
import json
import logging
import re
from collections.abc import Callable, Sequence
from typing import Any, Optional, TypeVar

from cortex.application.ports.completion import (
    CompletionProvider,
    CompletionRateLimitedError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CODE_FENCE_PATTERN = re.compile(r"^\s*```(?:json)?\s*|\s*```\s*$", re.IGNORECASE)
_RATE_LIMIT_MARKERS = ("429", "rate", "limit")


def extract_json_object(text: str) -> dict[str, Any]:
    """Parse a model response into a JSON object.

    Markdown code fences around the payload are stripped first.

    Raises
    ------
    ValueError
        If the text is not valid JSON or the top-level value is not an object
    """
    cleaned = _CODE_FENCE_PATTERN.sub("", text).strip()
    data = json.loads(cleaned)
    if not isinstance(data, dict):
        msg = f"Expected a JSON object, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def is_rate_limit_error(error: BaseException) -> bool:
    if isinstance(error, CompletionRateLimitedError):
        return True
    message = str(error).lower()
    return any(marker in message for marker in _RATE_LIMIT_MARKERS)


class CompletionFallbackChain:
    """Runs one structured completion against an ordered list of providers."""

    def __init__(
        self,
        providers: Sequence[CompletionProvider],
        timeout: float = 30.0,
    ):
        self._providers = list(providers)
        self._timeout = timeout

    @property
    def providers(self) -> list[CompletionProvider]:
        return list(self._providers)

    @property
    def is_configured(self) -> bool:
        return bool(self._providers)

    @property
    def model_names(self) -> list[str]:
        return [provider.model_name for provider in self._providers]

    async def run(
        self,
        system_instruction: str,
        user_prompt: str,
        parse: Callable[[dict[str, Any]], T],
        *,
        max_tokens: int,
        purpose: str = "completion",
    ) -> Optional[T]:
        """Return the first successfully parsed response, or None if all fail."""
        for provider in self._providers:
            try:
                raw = await asyncio.wait_for(
                    provider.complete(
                        system_instruction,
                        user_prompt,
                        max_tokens=max_tokens,
                    ),
                    timeout=self._timeout,
                )
                logger.debug("%s response from %s: %s", purpose, provider.model_name, raw)
                result = parse(extract_json_object(raw))
            except Exception as e:
                self._log_failure(provider, e, purpose)
                continue

            logger.info("%s succeeded with %s", purpose, provider.model_name)
            return result

        if self._providers:
            logger.warning("All %d providers failed for %s", len(self._providers), purpose)
        return None

    def _log_failure(
        self,
        provider: CompletionProvider,
        error: Exception,
        purpose: str,
    ) -> None:
        if isinstance(error, asyncio.TimeoutError):
            logger.error(
                "%s with %s timed out after %.1fs",
                purpose,
                provider.model_name,
                self._timeout,
            )
        elif is_rate_limit_error(error):
            logger.warning(
                "Rate limited on %s, trying next model",
                provider.model_name,
            )
        else:
            logger.error(
                "%s with %s failed: %s (type: %s)",
                purpose,
                provider.model_name,
                str(error) or repr(error),
                type(error).__name__,
            )
