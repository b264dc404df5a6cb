"""Completion provider port for the application layer.

Abstracts a chat-completion capable language model so the analyzer and the
query engine stay independent of HTTP clients and vendor payloads.
"""

from abc import ABC, abstractmethod


class CompletionError(Exception):
    """A completion request failed for a reason other than throttling."""


class CompletionRateLimitedError(CompletionError):
    """The backend rejected the request because of rate limiting (HTTP 429)."""


class CompletionProvider(ABC):
    """One language model reachable through a chat-completion API."""

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Identifier of the model this provider talks to."""

    @abstractmethod
    async def complete(
        self,
        system_instruction: str,
        user_prompt: str,
        *,
        max_tokens: int,
    ) -> str:
        """
        Request a single JSON-object completion.

        Parameters
        ----------
        system_instruction
            Instructions describing the expected JSON response
        user_prompt
            The content to work on
        max_tokens
            Upper bound on the generated tokens

        Returns
        -------
        Raw message text as returned by the model (may contain code fences)

        Raises
        ------
        CompletionRateLimitedError
            If the backend throttled the request
        CompletionError
            For any other transport or protocol failure
        """
