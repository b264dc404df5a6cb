"""Completion provider for OpenAI-compatible chat-completion APIs.

Works with any backend exposing ``POST {base_url}/chat/completions`` with
JSON-mode support. The default base URL points at Groq, which serves the
default models:

- llama-3.3-70b-versatile  - Best quality, primary model
- llama-3.1-8b-instant     - Fast, separate rate-limit bucket
- mixtral-8x7b-32768       - Last resort
"""

import logging
from typing import Optional

import httpx

from cortex.application.ports.completion import (
    CompletionError,
    CompletionProvider,
    CompletionRateLimitedError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"


class OpenAICompatibleCompletionProvider(CompletionProvider):
    """
    One model behind an OpenAI-compatible endpoint.

    Several providers may share a single ``httpx.AsyncClient``; a provider
    only closes a client it created itself.
    """

    def __init__(  # NOQA: PLR0913
        self,
        model: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        temperature: float = 0.3,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._model = model
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._temperature = temperature
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def model_name(self) -> str:
        return self._model

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(connect=5.0, read=self._timeout, write=10.0, pool=5.0),
            )
        return self._client

    async def close(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def complete(
        self,
        system_instruction: str,
        user_prompt: str,
        *,
        max_tokens: int,
    ) -> str:
        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_instruction},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self._temperature,
            "max_tokens": max_tokens,
            "response_format": {"type": "json_object"},
        }

        try:
            response = await self._get_client().post(
                f"{self._base_url}/chat/completions",
                json=payload,
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
        except httpx.TimeoutException as e:
            msg = f"Request to {self._model} timed out after {self._timeout:.1f}s"
            raise CompletionError(msg) from e
        except httpx.HTTPError as e:
            msg = f"Could not reach {self._base_url}: {e}"
            raise CompletionError(msg) from e

        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            msg = f"Model {self._model} is rate limited (429)"
            raise CompletionRateLimitedError(msg)
        if response.is_error:
            msg = (
                f"Model {self._model} returned error {response.status_code}: "
                f"{response.text[:200] if response.text else 'no body'}"
            )
            raise CompletionError(msg)

        return self._extract_content(response)

    def _extract_content(self, response: httpx.Response) -> str:
        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            msg = f"Unexpected response shape from {self._model}"
            raise CompletionError(msg) from e

        if not isinstance(content, str) or not content:
            msg = f"Empty completion from {self._model}"
            raise CompletionError(msg)
        return content
