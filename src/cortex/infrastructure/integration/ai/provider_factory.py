"""Build the completion fallback chain from settings."""

import logging
from typing import Optional

import httpx

from cortex.application.services.completion_chain import CompletionFallbackChain
from cortex.infrastructure.integration.ai.openai_compatible_provider import (
    OpenAICompatibleCompletionProvider,
)
from cortex_config.settings import Settings

logger = logging.getLogger(__name__)


def create_completion_providers(
    settings: Settings,
    client: Optional[httpx.AsyncClient] = None,
) -> list[OpenAICompatibleCompletionProvider]:
    """One provider per configured model, in fallback order.

    Returns an empty list when no API key is configured, which makes every
    consumer use its deterministic fallback.
    """
    if settings.ai_api_key is None or not settings.ai_api_key.get_secret_value():
        logger.info("No AI API key configured, using keyword-based analysis only")
        return []

    api_key = settings.ai_api_key.get_secret_value()
    providers = [
        OpenAICompatibleCompletionProvider(
            model=model,
            api_key=api_key,
            base_url=settings.ai_base_url,
            temperature=settings.ai_temperature,
            timeout=settings.ai_timeout,
            client=client,
        )
        for model in settings.ai_model_list
    ]
    logger.info(
        "Configured %d completion models: %s",
        len(providers),
        ", ".join(p.model_name for p in providers),
    )
    return providers


def create_completion_chain(
    settings: Settings,
    client: Optional[httpx.AsyncClient] = None,
) -> CompletionFallbackChain:
    return CompletionFallbackChain(
        create_completion_providers(settings, client),
        timeout=settings.ai_timeout,
    )
