"""Language model completion providers."""

from cortex.infrastructure.integration.ai.openai_compatible_provider import (
    DEFAULT_BASE_URL,
    OpenAICompatibleCompletionProvider,
)
from cortex.infrastructure.integration.ai.provider_factory import (
    create_completion_chain,
    create_completion_providers,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "OpenAICompatibleCompletionProvider",
    "create_completion_chain",
    "create_completion_providers",
]
