"""Application services."""

from cortex.application.services.completion_chain import (
    CompletionFallbackChain,
    extract_json_object,
    is_rate_limit_error,
)
from cortex.application.services.content_analyzer import ContentAnalyzer
from cortex.application.services.knowledge_query_engine import KnowledgeQueryEngine

__all__ = [
    "CompletionFallbackChain",
    "ContentAnalyzer",
    "KnowledgeQueryEngine",
    "extract_json_object",
    "is_rate_limit_error",
]
