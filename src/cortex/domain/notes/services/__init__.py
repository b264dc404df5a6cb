"""Notes domain services."""

from cortex.domain.notes.services.keyword_priority_scorer import (
    PRIORITY_CATEGORIES,
    TOPIC_TAGS,
    KeywordCategory,
    KeywordPriorityScorer,
    KeywordScore,
)

__all__ = [
    "PRIORITY_CATEGORIES",
    "TOPIC_TAGS",
    "KeywordCategory",
    "KeywordPriorityScorer",
    "KeywordScore",
]
