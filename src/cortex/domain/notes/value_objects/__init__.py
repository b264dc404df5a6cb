"""Notes domain value objects."""

from cortex.domain.notes.value_objects.analysis_result import (
    DEFAULT_PRIORITY,
    MAX_PRIORITY,
    MIN_PRIORITY,
    AnalysisResult,
    clamp_priority,
    normalize_terms,
)
from cortex.domain.notes.value_objects.note_type import (
    ConfidenceLevel,
    ContentKind,
    NoteType,
)
from cortex.domain.notes.value_objects.query_result import QueryResult, SourceReference

__all__ = [
    "DEFAULT_PRIORITY",
    "MAX_PRIORITY",
    "MIN_PRIORITY",
    "AnalysisResult",
    "ConfidenceLevel",
    "ContentKind",
    "NoteType",
    "QueryResult",
    "SourceReference",
    "clamp_priority",
    "normalize_terms",
]
