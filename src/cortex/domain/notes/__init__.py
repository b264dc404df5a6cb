"""Notes bounded context: captures, their analysis and knowledge queries."""

from cortex.domain.notes.entities import Note
from cortex.domain.notes.exceptions import (
    EmptyCaptureError,
    MissingQuestionError,
    NoteNotFoundError,
)
from cortex.domain.notes.repositories import NoteRepository
from cortex.domain.notes.services import KeywordPriorityScorer, KeywordScore
from cortex.domain.notes.value_objects import (
    AnalysisResult,
    ConfidenceLevel,
    ContentKind,
    NoteType,
    QueryResult,
    SourceReference,
)

__all__ = [
    "AnalysisResult",
    "ConfidenceLevel",
    "ContentKind",
    "EmptyCaptureError",
    "KeywordPriorityScorer",
    "KeywordScore",
    "MissingQuestionError",
    "Note",
    "NoteNotFoundError",
    "NoteRepository",
    "NoteType",
    "QueryResult",
    "SourceReference",
]
