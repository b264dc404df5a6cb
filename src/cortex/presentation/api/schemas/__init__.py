"""API request/response schemas."""

from cortex.presentation.api.schemas.common import ErrorResponse, HealthResponse
from cortex.presentation.api.schemas.notes import (
    NoteCreateRequest,
    NoteListResponse,
    NoteResponse,
    PublicBrainResponse,
    PublicNoteResponse,
)
from cortex.presentation.api.schemas.query import (
    PublicQueryResponse,
    QueryRequest,
    QueryResponse,
    SourceResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "NoteCreateRequest",
    "NoteListResponse",
    "NoteResponse",
    "PublicBrainResponse",
    "PublicNoteResponse",
    "PublicQueryResponse",
    "QueryRequest",
    "QueryResponse",
    "SourceResponse",
]
