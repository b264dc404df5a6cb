"""Application queries (read operations)."""

from cortex.application.queries.get_note_query import GetNoteQuery
from cortex.application.queries.list_notes_query import (
    ListNotesQuery,
    NoteSortOrder,
)
from cortex.application.queries.list_public_notes_query import ListPublicNotesQuery

__all__ = [
    "GetNoteQuery",
    "ListNotesQuery",
    "ListPublicNotesQuery",
    "NoteSortOrder",
]
