"""List notes with optional search, type filter and sorting."""

from enum import Enum
from typing import List, Optional
from uuid import UUID

from cortex.domain.notes.entities import Note
from cortex.domain.notes.repositories import NoteRepository

ALL_TYPES = "ALL"


class NoteSortOrder(str, Enum):
    NEWEST = "newest"
    PRIORITY = "priority"


class ListNotesQuery:
    """Read-only listing of notes.

    - ``search`` matches title/content/summary (case-insensitive) or an exact tag
    - ``note_type`` is compared case-insensitively; ``ALL`` disables the filter
    - ``sort=priority`` orders by priority (highest first), otherwise newest first
    """

    def __init__(self, note_repository: NoteRepository):
        self._note_repo = note_repository

    async def execute(
        self,
        search: Optional[str] = None,
        note_type: Optional[str] = None,
        sort: NoteSortOrder = NoteSortOrder.NEWEST,
        user_id: Optional[UUID] = None,
    ) -> List[Note]:
        search = (search or "").strip()
        if search:
            notes = await self._note_repo.search(search, user_id=user_id)
        else:
            notes = await self._note_repo.list_all(user_id=user_id)

        if note_type and note_type.strip().upper() != ALL_TYPES:
            wanted = note_type.strip().upper()
            notes = [note for note in notes if note.type.value == wanted]

        if sort == NoteSortOrder.PRIORITY:
            notes = sorted(notes, key=lambda note: note.priority, reverse=True)

        return notes
