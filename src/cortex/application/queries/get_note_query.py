"""Fetch a single note."""

from typing import Optional
from uuid import UUID

from cortex.domain.notes.entities import Note
from cortex.domain.notes.exceptions import NoteNotFoundError
from cortex.domain.notes.repositories import NoteRepository


class GetNoteQuery:
    def __init__(self, note_repository: NoteRepository):
        self._note_repo = note_repository

    async def execute(self, note_id: UUID, user_id: Optional[UUID] = None) -> Note:
        note = await self._note_repo.find_by_id(note_id, user_id=user_id)
        if not note:
            raise NoteNotFoundError(note_id)
        return note
