"""Public brain feed: the most recent notes marked public."""

from typing import List

from cortex.domain.notes.entities import Note
from cortex.domain.notes.repositories import NoteRepository


class ListPublicNotesQuery:
    def __init__(self, note_repository: NoteRepository, limit: int = 10):
        self._note_repo = note_repository
        self._limit = limit

    async def execute(self) -> List[Note]:
        return await self._note_repo.list_public(limit=self._limit)
