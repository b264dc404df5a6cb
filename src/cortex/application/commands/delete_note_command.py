"""Delete a note."""

from typing import Optional
from uuid import UUID

from cortex.domain.notes.exceptions import NoteNotFoundError
from cortex.domain.notes.repositories import NoteRepository


class DeleteNoteCommand:
    """Delete a note, raising if it does not exist for the caller."""

    def __init__(self, note_repository: NoteRepository):
        self._note_repo = note_repository

    async def execute(self, note_id: UUID, user_id: Optional[UUID] = None) -> None:
        note = await self._note_repo.find_by_id(note_id, user_id=user_id)
        if not note:
            raise NoteNotFoundError(note_id)

        await self._note_repo.delete(note_id)
