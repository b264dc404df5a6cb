"""Repository interface for notes."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from cortex.domain.notes.entities import Note


class NoteRepository(ABC):
    """Repository interface for persisting and retrieving notes."""

    @abstractmethod
    async def save(self, note: Note) -> None:
        """
        Save a note (insert or update).

        Parameters
        ----------
        note
            Note to save
        """

    @abstractmethod
    async def find_by_id(
        self,
        note_id: UUID,
        user_id: Optional[UUID] = None,
    ) -> Optional[Note]:
        """
        Find a note by ID.

        Parameters
        ----------
        note_id
            Note ID to search for
        user_id
            If given, only return the note when it belongs to this user

        Returns
        -------
        Note if found (and visible), None otherwise
        """

    @abstractmethod
    async def list_all(self, user_id: Optional[UUID] = None) -> List[Note]:
        """
        List notes, newest first.

        Parameters
        ----------
        user_id
            Restrict to notes owned by this user; None lists every note

        Returns
        -------
        List of notes (may be empty)
        """

    @abstractmethod
    async def list_public(self, limit: int = 10) -> List[Note]:
        """
        List the most recent public notes, newest first.

        Parameters
        ----------
        limit
            Maximum number of notes to return
        """

    @abstractmethod
    async def search(self, text: str, user_id: Optional[UUID] = None) -> List[Note]:
        """
        Search title, content and summary (case-insensitive) or exact tag.

        Returns
        -------
        Matching notes, newest first
        """

    @abstractmethod
    async def delete(self, note_id: UUID) -> bool:
        """
        Delete a note.

        Returns
        -------
        True if a note was deleted, False if it did not exist
        """
