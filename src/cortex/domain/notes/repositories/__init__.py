from cortex.domain.notes.repositories.note_repository import NoteRepository

__all__ = ["NoteRepository"]
