from cortex.domain.notes.entities.note import Note

__all__ = ["Note"]
