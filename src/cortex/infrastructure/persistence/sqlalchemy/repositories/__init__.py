"""SQLAlchemy repository implementations."""

from cortex.infrastructure.persistence.sqlalchemy.repositories.note_repository import (
    NoteRepositorySQLAlchemy,
)

__all__ = ["NoteRepositorySQLAlchemy"]
