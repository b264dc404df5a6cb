"""SQLAlchemy models."""

from cortex.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin
from cortex.infrastructure.persistence.sqlalchemy.models.note_model import NoteModel

__all__ = ["Base", "NoteModel", "TimestampMixin"]
