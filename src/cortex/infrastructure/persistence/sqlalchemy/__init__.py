"""SQLAlchemy persistence adapters."""

from cortex.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    ensure_sqlite_directory,
)
from cortex.infrastructure.persistence.sqlalchemy.models import Base, NoteModel
from cortex.infrastructure.persistence.sqlalchemy.repositories import (
    NoteRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "NoteModel",
    "NoteRepositorySQLAlchemy",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "ensure_sqlite_directory",
]
