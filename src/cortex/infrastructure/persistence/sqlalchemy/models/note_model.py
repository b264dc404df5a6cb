"""SQLAlchemy model for the Note entity."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import JSON, Boolean, Index, Integer, String, Text, Uuid
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from cortex.domain.notes.value_objects import DEFAULT_PRIORITY, NoteType
from cortex.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class NoteModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting notes.

    Tags are stored as a JSON array; tag matching happens in the repository.
    """

    __tablename__ = "notes"

    __table_args__ = (
        Index("ix_notes_user_id", "user_id"),
        Index("ix_notes_public_created", "is_public", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True)

    # Optional ownership; NULL means the default single-user scope
    user_id: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)

    title: Mapped[str] = mapped_column(String(500))
    content: Mapped[str] = mapped_column(Text)
    summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    type: Mapped[NoteType] = mapped_column(SQLEnum(NoteType), default=NoteType.NOTE)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list)
    priority: Mapped[int] = mapped_column(Integer, default=DEFAULT_PRIORITY, index=True)
    is_public: Mapped[bool] = mapped_column(Boolean, default=False)

    # Link / file captures
    source_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    file_name: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    file_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<NoteModel(id={self.id}, title={self.title!r}, type={self.type})>"
