"""Note schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from cortex.domain.notes.entities import Note
from cortex.domain.notes.value_objects import NoteType


class NoteCreateRequest(BaseModel):
    """Capture a thought, a link or a file reference.

    At least one of ``content``, ``source_url`` or ``file_name`` is required.
    """

    content: Optional[str] = Field(None, max_length=50_000, description="Free text")
    source_url: Optional[str] = Field(None, max_length=2048, description="Link to save")
    file_name: Optional[str] = Field(None, max_length=500, description="File name")
    file_type: Optional[str] = Field(None, max_length=100, description="MIME type")
    is_public: bool = Field(False, description="Show in the public brain")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "URGENT: fix the login bug before the deadline",
                "is_public": False,
            }
        }
    )


class NoteResponse(BaseModel):
    """A stored note."""

    id: UUID
    title: str
    content: str
    summary: Optional[str] = None
    type: NoteType
    tags: list[str]
    priority: int = Field(ge=1, le=100)
    is_public: bool
    source_url: Optional[str] = None
    file_name: Optional[str] = None
    file_type: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            summary=note.summary,
            type=note.type,
            tags=note.tags,
            priority=note.priority,
            is_public=note.is_public,
            source_url=note.source_url,
            file_name=note.file_name,
            file_type=note.file_type,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class NoteListResponse(BaseModel):
    """Response for listing notes."""

    notes: list[NoteResponse]
    count: int = Field(description="Number of notes")


class PublicNoteResponse(BaseModel):
    """The public projection of a note."""

    id: UUID
    title: str
    summary: Optional[str] = None
    type: NoteType
    tags: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, note: Note) -> "PublicNoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            summary=note.summary,
            type=note.type,
            tags=note.tags,
            created_at=note.created_at,
        )


class PublicBrainResponse(BaseModel):
    """Public feed of the most recent public notes."""

    brain: str
    count: int
    notes: list[PublicNoteResponse]
