"""Note entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from cortex.domain.notes.value_objects import (
    DEFAULT_PRIORITY,
    AnalysisResult,
    NoteType,
    clamp_priority,
)
from cortex.domain.shared.time import utc_now


class Note:
    """
    A captured thought, link or file reference in the knowledge base.

    Notes are enriched at capture time with a title, summary, tags, type and
    priority. Ownership is optional: notes without a user_id belong to the
    single-user default scope.
    """

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        content: str,
        type: NoteType = NoteType.NOTE,
        tags: Optional[list[str]] = None,
        summary: Optional[str] = None,
        is_public: bool = False,
        priority: int = DEFAULT_PRIORITY,
        source_url: Optional[str] = None,
        file_name: Optional[str] = None,
        file_type: Optional[str] = None,
        user_id: Optional[UUID] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._title = title
        self._content = content
        self._type = type
        self._tags = list(tags or [])
        self._summary = summary
        self._is_public = is_public
        self._priority = clamp_priority(priority)
        self._source_url = source_url
        self._file_name = file_name
        self._file_type = file_type
        self._user_id = user_id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def from_analysis(  # NOQA: PLR0913
        cls,
        analysis: AnalysisResult,
        content: str,
        is_public: bool = False,
        source_url: Optional[str] = None,
        file_name: Optional[str] = None,
        file_type: Optional[str] = None,
        user_id: Optional[UUID] = None,
    ) -> "Note":
        return cls(
            title=analysis.title,
            content=content,
            type=analysis.type,
            tags=list(analysis.tags),
            summary=analysis.summary,
            is_public=is_public,
            priority=analysis.priority,
            source_url=source_url,
            file_name=file_name,
            file_type=file_type,
            user_id=user_id,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> str:
        return self._content

    @property
    def type(self) -> NoteType:
        return self._type

    @property
    def tags(self) -> list[str]:
        return list(self._tags)

    @property
    def summary(self) -> Optional[str]:
        return self._summary

    @property
    def is_public(self) -> bool:
        return self._is_public

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def source_url(self) -> Optional[str]:
        return self._source_url

    @property
    def file_name(self) -> Optional[str]:
        return self._file_name

    @property
    def file_type(self) -> Optional[str]:
        return self._file_type

    @property
    def user_id(self) -> Optional[UUID]:
        return self._user_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: Optional[UUID]) -> bool:
        """Notes are visible to everyone when no user scope is given."""
        return user_id is None or self._user_id == user_id

    def toggle_public(self) -> None:
        self._is_public = not self._is_public
        self._updated_at = utc_now()

    def matches(self, text: str) -> bool:
        """Case-insensitive substring match on title/content/summary, exact tag match."""
        needle = text.lower()
        haystacks = [self._title, self._content, self._summary or ""]
        if any(needle in value.lower() for value in haystacks):
            return True
        return text in self._tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Note(id={self._id}, title={self._title!r}, "
            f"type={self._type.value}, priority={self._priority})"
        )
