"""Knowledge query result value objects."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from cortex.domain.notes.value_objects.note_type import ConfidenceLevel


@dataclass(frozen=True)
class SourceReference:
    """A note cited by a query answer."""

    id: UUID
    title: str
    summary: Optional[str] = None


@dataclass(frozen=True)
class QueryResult:
    """Answer to a natural-language question, with the notes it relied on."""

    answer: str
    confidence: ConfidenceLevel
    sources: tuple[SourceReference, ...] = field(default_factory=tuple)

    @property
    def source_ids(self) -> set[UUID]:
        return {source.id for source in self.sources}
