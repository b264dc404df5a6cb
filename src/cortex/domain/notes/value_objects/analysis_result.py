"""Analysis result value object."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from cortex.domain.notes.value_objects.note_type import NoteType

MIN_PRIORITY = 1
MAX_PRIORITY = 100
DEFAULT_PRIORITY = 50
MAX_TERMS = 5


def clamp_priority(value: float) -> int:
    """Round and clamp a priority into the valid [1, 100] range."""
    return int(min(MAX_PRIORITY, max(MIN_PRIORITY, round(value))))


def normalize_terms(values: Iterable[Any], limit: int = MAX_TERMS) -> tuple[str, ...]:
    """Lowercase, strip and de-duplicate tag-like strings, keeping first-seen order.

    Non-string and blank entries are dropped.
    """
    seen: list[str] = []
    for value in values:
        if not isinstance(value, str):
            continue
        term = value.strip().lower()
        if term and term not in seen:
            seen.append(term)
        if len(seen) >= limit:
            break
    return tuple(seen)


@dataclass(frozen=True)
class AnalysisResult:
    """Structured analysis of a single capture.

    Produced either by a language model or by the keyword fallback. Use
    ``create`` to build one from loosely-typed input; the constructor itself
    only validates.
    """

    title: str
    summary: str
    tags: tuple[str, ...]
    keywords: tuple[str, ...]
    type: NoteType
    priority: int

    def __post_init__(self) -> None:
        if not MIN_PRIORITY <= self.priority <= MAX_PRIORITY:
            msg = f"Priority must be between 1 and 100, got {self.priority}"
            raise ValueError(msg)
        if len(self.tags) > MAX_TERMS or len(set(self.tags)) != len(self.tags):
            msg = f"Tags must be unique and at most {MAX_TERMS}, got {self.tags}"
            raise ValueError(msg)
        if len(self.keywords) > MAX_TERMS or len(set(self.keywords)) != len(
            self.keywords
        ):
            msg = f"Keywords must be unique and at most {MAX_TERMS}, got {self.keywords}"
            raise ValueError(msg)

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        title: str,
        summary: str,
        tags: Iterable[Any],
        keywords: Iterable[Any],
        type: NoteType,
        priority: float,
    ) -> "AnalysisResult":
        return cls(
            title=title,
            summary=summary,
            tags=normalize_terms(tags),
            keywords=normalize_terms(keywords),
            type=type,
            priority=clamp_priority(priority),
        )
