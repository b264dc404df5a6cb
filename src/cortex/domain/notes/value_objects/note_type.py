"""Note classification enumerations."""

from enum import Enum
from typing import Any, Optional


class NoteType(str, Enum):
    """Closed set of note types a capture can be classified as."""

    NOTE = "NOTE"  # General thoughts, reflections
    LINK = "LINK"  # URLs and external resources
    INSIGHT = "INSIGHT"  # Realizations, aha-moments
    FILE = "FILE"  # File attachments

    @classmethod
    def parse(cls, value: Any, default: Optional["NoteType"] = None) -> "NoteType":
        """Parse an untrusted value case-insensitively, falling back to default."""
        fallback = default or cls.NOTE
        if not isinstance(value, str):
            return fallback
        try:
            return cls(value.strip().upper())
        except ValueError:
            return fallback


class ContentKind(str, Enum):
    """What the caller says it is submitting."""

    TEXT = "text"
    LINK = "link"
    FILE = "file"


class ConfidenceLevel(str, Enum):
    """Coarse self-assessment returned alongside a query answer."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, value: Any) -> "ConfidenceLevel":
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.MEDIUM
