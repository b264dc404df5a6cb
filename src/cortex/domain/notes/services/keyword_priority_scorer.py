"""Deterministic keyword-based scoring for captured text.

Used as the fallback when no language model is available, and to fill in
keywords when a model response omits them.

Matching is plain substring containment on the lowercased text, with no word
boundaries: "do" matches inside "document" and "key" inside "keyboard". Short
keywords therefore over-match; this is the established scoring behaviour and
existing priorities depend on it.
"""

import re
from dataclasses import dataclass

from cortex.domain.notes.value_objects import (
    DEFAULT_PRIORITY,
    MAX_PRIORITY,
    AnalysisResult,
    ContentKind,
    NoteType,
    clamp_priority,
)


@dataclass(frozen=True)
class KeywordCategory:
    """A group of keywords that share one representative priority."""

    name: str
    weight: int
    keywords: tuple[str, ...]


# Checked in order; the highest matched weight wins
PRIORITY_CATEGORIES: tuple[KeywordCategory, ...] = (
    KeywordCategory(
        "critical",
        95,
        ("urgent", "emergency", "critical", "deadline", "asap", "immediately", "breaking"),
    ),
    KeywordCategory(
        "high",
        80,
        ("important", "key", "essential", "must", "required", "decision", "action", "priority"),
    ),
    KeywordCategory(
        "insight",
        78,
        (
            "realize",
            "discovered",
            "breakthrough",
            "aha",
            "finally understand",
            "learned",
            "insight",
            "revelation",
        ),
    ),
    KeywordCategory(
        "actionable",
        70,
        ("todo", "task", "do", "implement", "create", "build", "fix", "resolve", "schedule"),
    ),
    KeywordCategory(
        "learning",
        68,
        ("learn", "study", "research", "explore", "understand", "practice", "improve"),
    ),
    KeywordCategory(
        "ideas",
        65,
        ("idea", "concept", "thought", "vision", "plan", "strategy", "approach"),
    ),
    KeywordCategory(
        "reference",
        50,
        ("note", "remember", "reference", "bookmark", "save", "keep"),
    ),
)

# Topic markers → suggested tag (independent of the priority table)
TOPIC_TAGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("learning", ("learn", "study")),
    ("ideas", ("idea", "think")),
    ("tasks", ("todo", "need to")),
    ("project", ("project",)),
    ("coding", ("code", "programming")),
    ("meetings", ("meeting", "call")),
    ("reading", ("book", "article")),
)

INSIGHT_MARKERS: tuple[str, ...] = (
    "realize",
    "aha",
    "finally understand",
    "breakthrough",
    "discovered",
)

# "1." anywhere, or a line starting with a bullet
LIST_MARKER_PATTERN = re.compile(r"\d+\.|^[ \t]*[-•*]", re.MULTILINE)

MAX_KEYWORDS = 5
MAX_FALLBACK_TAGS = 3
TITLE_LENGTH = 50
SUMMARY_LENGTH = 100

LONG_TEXT_WORDS = 100
VERY_LONG_TEXT_WORDS = 200
LENGTH_BONUS = 5
QUESTION_BONUS = 3
LIST_BONUS = 3


@dataclass(frozen=True)
class KeywordScore:
    """Outcome of scoring a text against the keyword tables."""

    priority: int
    keywords: tuple[str, ...]
    tags: tuple[str, ...]
    type: NoteType


def _truncate(text: str, limit: int) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def _boost(priority: int, bonus: int) -> int:
    return min(MAX_PRIORITY, priority + bonus)


class KeywordPriorityScorer:
    """Pure keyword scorer: text in, priority/keywords/tags/type out."""

    def __init__(
        self,
        categories: tuple[KeywordCategory, ...] = PRIORITY_CATEGORIES,
        topic_tags: tuple[tuple[str, tuple[str, ...]], ...] = TOPIC_TAGS,
    ):
        self._categories = categories
        self._topic_tags = topic_tags

    def score(self, text: str, kind: ContentKind = ContentKind.TEXT) -> KeywordScore:
        lowered = text.lower()
        keywords, priority = self._keywords_and_priority(text, lowered)
        return KeywordScore(
            priority=priority,
            keywords=keywords,
            tags=self._suggest_tags(lowered),
            type=self._infer_type(lowered, kind),
        )

    def extract_keywords(self, text: str) -> tuple[str, ...]:
        keywords, _ = self._keywords_and_priority(text, text.lower())
        return keywords

    def fallback_analysis(
        self,
        text: str,
        kind: ContentKind = ContentKind.TEXT,
    ) -> AnalysisResult:
        """Build a full analysis without a model: truncation for title/summary."""
        result = self.score(text, kind)
        return AnalysisResult.create(
            title=_truncate(text, TITLE_LENGTH),
            summary=_truncate(text, SUMMARY_LENGTH),
            tags=result.tags,
            keywords=result.keywords,
            type=result.type,
            priority=result.priority,
        )

    def _keywords_and_priority(
        self,
        text: str,
        lowered: str,
    ) -> tuple[tuple[str, ...], int]:
        found: list[str] = []
        priority = DEFAULT_PRIORITY

        for category in self._categories:
            for keyword in category.keywords:
                if keyword in lowered:
                    if keyword not in found:
                        found.append(keyword)
                    priority = max(priority, category.weight)

        word_count = len(text.split())
        if word_count > LONG_TEXT_WORDS:
            priority = _boost(priority, LENGTH_BONUS)
        if word_count > VERY_LONG_TEXT_WORDS:
            priority = _boost(priority, LENGTH_BONUS)

        # Questions suggest active thinking
        if "?" in text:
            priority = _boost(priority, QUESTION_BONUS)

        # Lists suggest organized thinking
        if LIST_MARKER_PATTERN.search(text):
            priority = _boost(priority, LIST_BONUS)

        return tuple(found[:MAX_KEYWORDS]), clamp_priority(priority)

    def _suggest_tags(self, lowered: str) -> tuple[str, ...]:
        tags = [
            tag
            for tag, markers in self._topic_tags
            if any(marker in lowered for marker in markers)
        ]
        return tuple(tags[:MAX_FALLBACK_TAGS])

    def _infer_type(self, lowered: str, kind: ContentKind) -> NoteType:
        # A URL anywhere makes it a link, even in a file description
        if kind is ContentKind.LINK or "http" in lowered:
            return NoteType.LINK
        if kind is ContentKind.FILE:
            return NoteType.FILE
        if any(marker in lowered for marker in INSIGHT_MARKERS):
            return NoteType.INSIGHT
        return NoteType.NOTE
