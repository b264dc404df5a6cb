"""Content analysis for new captures.

Asks the configured language models for a title, summary, tags, keywords,
type and priority. When no model is configured, or every model fails, the
deterministic keyword scorer produces the analysis instead, so callers always
get a result.
"""

import logging
import math
from typing import Any, Optional

from cortex.application.services.completion_chain import CompletionFallbackChain
from cortex.domain.notes.services import KeywordPriorityScorer
from cortex.domain.notes.value_objects import (
    DEFAULT_PRIORITY,
    AnalysisResult,
    ContentKind,
    NoteType,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Thought"
DEFAULT_SUMMARY = "No summary generated."

_KIND_PREFIXES = {
    ContentKind.LINK: "[This is a URL/link being saved]\n\n",
    ContentKind.FILE: "[This is a file being saved]\n\n",
}


class ContentAnalyzer:
    """Turns raw captured text into an AnalysisResult. Never raises."""

    SYSTEM_PROMPT = """You are an AI assistant for a "second brain" knowledge management app. Analyze the given content and return a JSON object with:

1. "title": A concise, descriptive title (max 8 words)
2. "summary": A 1-2 sentence summary capturing the key point
3. "tags": An array of 2-5 relevant lowercase tags
4. "keywords": An array of the 3-5 most important keywords from the content
5. "type": One of "NOTE", "LINK", "INSIGHT", "FILE"
   - NOTE: General thoughts, reflections, notes
   - LINK: URLs, references to external resources
   - INSIGHT: Realizations, aha moments, important learnings
   - FILE: References to files or documents
6. "priority": An integer from 1 to 100 indicating importance:
   - 90-100: Critical, urgent, time-sensitive (deadlines, emergencies)
   - 75-89: High importance (key decisions, important tasks)
   - 65-74: Insights and learnings worth revisiting
   - 50-64: Standard notes and ideas
   - 30-49: Low priority references
   - 1-29: Minimal importance, casual notes

Respond ONLY with valid JSON, no markdown formatting."""  # NOQA: E501

    def __init__(
        self,
        chain: CompletionFallbackChain,
        scorer: Optional[KeywordPriorityScorer] = None,
        max_tokens: int = 500,
    ):
        self._chain = chain
        self._scorer = scorer or KeywordPriorityScorer()
        self._max_tokens = max_tokens

    @property
    def is_ai_enabled(self) -> bool:
        return self._chain.is_configured

    async def analyze(
        self,
        text: str,
        kind: ContentKind = ContentKind.TEXT,
    ) -> AnalysisResult:
        if not self._chain.is_configured:
            logger.debug("No completion providers configured, using keyword scoring")
            return self._scorer.fallback_analysis(text, kind)

        result = await self._chain.run(
            self.SYSTEM_PROMPT,
            self._build_prompt(text, kind),
            lambda data: self._parse_response(data, text),
            max_tokens=self._max_tokens,
            purpose="Analysis",
        )
        if result is None:
            logger.warning("All models failed, using keyword fallback analysis")
            return self._scorer.fallback_analysis(text, kind)
        return result

    async def analyze_link(
        self,
        url: str,
        description: Optional[str] = None,
    ) -> AnalysisResult:
        text = f"URL: {url}"
        if description:
            text += f"\n\nDescription: {description}"
        return await self.analyze(text, ContentKind.LINK)

    async def analyze_file(
        self,
        file_name: str,
        file_type: str,
        description: Optional[str] = None,
    ) -> AnalysisResult:
        text = f"File: {file_name} ({file_type})"
        if description:
            text += f"\n\nDescription: {description}"
        return await self.analyze(text, ContentKind.FILE)

    def _build_prompt(self, text: str, kind: ContentKind) -> str:
        prefix = _KIND_PREFIXES.get(kind, "")
        return f'{prefix}Analyze this text:\n\n"""\n{text}\n"""'

    def _parse_response(self, data: dict[str, Any], text: str) -> AnalysisResult:
        keywords = data.get("keywords")
        if not isinstance(keywords, list) or not keywords:
            keywords = list(self._scorer.extract_keywords(text))

        tags = data.get("tags")
        if not isinstance(tags, list):
            tags = []

        return AnalysisResult.create(
            title=_non_empty_str(data.get("title"), DEFAULT_TITLE),
            summary=_non_empty_str(data.get("summary"), DEFAULT_SUMMARY),
            tags=tags,
            keywords=keywords,
            type=NoteType.parse(data.get("type")),
            priority=_coerce_priority(data.get("priority")),
        )


def _non_empty_str(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _coerce_priority(value: Any) -> float:
    """Numbers and numeric strings pass through; anything else becomes the default."""
    # bool is an int subclass; treat it as missing
    if isinstance(value, bool):
        return DEFAULT_PRIORITY
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return DEFAULT_PRIORITY
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    return DEFAULT_PRIORITY
