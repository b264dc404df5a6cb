"""Natural-language questions over the knowledge base."""

import logging
from typing import Any, Optional
from uuid import UUID

from cortex.application.services.completion_chain import CompletionFallbackChain
from cortex.domain.notes.entities import Note
from cortex.domain.notes.repositories import NoteRepository
from cortex.domain.notes.value_objects import (
    DEFAULT_PRIORITY,
    ConfidenceLevel,
    QueryResult,
    SourceReference,
)

logger = logging.getLogger(__name__)

EMPTY_KNOWLEDGE_BASE_ANSWER = (
    "Your knowledge base is empty. Start capturing thoughts to build your second brain!"
)
UNAVAILABLE_ANSWER = (
    "I'm currently unable to process your query. Please try again in a moment."
)
REPOSITORY_ERROR_ANSWER = (
    "I encountered an error while searching your knowledge base. Please try again."
)
DEFAULT_ANSWER = "I couldn't generate a response."


class KnowledgeQueryEngine:
    """
    Answers questions using the highest-priority notes as context.

    Only the top ``context_size`` notes (by priority) are sent to the model,
    and only notes from that context can be cited as sources. Failures are
    turned into canned, low-confidence answers; ``query`` never raises.
    """

    SYSTEM_PROMPT = """You are an AI assistant for a personal knowledge base ("second brain"). Answer the user's question using ONLY the information in the knowledge base provided below. Notes with higher priority are more important.

Return a JSON object with:
1. "answer": A helpful, conversational answer. Reference specific notes by their titles when relevant. If the knowledge base does not contain the answer, say so honestly.
2. "relevantNoteIds": An array of the IDs of the notes you used to answer
3. "confidence": One of "high", "medium", "low"

Respond ONLY with valid JSON, no markdown formatting."""  # NOQA: E501

    def __init__(  # NOQA: PLR0913
        self,
        chain: CompletionFallbackChain,
        note_repository: NoteRepository,
        context_size: int = 20,
        public_fetch_limit: int = 100,
        max_tokens: int = 1000,
    ):
        self._chain = chain
        self._note_repo = note_repository
        self._context_size = context_size
        self._public_fetch_limit = public_fetch_limit
        self._max_tokens = max_tokens

    async def query(
        self,
        question: str,
        *,
        public_only: bool = False,
        user_id: Optional[UUID] = None,
    ) -> QueryResult:
        try:
            if public_only:
                notes = await self._note_repo.list_public(limit=self._public_fetch_limit)
            else:
                notes = await self._note_repo.list_all(user_id=user_id)
        except Exception as e:
            logger.error("Failed to load notes for query: %s", e)
            return QueryResult(
                answer=REPOSITORY_ERROR_ANSWER,
                confidence=ConfidenceLevel.LOW,
            )

        if not notes:
            return QueryResult(
                answer=EMPTY_KNOWLEDGE_BASE_ANSWER,
                confidence=ConfidenceLevel.LOW,
            )

        context_notes = self.select_context(notes)
        prompt = (
            f"KNOWLEDGE BASE:\n{self._build_context(context_notes)}\n\n"
            f"USER QUESTION: {question}"
        )

        result = await self._chain.run(
            self.SYSTEM_PROMPT,
            prompt,
            lambda data: self._parse_response(data, context_notes),
            max_tokens=self._max_tokens,
            purpose="Query",
        )
        if result is None:
            return QueryResult(answer=UNAVAILABLE_ANSWER, confidence=ConfidenceLevel.LOW)
        return result

    def select_context(self, notes: list[Note]) -> list[Note]:
        """Highest priority first; ties keep repository order."""
        ranked = sorted(
            notes,
            key=lambda note: note.priority if note.priority is not None else DEFAULT_PRIORITY,
            reverse=True,
        )
        return ranked[: self._context_size]

    def _build_context(self, notes: list[Note]) -> str:
        return "\n\n".join(self._format_note(note) for note in notes)

    def _format_note(self, note: Note) -> str:
        return (
            f"[ID: {note.id}] Title: {note.title}\n"
            f"Priority: {note.priority}\n"
            f"Summary: {note.summary or 'N/A'}\n"
            f"Content: {note.content}\n"
            f"Tags: {', '.join(note.tags)}\n"
            "---"
        )

    def _parse_response(
        self,
        data: dict[str, Any],
        context_notes: list[Note],
    ) -> QueryResult:
        answer = data.get("answer")
        if not isinstance(answer, str) or not answer.strip():
            answer = DEFAULT_ANSWER

        relevant = data.get("relevantNoteIds")
        relevant_ids = (
            {str(value) for value in relevant} if isinstance(relevant, list) else set()
        )

        sources = tuple(
            SourceReference(id=note.id, title=note.title, summary=note.summary)
            for note in context_notes
            if str(note.id) in relevant_ids
        )

        return QueryResult(
            answer=answer,
            confidence=ConfidenceLevel.parse(data.get("confidence")),
            sources=sources,
        )
