"""Test doubles for completion providers and note storage."""

import asyncio
import json
from typing import List, Optional, Union
from uuid import UUID

from cortex.application.ports.completion import CompletionProvider
from cortex.domain.notes.entities import Note
from cortex.domain.notes.repositories import NoteRepository

Reply = Union[str, dict, BaseException]


class FakeCompletionProvider(CompletionProvider):
    """Replays scripted replies; the last reply repeats once the script runs out.

    A dict reply is serialized to JSON, an exception reply is raised.
    """

    def __init__(
        self,
        model: str = "fake-model",
        replies: Optional[List[Reply]] = None,
        delay: float = 0.0,
    ):
        self._model = model
        self._replies = list(replies or [])
        self._delay = delay
        self.calls: list[dict] = []

    @property
    def model_name(self) -> str:
        return self._model

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def complete(
        self,
        system_instruction: str,
        user_prompt: str,
        *,
        max_tokens: int,
    ) -> str:
        self.calls.append(
            {
                "system_instruction": system_instruction,
                "user_prompt": user_prompt,
                "max_tokens": max_tokens,
            }
        )
        if self._delay:
            await asyncio.sleep(self._delay)

        if not self._replies:
            return "{}"
        reply = self._replies.pop(0) if len(self._replies) > 1 else self._replies[0]

        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, dict):
            return json.dumps(reply)
        return reply


class InMemoryNoteRepository(NoteRepository):
    """Dict-backed NoteRepository keeping insertion order as creation order."""

    def __init__(self, notes: Optional[List[Note]] = None):
        self._notes: dict[UUID, Note] = {}
        for note in notes or []:
            self._notes[note.id] = note

    @property
    def notes(self) -> list[Note]:
        return list(self._notes.values())

    async def save(self, note: Note) -> None:
        self._notes[note.id] = note

    async def find_by_id(
        self,
        note_id: UUID,
        user_id: Optional[UUID] = None,
    ) -> Optional[Note]:
        note = self._notes.get(note_id)
        if note is None or not note.is_owned_by(user_id):
            return None
        return note

    async def list_all(self, user_id: Optional[UUID] = None) -> List[Note]:
        notes = [note for note in self._notes.values() if note.is_owned_by(user_id)]
        return sorted(notes, key=lambda note: note.created_at, reverse=True)

    async def list_public(self, limit: int = 10) -> List[Note]:
        notes = [note for note in await self.list_all() if note.is_public]
        return notes[:limit]

    async def search(self, text: str, user_id: Optional[UUID] = None) -> List[Note]:
        return [note for note in await self.list_all(user_id) if note.matches(text)]

    async def delete(self, note_id: UUID) -> bool:
        return self._notes.pop(note_id, None) is not None
