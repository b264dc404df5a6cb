"""Capture a new note: analyze the submitted content and persist it."""

import logging
from typing import Optional
from uuid import UUID

from cortex.application.services.content_analyzer import ContentAnalyzer
from cortex.domain.notes.entities import Note
from cortex.domain.notes.exceptions import EmptyCaptureError
from cortex.domain.notes.repositories import NoteRepository

logger = logging.getLogger(__name__)

DEFAULT_FILE_TYPE = "unknown"


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CaptureNoteCommand:
    """
    Analyze and store a text note, a link or a file reference.

    A link (source_url) takes precedence over a file (file_name), which takes
    precedence over plain text. The stored content is the text when given,
    otherwise the URL or the file name.
    """

    def __init__(
        self,
        analyzer: ContentAnalyzer,
        note_repository: NoteRepository,
    ):
        self._analyzer = analyzer
        self._note_repo = note_repository

    async def execute(  # NOQA: PLR0913
        self,
        content: Optional[str] = None,
        source_url: Optional[str] = None,
        file_name: Optional[str] = None,
        file_type: Optional[str] = None,
        is_public: bool = False,
        user_id: Optional[UUID] = None,
    ) -> Note:
        content = _clean(content)
        source_url = _clean(source_url)
        file_name = _clean(file_name)

        if not (content or source_url or file_name):
            raise EmptyCaptureError

        if source_url:
            analysis = await self._analyzer.analyze_link(source_url, content)
        elif file_name:
            file_type = _clean(file_type) or DEFAULT_FILE_TYPE
            analysis = await self._analyzer.analyze_file(file_name, file_type, content)
        else:
            analysis = await self._analyzer.analyze(content)

        note = Note.from_analysis(
            analysis,
            content=content or source_url or file_name,
            is_public=is_public,
            source_url=source_url,
            file_name=file_name,
            file_type=file_type if file_name else None,
            user_id=user_id,
        )
        await self._note_repo.save(note)

        logger.info(
            "Captured note %s (type=%s, priority=%d)",
            note.id,
            note.type.value,
            note.priority,
        )
        return note
