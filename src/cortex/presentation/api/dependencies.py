"""FastAPI dependency injection for the Cortex API.

Long-lived components (session factory, completion chain, rate limiter) are
built once by the application factory and kept on ``app.state``; these
dependencies hand out per-request objects built on top of them.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cortex.application.commands import (
    CaptureNoteCommand,
    DeleteNoteCommand,
    ToggleNoteVisibilityCommand,
)
from cortex.application.queries import (
    GetNoteQuery,
    ListNotesQuery,
    ListPublicNotesQuery,
)
from cortex.application.services import (
    CompletionFallbackChain,
    ContentAnalyzer,
    KnowledgeQueryEngine,
)
from cortex.domain.notes.repositories import NoteRepository
from cortex.infrastructure.persistence.sqlalchemy import NoteRepositorySQLAlchemy
from cortex_config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations; commit is left to the router
    """
    async with request.app.state.session_maker() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_note_repository(session: DBSession) -> NoteRepository:
    return NoteRepositorySQLAlchemy(session)


NoteRepo = Annotated[NoteRepository, Depends(get_note_repository)]


def get_completion_chain(request: Request) -> CompletionFallbackChain:
    return request.app.state.completion_chain


CompletionChain = Annotated[CompletionFallbackChain, Depends(get_completion_chain)]


def get_content_analyzer(
    chain: CompletionChain,
    settings: AppSettings,
) -> ContentAnalyzer:
    return ContentAnalyzer(chain, max_tokens=settings.ai_analysis_max_tokens)


def get_query_engine(
    chain: CompletionChain,
    note_repo: NoteRepo,
    settings: AppSettings,
) -> KnowledgeQueryEngine:
    return KnowledgeQueryEngine(
        chain,
        note_repo,
        context_size=settings.query_context_size,
        public_fetch_limit=settings.query_public_fetch_limit,
        max_tokens=settings.ai_query_max_tokens,
    )


QueryEngine = Annotated[KnowledgeQueryEngine, Depends(get_query_engine)]


def get_capture_note_command(
    note_repo: NoteRepo,
    analyzer: Annotated[ContentAnalyzer, Depends(get_content_analyzer)],
) -> CaptureNoteCommand:
    return CaptureNoteCommand(analyzer, note_repo)


def get_list_public_notes_query(
    note_repo: NoteRepo,
    settings: AppSettings,
) -> ListPublicNotesQuery:
    return ListPublicNotesQuery(note_repo, limit=settings.public_feed_limit)


def get_delete_note_command(note_repo: NoteRepo) -> DeleteNoteCommand:
    return DeleteNoteCommand(note_repo)


def get_toggle_note_visibility_command(
    note_repo: NoteRepo,
) -> ToggleNoteVisibilityCommand:
    return ToggleNoteVisibilityCommand(note_repo)


def get_get_note_query(note_repo: NoteRepo) -> GetNoteQuery:
    return GetNoteQuery(note_repo)


def get_list_notes_query(note_repo: NoteRepo) -> ListNotesQuery:
    return ListNotesQuery(note_repo)


CaptureNote = Annotated[CaptureNoteCommand, Depends(get_capture_note_command)]
DeleteNote = Annotated[DeleteNoteCommand, Depends(get_delete_note_command)]
ToggleNoteVisibility = Annotated[
    ToggleNoteVisibilityCommand,
    Depends(get_toggle_note_visibility_command),
]
GetNote = Annotated[GetNoteQuery, Depends(get_get_note_query)]
ListNotes = Annotated[ListNotesQuery, Depends(get_list_notes_query)]
ListPublicNotes = Annotated[ListPublicNotesQuery, Depends(get_list_public_notes_query)]
