"""Notes router: capture, browse, publish and delete notes."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from cortex.application.queries import NoteSortOrder
from cortex.infrastructure.rate_limiting import RateLimitPreset
from cortex.presentation.api.dependencies import (
    CaptureNote,
    DBSession,
    DeleteNote,
    GetNote,
    ListNotes,
    ToggleNoteVisibility,
)
from cortex.presentation.api.rate_limit import RateLimit
from cortex.presentation.api.schemas.common import ErrorResponse
from cortex.presentation.api.schemas.notes import (
    NoteCreateRequest,
    NoteListResponse,
    NoteResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Capture a note",
    dependencies=[Depends(RateLimit(RateLimitPreset.AI, "notes:create"))],
    responses={
        201: {"description": "Note analyzed and stored"},
        400: {"model": ErrorResponse, "description": "No content, URL or file given"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    },
)
async def create_note(
    request: NoteCreateRequest,
    command: CaptureNote,
    session: DBSession,
) -> NoteResponse:
    """
    Capture a thought, link or file.

    The content is analyzed for a title, summary, tags, type and priority.
    Links are analyzed from their URL (plus `content` as description), files
    from their name and type. Without a configured language model the
    analysis is keyword based.
    """
    note = await command.execute(
        content=request.content,
        source_url=request.source_url,
        file_name=request.file_name,
        file_type=request.file_type,
        is_public=request.is_public,
    )
    await session.commit()
    return NoteResponse.from_domain(note)


@router.get(
    "",
    summary="List notes",
    dependencies=[Depends(RateLimit(RateLimitPreset.STANDARD, "notes:read"))],
)
async def list_notes(
    query: ListNotes,
    q: Annotated[Optional[str], Query(description="Search text or exact tag")] = None,
    type: Annotated[
        Optional[str],
        Query(description="NOTE, LINK, INSIGHT, FILE or ALL"),
    ] = None,
    sort: Annotated[
        NoteSortOrder,
        Query(description="newest (default) or priority"),
    ] = NoteSortOrder.NEWEST,
) -> NoteListResponse:
    notes = await query.execute(search=q, note_type=type, sort=sort)
    return NoteListResponse(
        notes=[NoteResponse.from_domain(note) for note in notes],
        count=len(notes),
    )


@router.get(
    "/{note_id}",
    summary="Get a note",
    dependencies=[Depends(RateLimit(RateLimitPreset.STANDARD, "notes:read"))],
    responses={404: {"model": ErrorResponse, "description": "Note not found"}},
)
async def get_note(note_id: UUID, query: GetNote) -> NoteResponse:
    note = await query.execute(note_id)
    return NoteResponse.from_domain(note)


@router.patch(
    "/{note_id}",
    summary="Toggle public visibility",
    dependencies=[Depends(RateLimit(RateLimitPreset.CREATE, "notes:update"))],
    responses={404: {"model": ErrorResponse, "description": "Note not found"}},
)
async def toggle_note_visibility(
    note_id: UUID,
    command: ToggleNoteVisibility,
    session: DBSession,
) -> NoteResponse:
    """Flip whether the note appears in the public brain."""
    note = await command.execute(note_id)
    await session.commit()
    logger.info("Note %s is now %s", note.id, "public" if note.is_public else "private")
    return NoteResponse.from_domain(note)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a note",
    dependencies=[Depends(RateLimit(RateLimitPreset.CREATE, "notes:update"))],
    responses={404: {"model": ErrorResponse, "description": "Note not found"}},
)
async def delete_note(
    note_id: UUID,
    command: DeleteNote,
    session: DBSession,
) -> None:
    await command.execute(note_id)
    await session.commit()
    logger.info("Deleted note %s", note_id)
