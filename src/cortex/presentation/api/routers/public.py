"""Public brain router: read-only, cacheable, open to any origin."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response

from cortex.domain.notes.exceptions import MissingQuestionError
from cortex.infrastructure.rate_limiting import RateLimitPreset
from cortex.presentation.api.dependencies import (
    AppSettings,
    ListPublicNotes,
    QueryEngine,
)
from cortex.presentation.api.rate_limit import RateLimit
from cortex.presentation.api.schemas.common import ErrorResponse
from cortex.presentation.api.schemas.notes import (
    PublicBrainResponse,
    PublicNoteResponse,
)
from cortex.presentation.api.schemas.query import PublicQueryResponse, QueryRequest

router = APIRouter()

PUBLIC_CACHE_CONTROL = "s-maxage=60, stale-while-revalidate"


def _set_public_headers(response: Response) -> None:
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Cache-Control"] = PUBLIC_CACHE_CONTROL


@router.get(
    "/brain",
    summary="Public brain feed",
    dependencies=[Depends(RateLimit(RateLimitPreset.PUBLIC, "public:brain"))],
)
async def public_brain(
    response: Response,
    query: ListPublicNotes,
    settings: AppSettings,
) -> PublicBrainResponse:
    """The most recent public notes, without their full content."""
    notes = await query.execute()
    _set_public_headers(response)
    return PublicBrainResponse(
        brain=settings.brain_name,
        count=len(notes),
        notes=[PublicNoteResponse.from_domain(note) for note in notes],
    )


async def _answer_public(
    question: Optional[str],
    engine: QueryEngine,
    settings: AppSettings,
    response: Response,
) -> PublicQueryResponse:
    question = (question or "").strip()
    if not question:
        raise MissingQuestionError(
            "Missing query parameter 'q' (or 'question' in the request body)."
        )

    result = await engine.query(question, public_only=True)
    response.headers["Access-Control-Allow-Origin"] = "*"
    return PublicQueryResponse.from_result(
        result,
        brain=settings.brain_name,
        query=question,
    )


@router.get(
    "/brain/query",
    summary="Ask the public brain",
    dependencies=[Depends(RateLimit(RateLimitPreset.QUERY, "public:query"))],
    responses={400: {"model": ErrorResponse, "description": "Question missing"}},
)
async def public_query_get(
    response: Response,
    engine: QueryEngine,
    settings: AppSettings,
    q: Annotated[Optional[str], Query(description="The question")] = None,
) -> PublicQueryResponse:
    """Answer a question using public notes only."""
    return await _answer_public(q, engine, settings, response)


@router.post(
    "/brain/query",
    summary="Ask the public brain",
    dependencies=[Depends(RateLimit(RateLimitPreset.QUERY, "public:query"))],
    responses={400: {"model": ErrorResponse, "description": "Question missing"}},
)
async def public_query_post(
    response: Response,
    engine: QueryEngine,
    settings: AppSettings,
    request: Optional[QueryRequest] = None,
) -> PublicQueryResponse:
    question = request.question if request else None
    return await _answer_public(question, engine, settings, response)
