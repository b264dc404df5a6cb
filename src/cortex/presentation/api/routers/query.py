"""Query router: ask questions about the whole knowledge base."""

from fastapi import APIRouter, Depends

from cortex.domain.notes.exceptions import MissingQuestionError
from cortex.infrastructure.rate_limiting import RateLimitPreset
from cortex.presentation.api.dependencies import QueryEngine
from cortex.presentation.api.rate_limit import RateLimit
from cortex.presentation.api.schemas.common import ErrorResponse
from cortex.presentation.api.schemas.query import QueryRequest, QueryResponse

router = APIRouter()


@router.post(
    "",
    summary="Ask your second brain",
    dependencies=[Depends(RateLimit(RateLimitPreset.QUERY, "brain:query"))],
    responses={
        400: {"model": ErrorResponse, "description": "Question missing"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    },
)
async def query_knowledge_base(
    request: QueryRequest,
    engine: QueryEngine,
) -> QueryResponse:
    """
    Answer a question from your notes.

    The highest-priority notes are used as context; `sources` lists the notes
    the answer relied on. When no language model is reachable a canned answer
    with `low` confidence is returned.
    """
    question = (request.question or "").strip()
    if not question:
        raise MissingQuestionError

    result = await engine.query(question)
    return QueryResponse.from_domain(result)
