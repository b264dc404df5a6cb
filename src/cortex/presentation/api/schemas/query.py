"""Knowledge query schemas."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from cortex.domain.notes.value_objects import ConfidenceLevel, QueryResult


class QueryRequest(BaseModel):
    question: Optional[str] = Field(None, max_length=2000, description="Question to ask")


class SourceResponse(BaseModel):
    id: UUID
    title: str
    summary: Optional[str] = None


class QueryResponse(BaseModel):
    """Answer with the notes it was based on."""

    answer: str
    sources: list[SourceResponse]
    confidence: ConfidenceLevel

    @classmethod
    def from_domain(cls, result: QueryResult) -> "QueryResponse":
        return cls(
            answer=result.answer,
            sources=[
                SourceResponse(id=s.id, title=s.title, summary=s.summary)
                for s in result.sources
            ],
            confidence=result.confidence,
        )


class PublicQueryResponse(QueryResponse):
    brain: str
    query: str

    @classmethod
    def from_result(
        cls,
        result: QueryResult,
        brain: str,
        query: str,
    ) -> "PublicQueryResponse":
        base = QueryResponse.from_domain(result)
        return cls(brain=brain, query=query, **base.model_dump())
