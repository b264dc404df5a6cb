"""Schemas used by every router."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    detail: str
    code: Optional[str] = Field(None, description="ErrorCode value, stable across releases")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Note 'abc' not found", "code": "NOTE_NOT_FOUND"},
        },
    )


class HealthResponse(BaseModel):
    status: str
    version: str
    ai_enabled: bool = Field(description="True when at least one model is configured")
    models: list[str] = Field(default_factory=list, description="Fallback order")
