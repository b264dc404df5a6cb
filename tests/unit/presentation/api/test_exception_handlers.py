"""Tests for exception to HTTP status mapping."""

from uuid import uuid4

from cortex.domain.notes.exceptions import (
    EmptyCaptureError,
    MissingQuestionError,
    NoteNotFoundError,
)
from cortex.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RateLimitExceededError,
)
from cortex.presentation.api.exception_handlers import ERROR_CODE_TO_STATUS, status_for


class TestStatusFor:
    def test_every_code_is_mapped(self):
        assert set(ERROR_CODE_TO_STATUS) == set(ErrorCode)

    def test_note_errors(self):
        assert status_for(NoteNotFoundError(uuid4())) == 404
        assert status_for(EmptyCaptureError()) == 400
        assert status_for(MissingQuestionError()) == 400

    def test_rate_limit(self):
        exc = RateLimitExceededError(retry_after_seconds=12, reset_at=100.0, scope="ai")

        assert status_for(exc) == 429
        assert exc.message == "Rate limit exceeded. Try again in 12 seconds."
        assert exc.details == {"scope": "ai"}

    def test_default_codes(self):
        assert EntityNotFoundError("gone").code == ErrorCode.ENTITY_NOT_FOUND
        assert status_for(DomainException("boom")) == 500
