"""Notes domain exceptions."""

from uuid import UUID

from cortex.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class NoteNotFoundError(EntityNotFoundError):
    """Raised when a note cannot be found (or is not visible to the caller)."""

    def __init__(self, note_id: str | UUID) -> None:
        super().__init__(
            message=f"Note '{note_id}' not found",
            code=ErrorCode.NOTE_NOT_FOUND,
            details={"note_id": str(note_id)},
        )


class EmptyCaptureError(ValidationError):
    """Raised when a capture has no content, URL or file name."""

    def __init__(self) -> None:
        super().__init__(
            message="Content, URL, or file is required.",
            code=ErrorCode.MISSING_CONTENT,
        )


class MissingQuestionError(ValidationError):
    """Raised when a knowledge query arrives without a question."""

    def __init__(self, message: str = "A non-empty question is required.") -> None:
        super().__init__(message=message, code=ErrorCode.MISSING_QUESTION)
