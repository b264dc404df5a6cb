"""Application commands (write operations)."""

from cortex.application.commands.capture_note_command import CaptureNoteCommand
from cortex.application.commands.delete_note_command import DeleteNoteCommand
from cortex.application.commands.toggle_note_visibility_command import (
    ToggleNoteVisibilityCommand,
)

__all__ = [
    "CaptureNoteCommand",
    "DeleteNoteCommand",
    "ToggleNoteVisibilityCommand",
]
