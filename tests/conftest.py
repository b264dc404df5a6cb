"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/          # Fast, isolated tests mirroring src/cortex
    ├── integration/   # API tests against a temporary SQLite database
    └── shared/        # Shared test doubles and builders
"""

import pytest

from cortex_config import clear_settings_cache
from tests.shared.fakes import FakeCompletionProvider, InMemoryNoteRepository


@pytest.fixture(autouse=True)
def fresh_settings():
    """Never leak cached settings between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def note_repository() -> InMemoryNoteRepository:
    """Empty in-memory repository."""
    return InMemoryNoteRepository()


@pytest.fixture
def fake_provider() -> FakeCompletionProvider:
    """Provider without scripted replies (returns an empty JSON object)."""
    return FakeCompletionProvider()
