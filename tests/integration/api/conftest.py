"""Fixtures for API tests against a temporary SQLite database.

Every test gets its own application: a fresh database file, a fresh rate
limiter and no language model unless a test installs fake providers.
"""

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cortex.application.services import CompletionFallbackChain
from cortex.presentation.api import create_app
from cortex_config.settings import Settings
from tests.shared.fakes import FakeCompletionProvider

NOTES_URL = "/api/v1/notes"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'cortex.db'}",
        ai_api_key=None,
        brain_name="Test Brain",
    )


@pytest.fixture
def app(test_settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def use_providers(app):
    """Replace the application's completion chain with fake providers."""

    def _install(*providers: FakeCompletionProvider) -> CompletionFallbackChain:
        chain = CompletionFallbackChain(list(providers), timeout=1.0)
        app.state.completion_chain = chain
        return chain

    return _install


@pytest.fixture
def create_note(client):
    """Capture a note through the API and return the response body."""

    def _create(**payload) -> dict:
        response = client.post(NOTES_URL, json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
