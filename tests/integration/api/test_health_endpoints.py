"""API tests for the unversioned endpoints."""

import pytest

from cortex.presentation.api.app import API_VERSION
from tests.shared.fakes import FakeCompletionProvider

pytestmark = pytest.mark.integration


def test_health_without_model(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "version": API_VERSION,
        "ai_enabled": False,
        "models": [],
    }


def test_health_lists_models(client, use_providers):
    use_providers(FakeCompletionProvider(model="a"), FakeCompletionProvider(model="b"))

    body = client.get("/health").json()

    assert body["ai_enabled"] is True
    assert body["models"] == ["a", "b"]


def test_root(client):
    body = client.get("/").json()

    assert body["api_base"] == "/api/v1"
    assert body["endpoints"]["public"] == "/api/v1/public/brain"
