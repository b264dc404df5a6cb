"""API tests for /api/v1/query."""

import pytest

from cortex.application.services.knowledge_query_engine import (
    EMPTY_KNOWLEDGE_BASE_ANSWER,
    UNAVAILABLE_ANSWER,
)
from tests.shared.fakes import FakeCompletionProvider

pytestmark = pytest.mark.integration

QUERY_URL = "/api/v1/query"


class TestQuery:
    def test_empty_knowledge_base(self, client):
        response = client.post(QUERY_URL, json={"question": "What do I know?"})

        assert response.status_code == 200
        assert response.json() == {
            "answer": EMPTY_KNOWLEDGE_BASE_ANSWER,
            "sources": [],
            "confidence": "low",
        }

    def test_no_model_configured(self, client, create_note):
        create_note(content="The wifi password is on the fridge")

        body = client.post(QUERY_URL, json={"question": "Where is the wifi password?"}).json()

        assert body["answer"] == UNAVAILABLE_ANSWER
        assert body["confidence"] == "low"

    def test_answer_with_sources(self, client, create_note, use_providers):
        note = create_note(content="The wifi password is on the fridge")
        provider = FakeCompletionProvider(
            replies=[
                {
                    "answer": "It is on the fridge.",
                    "relevantNoteIds": [note["id"], "not-a-note"],
                    "confidence": "high",
                }
            ]
        )
        use_providers(provider)

        body = client.post(QUERY_URL, json={"question": "Where is the wifi password?"}).json()

        assert body["answer"] == "It is on the fridge."
        assert body["confidence"] == "high"
        assert [s["id"] for s in body["sources"]] == [note["id"]]
        assert "USER QUESTION: Where is the wifi password?" in provider.calls[0]["user_prompt"]

    def test_falls_back_to_next_model(self, client, create_note, use_providers):
        create_note(content="remember the milk")
        failing = FakeCompletionProvider(model="big", replies=[RuntimeError("429 rate limit")])
        working = FakeCompletionProvider(
            model="small",
            replies=[{"answer": "Milk.", "relevantNoteIds": [], "confidence": "medium"}],
        )
        use_providers(failing, working)

        body = client.post(QUERY_URL, json={"question": "What should I buy?"}).json()

        assert body["answer"] == "Milk."
        assert failing.call_count == 1
        assert working.call_count == 1

    @pytest.mark.parametrize("payload", [{}, {"question": ""}, {"question": "  "}])
    def test_missing_question(self, client, payload):
        response = client.post(QUERY_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_QUESTION"
