"""API tests for /api/v1/notes."""

from uuid import uuid4

import pytest

from tests.shared.fakes import FakeCompletionProvider

pytestmark = pytest.mark.integration

NOTES_URL = "/api/v1/notes"


class TestCreateNote:
    def test_keyword_analysis_without_model(self, client):
        response = client.post(
            NOTES_URL,
            json={"content": "URGENT: fix the login bug before the deadline"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["priority"] == 95
        assert body["type"] == "NOTE"
        assert body["is_public"] is False
        assert body["content"] == "URGENT: fix the login bug before the deadline"
        assert body["id"]
        assert response.headers["X-RateLimit-Remaining"] == "9"

    def test_model_analysis(self, client, use_providers):
        use_providers(
            FakeCompletionProvider(
                replies=[
                    {
                        "title": "Login bug",
                        "summary": "Fix the login bug.",
                        "tags": ["bugs"],
                        "type": "NOTE",
                        "priority": 88,
                    }
                ]
            )
        )

        body = client.post(NOTES_URL, json={"content": "fix the login bug"}).json()

        assert body["title"] == "Login bug"
        assert body["summary"] == "Fix the login bug."
        assert body["tags"] == ["bugs"]
        assert body["priority"] == 88

    def test_link_capture(self, create_note):
        body = create_note(source_url="https://example.com/post", is_public=True)

        assert body["type"] == "LINK"
        assert body["source_url"] == "https://example.com/post"
        assert body["is_public"] is True

    def test_file_capture(self, create_note):
        body = create_note(file_name="slides.pdf", file_type="application/pdf")

        assert body["type"] == "FILE"
        assert body["file_name"] == "slides.pdf"

    @pytest.mark.parametrize("payload", [{}, {"content": "   "}, {"source_url": ""}])
    def test_empty_capture_is_rejected(self, client, payload):
        response = client.post(NOTES_URL, json=payload)

        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_CONTENT"


class TestListNotes:
    def test_newest_first(self, client, create_note):
        create_note(content="first thought")
        create_note(content="second thought")

        body = client.get(NOTES_URL).json()

        assert body["count"] == 2
        assert [n["content"] for n in body["notes"]] == ["second thought", "first thought"]

    def test_sort_by_priority(self, client, create_note):
        create_note(content="just a thought")
        create_note(content="URGENT: renew passport")

        body = client.get(NOTES_URL, params={"sort": "priority"}).json()

        assert body["notes"][0]["content"] == "URGENT: renew passport"

    def test_search(self, client, create_note):
        create_note(content="buy oat milk")
        create_note(content="read the paper on attention")

        body = client.get(NOTES_URL, params={"q": "OAT"}).json()

        assert [n["content"] for n in body["notes"]] == ["buy oat milk"]

    def test_type_filter(self, client, create_note):
        create_note(content="plain note")
        create_note(source_url="https://example.com")

        body = client.get(NOTES_URL, params={"type": "link"}).json()
        everything = client.get(NOTES_URL, params={"type": "ALL"}).json()

        assert [n["type"] for n in body["notes"]] == ["LINK"]
        assert everything["count"] == 2

    def test_invalid_sort(self, client):
        assert client.get(NOTES_URL, params={"sort": "oldest"}).status_code == 422


class TestSingleNote:
    def test_get(self, client, create_note):
        created = create_note(content="hello")

        response = client.get(f"{NOTES_URL}/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["content"] == "hello"
        assert body["priority"] == created["priority"]

    def test_get_missing(self, client):
        response = client.get(f"{NOTES_URL}/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "NOTE_NOT_FOUND"

    def test_invalid_id(self, client):
        assert client.get(f"{NOTES_URL}/not-a-uuid").status_code == 422

    def test_toggle_visibility(self, client, create_note):
        created = create_note(content="share me")

        first = client.patch(f"{NOTES_URL}/{created['id']}")
        second = client.patch(f"{NOTES_URL}/{created['id']}")

        assert first.status_code == 200
        assert first.json()["is_public"] is True
        assert second.json()["is_public"] is False

    def test_toggle_missing(self, client):
        assert client.patch(f"{NOTES_URL}/{uuid4()}").status_code == 404

    def test_delete(self, client, create_note):
        created = create_note(content="temporary")

        response = client.delete(f"{NOTES_URL}/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["X-RateLimit-Remaining"] == "19"
        assert client.get(f"{NOTES_URL}/{created['id']}").status_code == 404
        assert client.delete(f"{NOTES_URL}/{created['id']}").status_code == 404
