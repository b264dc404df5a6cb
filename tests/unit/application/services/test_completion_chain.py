"""Tests for CompletionFallbackChain."""

import logging

import pytest

from cortex.application.ports.completion import (
    CompletionError,
    CompletionRateLimitedError,
)
from cortex.application.services.completion_chain import (
    CompletionFallbackChain,
    extract_json_object,
    is_rate_limit_error,
)
from tests.shared.fakes import FakeCompletionProvider


def _identity(data: dict) -> dict:
    return data


class TestExtractJsonObject:
    def test_plain_object(self):
        assert extract_json_object('{"a": 1}') == {"a": 1}

    def test_strips_code_fences(self):
        assert extract_json_object('```json\n{"a": 1}\n```') == {"a": 1}
        assert extract_json_object('```\n{"a": 1}\n```') == {"a": 1}

    def test_rejects_non_object(self):
        with pytest.raises(ValueError, match="JSON object"):
            extract_json_object("[1, 2]")

    def test_rejects_invalid_json(self):
        with pytest.raises(ValueError):
            extract_json_object("not json")


class TestIsRateLimitError:
    def test_typed_error(self):
        assert is_rate_limit_error(CompletionRateLimitedError("slow down"))

    def test_message_markers(self):
        assert is_rate_limit_error(RuntimeError("HTTP 429"))
        assert is_rate_limit_error(RuntimeError("Rate exceeded"))
        assert is_rate_limit_error(RuntimeError("token limit reached"))

    def test_other_errors(self):
        assert not is_rate_limit_error(CompletionError("connection refused"))


class TestCompletionFallbackChain:
    """Tests for ordered provider fallback."""

    @pytest.mark.asyncio
    async def test_first_success_wins(self):
        first = FakeCompletionProvider("first", [{"answer": 1}])
        second = FakeCompletionProvider("second", [{"answer": 2}])
        chain = CompletionFallbackChain([first, second])

        result = await chain.run("sys", "user", _identity, max_tokens=10)

        assert result == {"answer": 1}
        assert second.call_count == 0

    @pytest.mark.asyncio
    async def test_passes_prompts_and_max_tokens(self):
        provider = FakeCompletionProvider("m", [{"ok": True}])
        chain = CompletionFallbackChain([provider])

        await chain.run("system text", "user text", _identity, max_tokens=123)

        assert provider.calls == [
            {
                "system_instruction": "system text",
                "user_prompt": "user text",
                "max_tokens": 123,
            }
        ]

    @pytest.mark.asyncio
    async def test_rate_limited_provider_is_skipped_with_warning(self, caplog):
        throttled = FakeCompletionProvider("big", [CompletionRateLimitedError("429")])
        backup = FakeCompletionProvider("small", [{"answer": 2}])
        chain = CompletionFallbackChain([throttled, backup])

        with caplog.at_level(logging.WARNING):
            result = await chain.run("sys", "user", _identity, max_tokens=10)

        assert result == {"answer": 2}
        assert throttled.call_count == 1
        rate_records = [r for r in caplog.records if "Rate limited on big" in r.message]
        assert rate_records and rate_records[0].levelno == logging.WARNING

    @pytest.mark.asyncio
    async def test_other_failures_are_logged_as_errors(self, caplog):
        broken = FakeCompletionProvider("broken", [CompletionError("boom")])
        backup = FakeCompletionProvider("ok", [{"answer": 2}])
        chain = CompletionFallbackChain([broken, backup])

        with caplog.at_level(logging.WARNING):
            result = await chain.run("sys", "user", _identity, max_tokens=10)

        assert result == {"answer": 2}
        assert any(
            r.levelno == logging.ERROR and "boom" in r.message for r in caplog.records
        )

    @pytest.mark.asyncio
    async def test_unparseable_response_falls_through(self):
        garbage = FakeCompletionProvider("garbage", ["I am not JSON"])
        listy = FakeCompletionProvider("listy", ["[1, 2, 3]"])
        good = FakeCompletionProvider("good", ['```json\n{"answer": 3}\n```'])
        chain = CompletionFallbackChain([garbage, listy, good])

        result = await chain.run("sys", "user", _identity, max_tokens=10)

        assert result == {"answer": 3}

    @pytest.mark.asyncio
    async def test_parse_callback_failure_falls_through(self):
        first = FakeCompletionProvider("first", [{"value": "x"}])
        second = FakeCompletionProvider("second", [{"value": 7}])
        chain = CompletionFallbackChain([first, second])

        result = await chain.run(
            "sys",
            "user",
            lambda data: int(data["value"]),
            max_tokens=10,
        )

        assert result == 7

    @pytest.mark.asyncio
    async def test_timeout_counts_as_failure(self):
        slow = FakeCompletionProvider("slow", [{"answer": 1}], delay=1.0)
        fast = FakeCompletionProvider("fast", [{"answer": 2}])
        chain = CompletionFallbackChain([slow, fast], timeout=0.05)

        result = await chain.run("sys", "user", _identity, max_tokens=10)

        assert result == {"answer": 2}

    @pytest.mark.asyncio
    async def test_all_failed_returns_none(self):
        chain = CompletionFallbackChain(
            [
                FakeCompletionProvider("a", [CompletionError("down")]),
                FakeCompletionProvider("b", [CompletionRateLimitedError("429")]),
            ]
        )

        assert await chain.run("sys", "user", _identity, max_tokens=10) is None

    @pytest.mark.asyncio
    async def test_empty_chain(self):
        chain = CompletionFallbackChain([])

        assert chain.is_configured is False
        assert chain.model_names == []
        assert await chain.run("sys", "user", _identity, max_tokens=10) is None
