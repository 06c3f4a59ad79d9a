"""
Tests for the OpenAI, Groq and Anthropic provider adapters.
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock, patch

import pytest

from adapters.ai import (
    AIProviderError,
    AnthropicProvider,
    GroqProvider,
    OpenAIProvider,
    ToolSpec,
)
from adapters.ai import anthropic_adapter, openai_adapter
from adapters.ai.base import _retry_with_backoff

HISTORY = [
    {"role": "user", "content": "Find chip news and save a draft"},
    {
        "role": "assistant",
        "content": "Searching first.",
        "tool_calls": [
            {"id": "call_1", "name": "news_hunter", "arguments": {"query": "chips"}},
            {"id": "call_2", "name": "save_draft", "arguments": {"title": "Chips"}},
        ],
    },
    {"role": "tool", "tool_call_id": "call_1", "name": "news_hunter", "content": '{"count": 2}'},
    {"role": "tool", "tool_call_id": "call_2", "name": "save_draft", "content": '{"ok": true}'},
    {"role": "assistant", "content": "Done."},
]


@pytest.fixture
def no_sleep():
    with patch("adapters.ai.base.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


class TestRetryWithBackoff:
    async def test_retries_transient_errors(self, no_sleep):
        factory = AsyncMock(side_effect=[Exception("Error 429: rate limit reached"), "ok"])

        result = await _retry_with_backoff(factory, max_retries=3, base_delay=0.01)

        assert result == "ok"
        assert factory.await_count == 2
        no_sleep.assert_awaited_once()

    async def test_raises_non_transient_error_immediately(self, no_sleep):
        factory = AsyncMock(side_effect=ValueError("invalid request: bad schema"))

        with pytest.raises(ValueError):
            await _retry_with_backoff(factory, max_retries=3)

        assert factory.await_count == 1
        no_sleep.assert_not_awaited()

    async def test_gives_up_after_max_retries(self, no_sleep):
        factory = AsyncMock(side_effect=Exception("503 service unavailable"))

        with pytest.raises(Exception, match="503"):
            await _retry_with_backoff(factory, max_retries=2, base_delay=0.01)

        assert factory.await_count == 3
        assert no_sleep.await_count == 2


class TestOpenAIMessageMapping:
    def test_system_prompt_goes_first(self):
        native = openai_adapter._to_native_messages(HISTORY[:1], "Be brief")

        assert native == [
            {"role": "system", "content": "Be brief"},
            {"role": "user", "content": "Find chip news and save a draft"},
        ]

    def test_tool_calls_and_results(self):
        native = openai_adapter._to_native_messages(HISTORY, None)

        assistant = native[1]
        assert assistant["role"] == "assistant"
        assert assistant["content"] == "Searching first."
        assert assistant["tool_calls"][0] == {
            "id": "call_1",
            "type": "function",
            "function": {"name": "news_hunter", "arguments": json.dumps({"query": "chips"})},
        }
        assert native[2] == {"role": "tool", "tool_call_id": "call_1", "content": '{"count": 2}'}
        assert native[3]["tool_call_id"] == "call_2"
        assert native[4] == {"role": "assistant", "content": "Done."}

    def test_assistant_tool_call_without_text_has_null_content(self):
        native = openai_adapter._to_native_messages(
            [{"role": "assistant", "content": "", "tool_calls": HISTORY[1]["tool_calls"]}],
            None,
        )

        assert native[0]["content"] is None

    def test_parse_arguments(self):
        assert openai_adapter._parse_arguments('{"query": "chips"}') == {"query": "chips"}
        assert openai_adapter._parse_arguments("not json") == {}
        assert openai_adapter._parse_arguments("[1, 2]") == {}
        assert openai_adapter._parse_arguments(None) == {}


class TestAnthropicMessageMapping:
    def test_consecutive_tool_results_share_one_user_turn(self):
        native = anthropic_adapter._to_native_messages(HISTORY)

        assert [m["role"] for m in native] == ["user", "assistant", "user", "assistant"]
        results = native[2]["content"]
        assert results == [
            {"type": "tool_result", "tool_use_id": "call_1", "content": '{"count": 2}'},
            {"type": "tool_result", "tool_use_id": "call_2", "content": '{"ok": true}'},
        ]

    def test_assistant_blocks(self):
        native = anthropic_adapter._to_native_messages(HISTORY)

        blocks = native[1]["content"]
        assert blocks[0] == {"type": "text", "text": "Searching first."}
        assert blocks[1] == {
            "type": "tool_use",
            "id": "call_1",
            "name": "news_hunter",
            "input": {"query": "chips"},
        }
        assert native[3]["content"] == [{"type": "text", "text": "Done."}]

    def test_tool_result_after_plain_user_text_starts_new_turn(self):
        native = anthropic_adapter._to_native_messages(
            [
                {"role": "user", "content": "hi"},
                {"role": "tool", "tool_call_id": "call_1", "content": "{}"},
            ]
        )

        assert len(native) == 2
        assert native[1]["content"][0]["tool_use_id"] == "call_1"


class TestMockMode:
    @pytest.mark.parametrize(
        "provider_cls,env",
        [
            (OpenAIProvider, "OPENAI_API_KEY"),
            (GroqProvider, "GROQ_API_KEY"),
            (AnthropicProvider, "ANTHROPIC_API_KEY"),
        ],
    )
    async def test_missing_key_returns_mock_responses(self, provider_cls, env):
        provider = provider_cls(api_key="", model="test-model")

        assert provider.is_configured is False

        generated = await provider.generate_text("Write something")
        assert generated.model == "test-model (mock)"
        assert f"Configure {env} to use real AI." in generated.text

        turn = await provider.chat([{"role": "user", "content": "hi"}])
        assert turn.model == "test-model (mock)"
        assert turn.tool_calls == []


class TestOpenAIProvider:
    def _provider(self, create):
        provider = OpenAIProvider(api_key="", model="gpt-test")
        provider._client = Mock()
        provider._client.chat.completions.create = create
        return provider

    async def test_chat_maps_tool_calls(self):
        response = SimpleNamespace(
            choices=[
                SimpleNamespace(
                    message=SimpleNamespace(
                        content=None,
                        tool_calls=[
                            SimpleNamespace(
                                id="call_9",
                                function=SimpleNamespace(
                                    name="news_hunter", arguments='{"query": "fusion"}'
                                ),
                            )
                        ],
                    )
                )
            ],
            usage=SimpleNamespace(total_tokens=42),
        )
        create = AsyncMock(return_value=response)
        provider = self._provider(create)
        tool = ToolSpec(name="news_hunter", description="Find news", parameters={"type": "object"})

        turn = await provider.chat([{"role": "user", "content": "fusion?"}], system="sys", tools=[tool])

        assert turn.text == ""
        assert turn.tool_calls[0].to_dict() == {
            "id": "call_9",
            "name": "news_hunter",
            "arguments": {"query": "fusion"},
        }
        assert turn.usage_tokens == 42
        kwargs = create.await_args.kwargs
        assert kwargs["tool_choice"] == "auto"
        assert kwargs["tools"][0]["function"]["name"] == "news_hunter"
        assert kwargs["messages"][0] == {"role": "system", "content": "sys"}

    async def test_sdk_error_is_wrapped(self, no_sleep):
        provider = self._provider(AsyncMock(side_effect=Exception("invalid api key")))

        with pytest.raises(AIProviderError) as exc_info:
            await provider.generate_text("hello")

        assert exc_info.value.provider == "openai"
        assert "invalid api key" in str(exc_info.value)
        no_sleep.assert_not_awaited()

    async def test_groq_error_names_groq(self, no_sleep):
        provider = GroqProvider(api_key="", model="llama-test")
        provider._client = Mock()
        provider._client.chat.completions.create = AsyncMock(side_effect=Exception("bad model"))

        with pytest.raises(AIProviderError) as exc_info:
            await provider.chat([{"role": "user", "content": "hi"}])

        assert exc_info.value.provider == "groq"
        assert str(exc_info.value).startswith("groq request failed")


class TestAnthropicProvider:
    def _provider(self, create):
        provider = AnthropicProvider(api_key="", model="claude-test")
        provider._client = Mock()
        provider._client.messages.create = create
        return provider

    async def test_chat_maps_text_and_tool_use(self):
        message = SimpleNamespace(
            content=[
                SimpleNamespace(type="text", text="Let me look."),
                SimpleNamespace(type="tool_use", id="tu_1", name="news_hunter", input={"query": "ai"}),
            ],
            usage=SimpleNamespace(input_tokens=10, output_tokens=5),
        )
        create = AsyncMock(return_value=message)
        provider = self._provider(create)

        turn = await provider.chat([{"role": "user", "content": "ai news"}], system="sys")

        assert turn.text == "Let me look."
        assert turn.tool_calls[0].to_dict() == {
            "id": "tu_1",
            "name": "news_hunter",
            "arguments": {"query": "ai"},
        }
        assert turn.usage_tokens == 15
        assert create.await_args.kwargs["system"] == "sys"

    async def test_transient_error_is_retried(self, no_sleep):
        message = SimpleNamespace(content=[SimpleNamespace(type="text", text="ok")], usage=None)
        create = AsyncMock(side_effect=[Exception("overloaded_error"), message])
        provider = self._provider(create)

        generated = await provider.generate_text("hello")

        assert generated.text == "ok"
        assert generated.usage_tokens == 0
        assert create.await_count == 2

    async def test_sdk_error_is_wrapped(self, no_sleep):
        provider = self._provider(AsyncMock(side_effect=Exception("invalid x-api-key")))

        with pytest.raises(AIProviderError) as exc_info:
            await provider.generate_text("hello")

        assert exc_info.value.provider == "anthropic"
        no_sleep.assert_not_awaited()
