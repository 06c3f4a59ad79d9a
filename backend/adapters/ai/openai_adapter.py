"""
OpenAI and Groq chat-completions adapters.

Groq exposes an OpenAI-compatible chat completions API, so both providers
share the request/response mapping and differ only in the client they build.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import groq
import openai

from infrastructure.config.settings import settings

from .base import (
    AIProviderError,
    ChatTurn,
    GeneratedText,
    LLMProvider,
    ToolCall,
    ToolSpec,
    _retry_with_backoff,
)

logger = logging.getLogger(__name__)


def _to_native_messages(
    messages: List[Dict[str, Any]], system: Optional[str]
) -> List[Dict[str, Any]]:
    native: List[Dict[str, Any]] = []
    if system:
        native.append({"role": "system", "content": system})
    for msg in messages:
        role = msg["role"]
        if role == "tool":
            native.append(
                {
                    "role": "tool",
                    "tool_call_id": msg["tool_call_id"],
                    "content": msg["content"],
                }
            )
        elif role == "assistant" and msg.get("tool_calls"):
            native.append(
                {
                    "role": "assistant",
                    "content": msg.get("content") or None,
                    "tool_calls": [
                        {
                            "id": tc["id"],
                            "type": "function",
                            "function": {
                                "name": tc["name"],
                                "arguments": json.dumps(tc["arguments"]),
                            },
                        }
                        for tc in msg["tool_calls"]
                    ],
                }
            )
        else:
            native.append({"role": role, "content": msg.get("content") or ""})
    return native


def _to_native_tools(tools: List[ToolSpec]) -> List[Dict[str, Any]]:
    return [
        {
            "type": "function",
            "function": {
                "name": t.name,
                "description": t.description,
                "parameters": t.parameters,
            },
        }
        for t in tools
    ]


def _parse_arguments(raw: Optional[str]) -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Model returned non-JSON tool arguments: %.200s", raw)
        return {}
    return parsed if isinstance(parsed, dict) else {}


class OpenAIProvider(LLMProvider):
    """Chat completions over the official ``openai`` SDK."""

    name = "openai"
    api_key_env = "OPENAI_API_KEY"

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        super().__init__(model or settings.openai_model, settings.ai_max_tokens)
        self._client = self._build_client(api_key if api_key is not None else settings.openai_api_key)

    def _build_client(self, api_key: Optional[str]):
        if not api_key:
            return None
        return openai.AsyncOpenAI(api_key=api_key, timeout=float(settings.ai_timeout))

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def _create(self, **kwargs):
        try:
            return await _retry_with_backoff(
                lambda: self._client.chat.completions.create(**kwargs)
            )
        except Exception as e:
            logger.error("%s completion failed: %s", self.name, e, extra={"provider": self.name})
            raise AIProviderError(f"{self.name} request failed: {e}", provider=self.name) from e

    async def generate_text(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None,
    ) -> GeneratedText:
        if not self._client:
            return GeneratedText(text=self._mock_text(), model=f"{self._model} (mock)")

        target_model = model or self._model
        response = await self._create(
            model=target_model,
            messages=_to_native_messages([{"role": "user", "content": prompt}], system),
            temperature=temperature,
            max_tokens=max_tokens or self._max_tokens,
        )
        text = response.choices[0].message.content or ""
        usage = response.usage.total_tokens if response.usage else 0
        logger.debug("Generated %d chars with %s", len(text), target_model)
        return GeneratedText(text=text, model=target_model, usage_tokens=usage)

    async def chat(
        self,
        messages: List[Dict[str, Any]],
        system: Optional[str] = None,
        tools: Optional[List[ToolSpec]] = None,
        temperature: float = 0.7,
        model: Optional[str] = None,
    ) -> ChatTurn:
        if not self._client:
            return self._mock_turn()

        target_model = model or self._model
        kwargs: Dict[str, Any] = {
            "model": target_model,
            "messages": _to_native_messages(messages, system),
            "temperature": temperature,
            "max_tokens": self._max_tokens,
        }
        if tools:
            kwargs["tools"] = _to_native_tools(tools)
            kwargs["tool_choice"] = "auto"

        response = await self._create(**kwargs)
        message = response.choices[0].message
        calls = [
            ToolCall(
                id=tc.id,
                name=tc.function.name,
                arguments=_parse_arguments(tc.function.arguments),
            )
            for tc in (message.tool_calls or [])
        ]
        return ChatTurn(
            text=message.content or "",
            tool_calls=calls,
            model=target_model,
            usage_tokens=response.usage.total_tokens if response.usage else 0,
        )


class GroqProvider(OpenAIProvider):
    """Llama models served by Groq."""

    name = "groq"
    api_key_env = "GROQ_API_KEY"

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        LLMProvider.__init__(self, model or settings.groq_model, settings.ai_max_tokens)
        self._client = self._build_client(api_key if api_key is not None else settings.groq_api_key)

    def _build_client(self, api_key: Optional[str]):
        if not api_key:
            return None
        return groq.AsyncGroq(api_key=api_key, timeout=float(settings.ai_timeout))
