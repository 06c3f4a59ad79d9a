"""
Anthropic Claude adapter.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import anthropic

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


def _to_native_messages(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Convert neutral history to Messages API blocks.

    Consecutive tool results are folded into a single user turn, which the
    Messages API requires after an assistant ``tool_use`` turn.
    """
    native: List[Dict[str, Any]] = []
    for msg in messages:
        role = msg["role"]
        if role == "tool":
            block = {
                "type": "tool_result",
                "tool_use_id": msg["tool_call_id"],
                "content": msg["content"],
            }
            if native and native[-1]["role"] == "user" and isinstance(native[-1]["content"], list):
                native[-1]["content"].append(block)
            else:
                native.append({"role": "user", "content": [block]})
        elif role == "assistant":
            blocks: List[Dict[str, Any]] = []
            if msg.get("content"):
                blocks.append({"type": "text", "text": msg["content"]})
            for tc in msg.get("tool_calls") or []:
                blocks.append(
                    {"type": "tool_use", "id": tc["id"], "name": tc["name"], "input": tc["arguments"]}
                )
            native.append({"role": "assistant", "content": blocks or ""})
        else:
            native.append({"role": "user", "content": msg.get("content") or ""})
    return native


class AnthropicProvider(LLMProvider):
    """Claude models through ``anthropic.AsyncAnthropic``."""

    name = "anthropic"
    api_key_env = "ANTHROPIC_API_KEY"

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        super().__init__(model or settings.anthropic_model, settings.ai_max_tokens)
        key = api_key if api_key is not None else settings.anthropic_api_key
        if key:
            self._client = anthropic.AsyncAnthropic(
                api_key=key,
                timeout=float(settings.ai_timeout),
            )
        else:
            self._client = None

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def _create(self, **kwargs):
        try:
            return await _retry_with_backoff(lambda: self._client.messages.create(**kwargs))
        except Exception as e:
            logger.error("anthropic request failed: %s", e, extra={"provider": self.name})
            raise AIProviderError(f"anthropic request failed: {e}", provider=self.name) from e

    @staticmethod
    def _usage(message) -> int:
        usage = getattr(message, "usage", None)
        if not usage:
            return 0
        return (usage.input_tokens or 0) + (usage.output_tokens or 0)

    async def generate_text(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None,
    ) -> GeneratedText:
        if not self._client:
            # Return mock response for development
            return GeneratedText(text=self._mock_text(), model=f"{self._model} (mock)")

        target_model = model or self._model
        kwargs: Dict[str, Any] = {
            "model": target_model,
            "max_tokens": max_tokens or self._max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        message = await self._create(**kwargs)
        text = "".join(b.text for b in message.content if getattr(b, "type", "") == "text")
        logger.debug("Generated text response (%d chars)", len(text))
        return GeneratedText(text=text, model=target_model, usage_tokens=self._usage(message))

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
            "max_tokens": self._max_tokens,
            "temperature": temperature,
            "messages": _to_native_messages(messages),
        }
        if system:
            kwargs["system"] = system
        if tools:
            kwargs["tools"] = [
                {"name": t.name, "description": t.description, "input_schema": t.parameters}
                for t in tools
            ]

        message = await self._create(**kwargs)
        text_parts: List[str] = []
        calls: List[ToolCall] = []
        for block in message.content:
            block_type = getattr(block, "type", "")
            if block_type == "text":
                text_parts.append(block.text)
            elif block_type == "tool_use":
                arguments = block.input if isinstance(block.input, dict) else json.loads(block.input or "{}")
                calls.append(ToolCall(id=block.id, name=block.name, arguments=arguments))

        return ChatTurn(
            text="".join(text_parts),
            tool_calls=calls,
            model=target_model,
            usage_tokens=self._usage(message),
        )
