"""
Provider-neutral types shared by the LLM adapters.

Chat history is kept in a neutral shape and converted to each SDK's native
format by the provider:

    {"role": "user", "content": "..."}
    {"role": "assistant", "content": "...", "tool_calls": [{"id", "name", "arguments"}]}
    {"role": "tool", "tool_call_id": "...", "name": "...", "content": "<json>"}
"""

import asyncio
import logging
import random
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

_TRANSIENT_MARKERS = (
    "rate_limit",
    "rate limit",
    "429",
    "500",
    "502",
    "503",
    "504",
    "overloaded",
    "connection",
    "timeout",
    "timed out",
)


class AIProviderError(Exception):
    """Raised when an LLM provider call fails after retries."""

    def __init__(self, message: str, provider: Optional[str] = None):
        self.provider = provider
        super().__init__(message)


async def _retry_with_backoff(coro_factory, max_retries=3, base_delay=1.0):
    """Retry an async operation with exponential backoff + jitter."""
    for attempt in range(max_retries + 1):
        try:
            return await coro_factory()
        except Exception as e:
            error_str = str(e).lower()
            is_transient = any(k in error_str for k in _TRANSIENT_MARKERS)
            if not is_transient or attempt == max_retries:
                raise
            delay = base_delay * (2 ** attempt) + random.uniform(0, 1)
            logger.warning(
                "Transient API error (attempt %d/%d), retrying in %.1fs: %s",
                attempt + 1, max_retries, delay, str(e),
            )
            await asyncio.sleep(delay)


def sanitize_prompt_input(text: Optional[str], max_length: int) -> str:
    """Strip control characters and limit length to prevent prompt injection."""
    if not text:
        return ""
    text = re.sub(r"[\r\n\t\x00-\x1f\x7f]", " ", text)
    text = re.sub(r" +", " ", text).strip()
    return text[:max_length]


@dataclass
class GeneratedText:
    """Result of a single-prompt generation."""

    text: str
    model: str
    usage_tokens: int = 0


@dataclass
class ToolSpec:
    """A function the model may call; ``parameters`` is a JSON schema."""

    name: str
    description: str
    parameters: Dict[str, Any]


@dataclass
class ToolCall:
    id: str
    name: str
    arguments: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "arguments": self.arguments}


@dataclass
class ChatTurn:
    """One model step: optional text plus any tool calls it requested."""

    text: str = ""
    tool_calls: List[ToolCall] = field(default_factory=list)
    model: str = ""
    usage_tokens: int = 0


class LLMProvider(ABC):
    """Common interface over the OpenAI, Groq and Anthropic SDKs."""

    name: str = "base"
    api_key_env: str = ""

    def __init__(self, model: str, max_tokens: int):
        self._model = model
        self._max_tokens = max_tokens

    @property
    def model(self) -> str:
        return self._model

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when an API key is present and network calls will be made."""

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None,
    ) -> GeneratedText:
        """Generate a single completion for ``prompt``."""

    @abstractmethod
    async def chat(
        self,
        messages: List[Dict[str, Any]],
        system: Optional[str] = None,
        tools: Optional[List[ToolSpec]] = None,
        temperature: float = 0.7,
        model: Optional[str] = None,
    ) -> ChatTurn:
        """Run one model step over a neutral chat history."""

    def _mock_text(self) -> str:
        return (
            "This is a mock response for development. "
            f"Configure {self.api_key_env} to use real AI."
        )

    def _mock_turn(self) -> ChatTurn:
        return ChatTurn(text=self._mock_text(), model=f"{self._model} (mock)")
