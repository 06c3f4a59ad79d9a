# AI Adapters
# OpenAI, Groq and Anthropic chat providers

from functools import lru_cache

from .anthropic_adapter import AnthropicProvider
from .base import (
    AIProviderError,
    ChatTurn,
    GeneratedText,
    LLMProvider,
    ToolCall,
    ToolSpec,
    sanitize_prompt_input,
)
from .openai_adapter import GroqProvider, OpenAIProvider

_PROVIDERS = {
    "openai": OpenAIProvider,
    "groq": GroqProvider,
    "anthropic": AnthropicProvider,
}


@lru_cache
def get_provider(name: str) -> LLMProvider:
    """Return the process-wide provider instance for ``name``."""
    try:
        return _PROVIDERS[name]()
    except KeyError:
        raise ValueError(f"Unknown AI provider: {name}") from None


__all__ = [
    "AIProviderError",
    "AnthropicProvider",
    "ChatTurn",
    "GeneratedText",
    "GroqProvider",
    "LLMProvider",
    "OpenAIProvider",
    "ToolCall",
    "ToolSpec",
    "get_provider",
    "sanitize_prompt_input",
]
