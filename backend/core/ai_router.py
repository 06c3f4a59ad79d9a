"""
Task-based model routing.

Quality-sensitive writing tasks go to the strongest configured model; chat,
analysis and search go to Groq, which is fast and cheap.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from infrastructure.config.settings import settings


class TaskType(str, Enum):
    """Kinds of work the router chooses a model for."""

    JOURNALIST_STYLE = "journalist-style"
    SEO_ARTICLE = "seo-article"
    NEWS_REWRITE = "news-rewrite"
    CHAT_SIMPLE = "chat-simple"
    ANALYSIS = "analysis"
    SEARCH = "search"


QUALITY_TASKS = frozenset(
    {TaskType.JOURNALIST_STYLE, TaskType.SEO_ARTICLE, TaskType.NEWS_REWRITE}
)

_DISPLAY_NAMES = {
    "gpt-4o": "GPT-4o",
    "llama-3.3-70b-versatile": "Llama 3.3 70B",
}

# USD per 1M tokens (blended input/output)
_COST_PER_MILLION = {
    "gpt-4": 2.5,
    "claude": 3.0,
    "llama": 0.1,
}


@dataclass(frozen=True)
class ModelSelection:
    provider: str
    model: str
    name: str


def _openai() -> ModelSelection:
    model = settings.openai_model
    return ModelSelection(provider="openai", model=model, name=_DISPLAY_NAMES.get(model, model))


def _groq() -> ModelSelection:
    model = settings.groq_model
    return ModelSelection(provider="groq", model=model, name=_DISPLAY_NAMES.get(model, model))


def _anthropic() -> ModelSelection:
    return ModelSelection(
        provider="anthropic", model=settings.anthropic_model, name="Claude"
    )


def select_model(task_type: TaskType | str, user_preference: Optional[str] = None) -> ModelSelection:
    """
    Pick the provider and model for a task.

    Args:
        task_type: A TaskType or its string value
        user_preference: "openai", "groq", "anthropic" or "auto"/None

    Returns:
        ModelSelection with provider key, model id and display name
    """
    task = TaskType(task_type)

    # Explicit preferences win when they can be honoured
    if user_preference == "openai" and settings.openai_api_key:
        return _openai()
    if user_preference == "groq":
        return _groq()
    if user_preference == "anthropic" and settings.anthropic_api_key:
        return _anthropic()

    if task in QUALITY_TASKS:
        if settings.openai_api_key:
            return _openai()
        if settings.anthropic_api_key:
            return _anthropic()

    return _groq()


def estimate_cost(model: str, tokens: int) -> float:
    """Estimated USD cost of ``tokens`` tokens on ``model``."""
    name = model.lower()
    if "gpt-4" in name:
        rate = _COST_PER_MILLION["gpt-4"]
    elif "claude" in name:
        rate = _COST_PER_MILLION["claude"]
    else:
        rate = _COST_PER_MILLION["llama"]
    return tokens / 1_000_000 * rate
