"""
AI text generation routed by task type.

Route handlers call this service instead of a provider directly so that model
selection, cost estimation and logging happen in one place.
"""

import logging
import time
from typing import Optional

from adapters.ai import GeneratedText, LLMProvider, get_provider
from core.ai_router import ModelSelection, TaskType, estimate_cost, select_model

logger = logging.getLogger(__name__)


class AIService:
    """Generate text with whichever provider the router picks for a task."""

    def provider_for_task(
        self,
        task: TaskType | str,
        preference: Optional[str] = None,
    ) -> tuple[LLMProvider, ModelSelection]:
        selection = select_model(task, preference)
        return get_provider(selection.provider), selection

    async def generate_for_task(
        self,
        task: TaskType | str,
        prompt: str,
        system: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        preference: Optional[str] = None,
    ) -> GeneratedText:
        """
        Generate a completion for ``prompt`` on the model routed for ``task``.

        Args:
            task: TaskType or its string value
            prompt: User prompt
            system: Optional system prompt
            temperature: Sampling temperature
            max_tokens: Output cap (defaults to the provider's configured cap)
            preference: Optional user model preference

        Returns:
            GeneratedText with the text, model id and token usage

        Raises:
            AIProviderError: If the provider call fails
        """
        provider, selection = self.provider_for_task(task, preference)
        started = time.perf_counter()

        result = await provider.generate_text(
            prompt,
            system=system,
            temperature=temperature,
            max_tokens=max_tokens,
            model=selection.model,
        )

        elapsed = time.perf_counter() - started
        logger.info(
            "Generated %s with %s in %.2fs (%d tokens, ~$%.4f)",
            TaskType(task).value,
            result.model,
            elapsed,
            result.usage_tokens,
            estimate_cost(result.model, result.usage_tokens),
            extra={"provider": selection.provider, "model": result.model},
        )
        return result
