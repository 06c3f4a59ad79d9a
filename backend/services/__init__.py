"""
Service layer for business logic.
"""

from functools import lru_cache

from services.ai_service import AIService


@lru_cache
def get_ai_service() -> AIService:
    """
    Get singleton AI service instance.

    Returns:
        AIService routing generation through the configured providers
    """
    return AIService()


__all__ = [
    "AIService",
    "get_ai_service",
]
