"""News discovery adapters."""

from .newsapi_adapter import (
    NewsAPIAdapter,
    NewsAPIError,
    NewsAPINotConfiguredError,
    NewsItem,
    NewsResult,
    get_news_adapter,
)

__all__ = [
    "NewsAPIAdapter",
    "NewsAPIError",
    "NewsAPINotConfiguredError",
    "NewsItem",
    "NewsResult",
    "get_news_adapter",
]
