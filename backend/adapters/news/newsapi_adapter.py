"""
NewsAPI.org adapter for headline and keyword news discovery.

Wraps the v2 ``top-headlines`` and ``everything`` endpoints. Authentication
is the ``X-Api-Key`` header.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from infrastructure.config.settings import settings

logger = logging.getLogger(__name__)


# Custom Exceptions
class NewsAPIError(Exception):
    """Raised when NewsAPI returns an error or cannot be reached."""
    pass


class NewsAPINotConfiguredError(NewsAPIError):
    """Raised when no NewsAPI key is configured."""
    pass


@dataclass
class NewsItem:
    """A single article returned by NewsAPI."""

    title: str
    description: Optional[str]
    content: Optional[str]
    url: Optional[str]
    source: Optional[str]
    published_at: Optional[str]
    url_to_image: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "NewsItem":
        return cls(
            title=data.get("title") or "",
            description=data.get("description"),
            content=data.get("content"),
            url=data.get("url"),
            source=(data.get("source") or {}).get("name"),
            published_at=data.get("publishedAt"),
            url_to_image=data.get("urlToImage"),
        )


@dataclass
class NewsResult:
    articles: List[NewsItem] = field(default_factory=list)
    total_results: int = 0


class NewsAPIAdapter:
    """Async client for NewsAPI.org."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize NewsAPI adapter.

        Args:
            api_key: NewsAPI key (defaults to NEWSAPI_KEY)
            base_url: API root, e.g. "https://newsapi.org/v2"
            timeout: Request timeout in seconds
        """
        self.api_key = api_key if api_key is not None else settings.newsapi_key
        self.base_url = (base_url or settings.newsapi_base_url).rstrip("/")
        self.timeout = timeout or settings.newsapi_timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client with auth headers."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"X-Api-Key": self.api_key or "", "Accept": "application/json"},
                timeout=self.timeout,
            )
        return self._client

    async def close(self):
        """Close the HTTP client connection."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _handle_response(self, response: httpx.Response) -> Dict[str, Any]:
        """
        Validate an API response and return its JSON body.

        Raises:
            NewsAPIError: On non-2xx status, an ``"status": "error"`` body,
                or an unparseable response
        """
        if response.status_code >= 400:
            try:
                error_data = response.json()
                error_message = error_data.get("message", "Unknown error")
                error_code = error_data.get("code", response.status_code)
            except ValueError:
                error_message = response.text or f"HTTP {response.status_code}"
                error_code = response.status_code

            logger.error("NewsAPI error [%s]: %s", error_code, error_message)
            raise NewsAPIError(f"NewsAPI error [{error_code}]: {error_message}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Failed to parse NewsAPI response: %s", e)
            raise NewsAPIError(f"Invalid JSON response: {e}") from e

        if data.get("status") == "error":
            raise NewsAPIError(f"NewsAPI error [{data.get('code')}]: {data.get('message')}")
        return data

    async def _get(self, endpoint: str, params: Dict[str, Any]) -> NewsResult:
        if not self.is_configured:
            raise NewsAPINotConfiguredError("NewsAPI key not configured")

        try:
            response = await self._get_client().get(f"/{endpoint}", params=params)
        except httpx.TimeoutException as e:
            logger.error("NewsAPI timeout on %s: %s", endpoint, e)
            raise NewsAPIError(f"NewsAPI did not respond within {self.timeout} seconds") from e
        except httpx.HTTPError as e:
            logger.error("Failed to reach NewsAPI: %s", e)
            raise NewsAPIError(f"Cannot connect to NewsAPI: {e}") from e

        data = self._handle_response(response)
        articles = [NewsItem.from_api(a) for a in data.get("articles") or []]
        logger.info("NewsAPI %s returned %d articles", endpoint, len(articles))
        return NewsResult(articles=articles, total_results=data.get("totalResults", len(articles)))

    async def top_headlines(self, category: str = "general", page_size: int = 20) -> NewsResult:
        """Fetch English top headlines for a category."""
        return await self._get(
            "top-headlines",
            {"category": category, "language": "en", "pageSize": page_size},
        )

    async def search_everything(
        self,
        query: str,
        language: str = "en",
        page_size: int = 20,
    ) -> NewsResult:
        """Search all articles, newest first."""
        return await self._get(
            "everything",
            {
                "q": query,
                "language": language,
                "sortBy": "publishedAt",
                "pageSize": page_size,
            },
        )


_news_adapter: Optional[NewsAPIAdapter] = None


def get_news_adapter() -> NewsAPIAdapter:
    """FastAPI dependency returning the shared NewsAPI client."""
    global _news_adapter
    if _news_adapter is None:
        _news_adapter = NewsAPIAdapter()
    return _news_adapter
