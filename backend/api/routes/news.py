"""
News discovery API routes backed by NewsAPI.org.
"""

import logging
import random
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from adapters.news import (
    NewsAPIAdapter,
    NewsAPIError,
    NewsAPINotConfiguredError,
    get_news_adapter,
)
from api.dependencies import get_current_user, get_rng
from api.middleware.rate_limit import get_rate_limit, limiter
from api.schemas.news import NewsSearchRequest
from infrastructure.database.connection import get_db
from infrastructure.database.models import NewsArticle, NewsStatus, User
from services.news_discovery import average_viral_score, reach_label, score_news, top_picks

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/news", tags=["News"])

MAX_PAGE_SIZE = 20


def _parse_published(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        logger.warning("Unparseable publishedAt from NewsAPI: %s", value)
        return None


def _not_configured() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="NewsAPI key not configured",
    )


@router.get("/trending")
async def trending_news(
    category: str = Query("general", max_length=50),
    current_user: User = Depends(get_current_user),
    news: NewsAPIAdapter = Depends(get_news_adapter),
):
    """
    Top English headlines for a category.
    """
    try:
        result = await news.top_headlines(category=category, page_size=MAX_PAGE_SIZE)
    except NewsAPINotConfiguredError:
        raise _not_configured()
    except NewsAPIError as e:
        logger.error("Trending news failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch news",
        )

    return {
        "status": "success",
        "articles": [
            {
                "title": item.title,
                "description": item.description,
                "url": item.url,
                "source": item.source,
                "publishedAt": item.published_at,
                "urlToImage": item.url_to_image,
                "content": item.content,
                "category": category,
            }
            for item in result.articles
        ],
        "totalResults": result.total_results,
    }


@router.post("/search")
@limiter.limit(get_rate_limit("news_search"))
async def search_news(
    request: Request,
    body: NewsSearchRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    news: NewsAPIAdapter = Depends(get_news_adapter),
    rng: random.Random = Depends(get_rng),
):
    """
    Search NewsAPI, score each result and save it as a discovered article.
    """
    query = f"{' OR '.join(body.keywords)} {body.niche or ''}".strip()
    page_size = min(body.limit, MAX_PAGE_SIZE)

    try:
        result = await news.search_everything(query, language="en", page_size=page_size)
    except NewsAPINotConfiguredError:
        raise _not_configured()
    except NewsAPIError as e:
        logger.error("News search failed for %r: %s", query, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch news from NewsAPI",
        )

    articles = []
    for item in result.articles[:page_size]:
        scores = score_news(rng)
        articles.append(
            {
                "title": item.title,
                "summary": item.description or (item.content or "")[:200],
                "content": item.content or item.description,
                "source": item.source,
                "url": item.url,
                "publishedAt": item.published_at,
                "urlToImage": item.url_to_image,
                "viralScore": scores.viral_score,
                "revenueScore": scores.revenue_score,
                "trendingPotential": scores.trending_potential,
                "estimatedReach": scores.estimated_reach,
                "keywords": body.keywords,
            }
        )

    for a in articles:
        db.add(
            NewsArticle(
                user_id=current_user.id,
                title=a["title"],
                original_content=a["content"],
                source_url=a["url"],
                source_name=a["source"],
                published_at=_parse_published(a["publishedAt"]),
                keywords=body.keywords,
                niche=body.niche or "general",
                viral_score=a["viralScore"],
                revenue_score=a["revenueScore"],
                trending_potential=a["trendingPotential"],
                estimated_reach=a["estimatedReach"],
                status=NewsStatus.DISCOVERED.value,
            )
        )
    if articles:
        await db.commit()

    logger.info("News search %r stored %d articles for user %s", query, len(articles), current_user.id)

    return {
        "success": True,
        "totalFound": len(articles),
        "articles": articles,
        "topRecommendations": [
            {
                "title": a["title"],
                "url": a["url"],
                "viralScore": f"{a['viralScore']:.1f}",
                "revenueScore": f"{a['revenueScore']:.1f}",
                "estimatedReach": reach_label(a["estimatedReach"]),
            }
            for a in top_picks(articles)
        ],
        "searchMetadata": {
            "keywords": body.keywords,
            "niche": body.niche,
            "searchedAt": datetime.now().astimezone().isoformat(),
            "averageViralScore": average_viral_score(articles),
        },
    }
