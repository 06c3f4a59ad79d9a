"""
News discovery and article rewrite schemas.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .common import CamelRequest, ORMResponse


class NewsArticleResponse(ORMResponse):
    id: str
    user_id: str
    title: str
    original_content: Optional[str] = None
    source_url: Optional[str] = None
    source_name: Optional[str] = None
    published_at: Optional[datetime] = None
    keywords: Optional[List[str]] = None
    niche: Optional[str] = None
    viral_score: float
    revenue_score: float
    trending_potential: float
    estimated_reach: int
    status: str
    created_at: datetime


class ArticleListResponse(BaseModel):
    articles: List[NewsArticleResponse]


class RewriteRequest(CamelRequest):
    """Rewrite a discovered article in a saved journalist style."""

    article_id: str
    style_id: str
    target_audience: Optional[str] = None
    tone_adjustment: Optional[
        Literal["more_formal", "more_casual", "more_technical", "more_accessible"]
    ] = None


class ArticleRewriteResponse(ORMResponse):
    id: str
    article_id: str
    journalist_style_id: Optional[str] = None
    rewritten_content: str
    style_applied: Optional[str] = None
    tone_adjustment: Optional[str] = None
    readability_score: float
    engagement_potential: Optional[str] = None
    word_count: int
    reading_time_minutes: int
    improvement_score: int
    suggestions: Optional[List[str]] = None
    ai_model: Optional[str] = None
    created_at: datetime


class RewriteMetrics(BaseModel):
    wordCount: int
    readingTime: str
    improvementScore: int


class RewriteResponse(BaseModel):
    success: bool = True
    rewrite: ArticleRewriteResponse
    metrics: RewriteMetrics


class NewsSearchRequest(CamelRequest):
    keywords: List[str] = Field(..., min_length=1)
    niche: Optional[str] = None
    limit: int = Field(default=10, ge=1)
