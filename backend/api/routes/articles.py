"""
News article API routes: listing discovered articles and rewriting them in a
journalist style.
"""

import json
import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_current_user
from api.middleware.rate_limit import get_rate_limit, limiter
from api.schemas.news import (
    ArticleListResponse,
    ArticleRewriteResponse,
    RewriteMetrics,
    RewriteRequest,
    RewriteResponse,
)
from adapters.ai import sanitize_prompt_input
from core.ai_router import TaskType
from infrastructure.database.connection import get_db
from infrastructure.database.models import (
    ArticleRewrite,
    JournalistStyle,
    NewsArticle,
    NewsStatus,
    User,
)
from services import AIService, get_ai_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])

REWRITE_MAX_TOKENS = 2000
REWRITE_READABILITY = 8.5
REWRITE_ENGAGEMENT = "high"
REWRITE_IMPROVEMENT = 85
REWRITE_SUGGESTIONS = [
    "Applied professional journalist style",
    "Optimized paragraph structure",
    "Enhanced storytelling elements",
    "Improved readability and engagement",
]


def build_rewrite_prompt(
    article: NewsArticle,
    style: JournalistStyle,
    target_audience: Optional[str],
    tone_adjustment: Optional[str],
) -> str:
    target_audience = sanitize_prompt_input(target_audience, 500) or "general readers"
    tone_adjustment = sanitize_prompt_input(tone_adjustment, 100) or "none"

    return f"""Rewrite this article in the style of a {style.name}.

Style Description: {style.description}
Tone: {style.tone}
Style Characteristics: {json.dumps(style.style_characteristics)}
Example: {style.example_text}

Target Audience: {target_audience}
Tone Adjustment: {tone_adjustment}

Original Article:
Title: {article.title}
Content: {article.original_content}

Instructions:
1. Maintain all factual information
2. Apply the journalist style naturally
3. Adjust tone as specified
4. Keep the article engaging and professional
5. Optimize for readability

Rewritten Article:"""


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    status_filter: Optional[str] = Query(None, alias="status"),
    limit: int = Query(50, ge=1, le=200),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List the user's discovered news articles, newest first.
    """
    query = (
        select(NewsArticle)
        .where(NewsArticle.user_id == current_user.id)
        .order_by(NewsArticle.created_at.desc())
        .limit(limit)
    )
    if status_filter:
        query = query.where(NewsArticle.status == status_filter)

    result = await db.execute(query)
    return {"articles": result.scalars().all()}


@router.post("/rewrite", response_model=RewriteResponse)
@limiter.limit(get_rate_limit("generation"))
async def rewrite_article(
    request: Request,
    body: RewriteRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    ai_service: AIService = Depends(get_ai_service),
):
    """
    Rewrite a news article in one of the user's journalist styles.

    The rewrite is stored, the article is marked as rewritten and the
    style's usage counter is incremented.
    """
    article_result = await db.execute(
        select(NewsArticle).where(
            NewsArticle.id == body.article_id,
            NewsArticle.user_id == current_user.id,
        )
    )
    article = article_result.scalar_one_or_none()

    style_result = await db.execute(
        select(JournalistStyle).where(
            JournalistStyle.id == body.style_id,
            JournalistStyle.user_id == current_user.id,
        )
    )
    style = style_result.scalar_one_or_none()

    if not article or not style:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article or style not found",
        )

    generated = await ai_service.generate_for_task(
        TaskType.NEWS_REWRITE,
        build_rewrite_prompt(article, style, body.target_audience, body.tone_adjustment),
        temperature=0.7,
        max_tokens=REWRITE_MAX_TOKENS,
    )

    # Rewrites count words on single spaces
    word_count = len(generated.text.split(" "))
    reading_time = math.ceil(word_count / 200)

    rewrite = ArticleRewrite(
        article_id=article.id,
        journalist_style_id=style.id,
        rewritten_content=generated.text,
        style_applied=style.name,
        tone_adjustment=body.tone_adjustment or "none",
        readability_score=REWRITE_READABILITY,
        engagement_potential=REWRITE_ENGAGEMENT,
        word_count=word_count,
        reading_time_minutes=reading_time,
        improvement_score=REWRITE_IMPROVEMENT,
        suggestions=list(REWRITE_SUGGESTIONS),
        ai_model=generated.model,
    )
    db.add(rewrite)

    article.status = NewsStatus.REWRITTEN.value
    style.usage_count = (style.usage_count or 0) + 1

    await db.commit()
    await db.refresh(rewrite)

    logger.info(
        "Rewrote article %s with style %s (%d words)", article.id, style.id, word_count
    )

    return RewriteResponse(
        success=True,
        rewrite=ArticleRewriteResponse.model_validate(rewrite),
        metrics=RewriteMetrics(
            wordCount=word_count,
            readingTime=f"{reading_time} min",
            improvementScore=REWRITE_IMPROVEMENT,
        ),
    )
