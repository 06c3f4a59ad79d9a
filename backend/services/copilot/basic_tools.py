"""
Tools for the basic content copilot.
"""

import json
import logging
from datetime import timedelta
from typing import Literal, Optional

from pydantic import Field
from sqlalchemy import select

from adapters.news import NewsAPIError
from infrastructure.database.models import ArticlePerformance, JournalistStyle
from services.content_metrics import analyze_seo_content, word_count

from .registry import ToolContext, ToolParams, ToolRegistry

logger = logging.getLogger(__name__)

basic_registry = ToolRegistry("basic")

DEMO_SOURCES = ("TechCrunch", "BBC News", "Reuters")
REVENUE_SAMPLE_SIZE = 100
# NewsAPI rejects larger pageSize values
MAX_NEWS_PAGE_SIZE = 100


class NewsHunterParams(ToolParams):
    topic: str = Field(description="Topic to search for news")
    limit: int = Field(default=5, ge=1, description="Number of results to return")
    language: str = Field(default="en", description="Language code (en, pt, es, etc)")


@basic_registry.register(
    "newsHunter",
    "Search for latest news and trends in specified topics. "
    "Returns recent articles and updates from real news sources.",
    NewsHunterParams,
)
async def news_hunter(params: NewsHunterParams, ctx: ToolContext) -> dict:
    results = None
    if ctx.news.is_configured:
        try:
            found = await ctx.news.search_everything(
                params.topic,
                language=params.language,
                page_size=min(params.limit, MAX_NEWS_PAGE_SIZE),
            )
            results = [
                {
                    "title": item.title,
                    "summary": item.description or (item.content or "")[:200],
                    "url": item.url,
                    "source": item.source,
                    "publishedAt": item.published_at,
                    "imageUrl": item.url_to_image,
                }
                for item in found.articles[: params.limit]
            ]
        except NewsAPIError as e:
            logger.warning("newsHunter falling back to demo data: %s", e)

    real_data = results is not None
    if not real_data:
        now = ctx.now()
        topic_slug = "-".join(params.topic.lower().split())
        results = [
            {
                "title": f"{params.topic}: Latest Developments and Analysis {i + 1}",
                "summary": (
                    f"Comprehensive coverage of {params.topic} including market trends, "
                    "expert opinions, and future outlook."
                ),
                "url": f"https://news.example.com/{topic_slug}-{i + 1}",
                "source": DEMO_SOURCES[i % len(DEMO_SOURCES)],
                "publishedAt": (now - timedelta(hours=i)).isoformat(),
                "imageUrl": None,
            }
            for i in range(min(params.limit, 5))
        ]

    return {
        "success": True,
        "results": results,
        "count": len(results),
        "topic": params.topic,
        "searchedAt": ctx.now().isoformat(),
        "note": (
            "Using real NewsAPI data"
            if real_data
            else "Using demo data - add NEWSAPI_KEY env var for real news"
        ),
    }


class ContentRewriterParams(ToolParams):
    content: str = Field(description="Content to rewrite")
    style: Literal["professional", "casual", "technical", "persuasive", "storytelling"] = "professional"
    target_length: Optional[int] = Field(default=None, description="Target word count")


@basic_registry.register(
    "contentRewriter",
    "Rewrite content in professional journalist styles with SEO optimization",
    ContentRewriterParams,
)
async def content_rewriter(params: ContentRewriterParams, ctx: ToolContext) -> dict:
    length_hint = f" with approximately {params.target_length} words" if params.target_length else ""
    return {
        "originalLength": word_count(params.content),
        "style": params.style,
        "targetLength": params.target_length,
        "instruction": f"Rewrite the following content in a {params.style} style{length_hint}:\n\n{params.content}",
        "note": "Content will be rewritten by the AI model based on the style parameters",
    }


class JournalistStyleRewriterParams(ToolParams):
    content: str = Field(description="Content to rewrite")
    style_id: Optional[str] = Field(default=None, description="Specific journalist style ID")
    target_audience: Optional[str] = Field(
        default=None, description="Target audience (e.g., 'tech professionals', 'general public')"
    )


@basic_registry.register(
    "journalistStyleRewriter",
    "Rewrite content using professional journalist styles from the user's saved style library.",
    JournalistStyleRewriterParams,
)
async def journalist_style_rewriter(params: JournalistStyleRewriterParams, ctx: ToolContext) -> dict:
    query = select(JournalistStyle).where(JournalistStyle.user_id == ctx.user.id)
    if params.style_id:
        query = query.where(JournalistStyle.id == params.style_id)
    else:
        query = query.where(JournalistStyle.is_default.is_(True))

    result = await ctx.db.execute(query.limit(1))
    style = result.scalar_one_or_none()

    if style is None:
        return {
            "availableStyles": [],
            "note": "No journalist styles found. Create custom styles under Writing Styles to get started.",
            "suggestion": "I can help you create styles like 'Tech Blogger', 'Formal Reporter', 'Casual Influencer', etc.",
        }

    style.usage_count = (style.usage_count or 0) + 1
    await ctx.db.commit()

    audience_line = f"- Target Audience: {params.target_audience}\n" if params.target_audience else ""
    instruction = (
        f'Rewrite the following content in the style of "{style.name}".\n\n'
        "Style Guidelines:\n"
        f"- Description: {style.description}\n"
        f"- Tone: {style.tone}\n"
        f"- Characteristics: {json.dumps(style.style_characteristics)}\n"
        f'- Example: "{style.example_text}"\n'
        f"{audience_line}\n"
        f"Content to rewrite:\n{params.content}\n\n"
        "Apply the style naturally while maintaining factual accuracy and improving engagement."
    )

    return {
        "styleUsed": {
            "id": style.id,
            "name": style.name,
            "description": style.description,
            "tone": style.tone,
            "example": style.example_text,
        },
        "instruction": instruction,
        "contentLength": word_count(params.content),
        "targetAudience": params.target_audience or "general audience",
    }


class RevenueIntelligenceParams(ToolParams):
    period: str = Field(description="Time period to analyze")
    metric: str = Field(description="Metric to analyze")


def _revenue_trend(total: float) -> str:
    if total > 1000:
        return "strong growth"
    if total > 100:
        return "moderate growth"
    return "early stage"


@basic_registry.register(
    "revenueIntelligence",
    "Analyze revenue trends and provide business intelligence insights with real data",
    RevenueIntelligenceParams,
)
async def revenue_intelligence(params: RevenueIntelligenceParams, ctx: ToolContext) -> dict:
    result = await ctx.db.execute(
        select(ArticlePerformance)
        .where(ArticlePerformance.user_id == ctx.user.id)
        .order_by(ArticlePerformance.created_at.desc())
        .limit(REVENUE_SAMPLE_SIZE)
    )
    rows = result.scalars().all()

    total_revenue = sum(r.revenue_total or 0 for r in rows)
    total_views = sum(r.views or 0 for r in rows)
    avg_per_article = total_revenue / len(rows) if rows else 0
    per_view = total_revenue / total_views if total_views else 0

    return {
        "period": params.period,
        "metric": params.metric,
        "totalRevenue": f"${total_revenue:.2f}",
        "totalViews": total_views,
        "articlesAnalyzed": len(rows),
        "avgRevenuePerArticle": f"${avg_per_article:.2f}",
        "revenuePerView": f"${per_view:.4f}",
        "breakdown": {
            "adsense": f"${sum(r.revenue_adsense or 0 for r in rows):.2f}",
            "affiliate": f"${sum(r.revenue_affiliate or 0 for r in rows):.2f}",
            "sponsored": f"${sum(r.revenue_sponsored or 0 for r in rows):.2f}",
        },
        "trend": _revenue_trend(total_revenue),
        "recommendation": (
            "Scale successful content types and increase output"
            if total_revenue > 1000
            else "Focus on high-performing topics and improve SEO"
        ),
    }


class SeoOptimizerParams(ToolParams):
    content: str = Field(description="Content to analyze")
    target_keyword: Optional[str] = Field(default=None, description="Primary keyword to optimize for")


@basic_registry.register(
    "seoOptimizer",
    "Analyze and optimize content for SEO with actionable recommendations",
    SeoOptimizerParams,
)
async def seo_optimizer(params: SeoOptimizerParams, ctx: ToolContext) -> dict:
    return analyze_seo_content(params.content, params.target_keyword)
