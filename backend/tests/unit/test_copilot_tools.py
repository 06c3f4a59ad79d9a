"""
Unit tests for the copilot tool registries.

Handlers run against the in-memory database with a seeded RNG and a fixed
clock.
"""

import random
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from adapters.news import NewsAPIError, NewsItem, NewsResult
from infrastructure.database.models import ArticlePerformance, JournalistStyle, User
from services.copilot import (
    ToolContext,
    ToolParams,
    ToolRegistry,
    advanced_registry,
    basic_registry,
    newspaper_registry,
)

pytestmark = pytest.mark.asyncio

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


@pytest.fixture
def ctx(db_session: AsyncSession, test_user: User, mock_news) -> ToolContext:
    return ToolContext(
        db=db_session,
        user=test_user,
        news=mock_news,
        rng=random.Random(7),
        clock=lambda: NOW,
    )


class EchoParams(ToolParams):
    word_count: int


class TestToolRegistry:
    """Dispatch and error payloads."""

    @pytest.fixture
    def registry(self) -> ToolRegistry:
        registry = ToolRegistry("test")

        @registry.register("echo", "Echo the count", EchoParams)
        async def echo(params: EchoParams, ctx: ToolContext) -> dict:
            return {"count": params.word_count}

        @registry.register("boom", "Always fails", EchoParams)
        async def boom(params: EchoParams, ctx: ToolContext) -> dict:
            raise RuntimeError("kaput")

        return registry

    def test_specs_use_camel_case(self, registry):
        tool_spec = registry.specs()[0]

        assert tool_spec.name == "echo"
        assert "wordCount" in tool_spec.parameters["properties"]
        assert registry.names == ["echo", "boom"]

    async def test_execute(self, registry, ctx):
        assert await registry.execute("echo", {"wordCount": 3}, ctx) == {"count": 3}

    async def test_unknown_tool(self, registry, ctx):
        result = await registry.execute("missing", {}, ctx)

        assert result == {"error": "Unknown tool: missing", "availableTools": ["echo", "boom"]}

    async def test_invalid_arguments(self, registry, ctx):
        result = await registry.execute("echo", {"wordCount": "many"}, ctx)

        assert result["error"] == "Invalid arguments for echo"
        assert result["details"][0]["loc"] == ("wordCount",)

    async def test_handler_failure(self, registry, ctx):
        result = await registry.execute("boom", {"wordCount": 1}, ctx)

        assert result == {"error": "boom failed: kaput"}

    def test_registered_tool_sets(self):
        assert basic_registry.names == [
            "newsHunter",
            "contentRewriter",
            "journalistStyleRewriter",
            "revenueIntelligence",
            "seoOptimizer",
        ]
        assert newspaper_registry.names == [
            "generateNewspaper",
            "configureEditorial",
            "validateQuality",
        ]
        assert len(advanced_registry.names) == 6


class TestNewsHunter:
    async def test_demo_data_without_key(self, ctx):
        result = await basic_registry.execute("newsHunter", {"topic": "Quantum Chips", "limit": 8}, ctx)

        assert result["count"] == 5
        assert [r["source"] for r in result["results"][:4]] == [
            "TechCrunch",
            "BBC News",
            "Reuters",
            "TechCrunch",
        ]
        assert result["results"][1]["url"] == "https://news.example.com/quantum-chips-2"
        assert result["results"][1]["publishedAt"] == "2026-03-10T11:00:00+00:00"
        assert result["note"] == "Using demo data - add NEWSAPI_KEY env var for real news"

    async def test_real_data(self, ctx, mock_news):
        mock_news.is_configured = True
        mock_news.search_everything = AsyncMock(
            return_value=NewsResult(
                articles=[
                    NewsItem(
                        title="Chips",
                        description=None,
                        content="x" * 300,
                        url="https://a.example/1",
                        source="Wired",
                        published_at="2026-03-09T08:00:00Z",
                    )
                ],
                total_results=1,
            )
        )

        result = await basic_registry.execute("newsHunter", {"topic": "chips", "language": "pt"}, ctx)

        mock_news.search_everything.assert_awaited_once_with("chips", language="pt", page_size=5)
        assert result["note"] == "Using real NewsAPI data"
        assert result["results"][0]["summary"] == "x" * 200
        assert result["results"][0]["source"] == "Wired"

    async def test_upstream_error_falls_back(self, ctx, mock_news):
        mock_news.is_configured = True
        mock_news.search_everything = AsyncMock(side_effect=NewsAPIError("down"))

        result = await basic_registry.execute("newsHunter", {"topic": "chips", "limit": 2}, ctx)

        assert result["count"] == 2
        assert result["note"].startswith("Using demo data")

    async def test_limit_above_twenty_is_accepted(self, ctx):
        result = await basic_registry.execute("newsHunter", {"topic": "chips", "limit": 25}, ctx)

        assert "error" not in result
        assert result["count"] == 5

    async def test_large_limit_caps_page_size(self, ctx, mock_news):
        mock_news.is_configured = True
        mock_news.search_everything = AsyncMock(return_value=NewsResult(articles=[], total_results=0))

        result = await basic_registry.execute("newsHunter", {"topic": "chips", "limit": 500}, ctx)

        mock_news.search_everything.assert_awaited_once_with("chips", language="en", page_size=100)
        assert result["count"] == 0


class TestBasicTools:
    async def test_content_rewriter(self, ctx):
        result = await basic_registry.execute(
            "contentRewriter",
            {"content": "one two three", "style": "casual", "targetLength": 300},
            ctx,
        )

        assert result["originalLength"] == 3
        assert result["instruction"].startswith(
            "Rewrite the following content in a casual style with approximately 300 words:"
        )

    async def test_style_rewriter_without_styles(self, ctx):
        result = await basic_registry.execute("journalistStyleRewriter", {"content": "text"}, ctx)

        assert result["availableStyles"] == []

    async def test_style_rewriter_uses_default_style(self, ctx, db_session, test_user):
        style = JournalistStyle(
            user_id=test_user.id,
            name="Formal Reporter",
            description="Wire-service prose",
            tone="formal",
            style_characteristics={"quotes": "attributed"},
            example_text="Officials said on Tuesday...",
            is_default=True,
            usage_count=4,
        )
        db_session.add(style)
        await db_session.commit()

        result = await basic_registry.execute(
            "journalistStyleRewriter",
            {"content": "markets fell today", "targetAudience": "investors"},
            ctx,
        )

        assert result["styleUsed"]["name"] == "Formal Reporter"
        assert '"quotes": "attributed"' in result["instruction"]
        assert "- Target Audience: investors" in result["instruction"]
        assert result["contentLength"] == 3
        await db_session.refresh(style)
        assert style.usage_count == 5

    async def test_revenue_intelligence_scoped_to_user(self, ctx, db_session, test_user, other_user):
        db_session.add_all(
            [
                ArticlePerformance(
                    user_id=test_user.id, title="A", views=1000, revenue_total=600.0, revenue_adsense=600.0
                ),
                ArticlePerformance(
                    user_id=test_user.id, title="B", views=1000, revenue_total=500.0, revenue_sponsored=500.0
                ),
                ArticlePerformance(user_id=other_user.id, title="C", views=5, revenue_total=9000.0),
            ]
        )
        await db_session.commit()

        result = await basic_registry.execute(
            "revenueIntelligence", {"period": "30d", "metric": "revenue"}, ctx
        )

        assert result["totalRevenue"] == "$1100.00"
        assert result["articlesAnalyzed"] == 2
        assert result["avgRevenuePerArticle"] == "$550.00"
        assert result["revenuePerView"] == "$0.5500"
        assert result["breakdown"] == {
            "adsense": "$600.00",
            "affiliate": "$0.00",
            "sponsored": "$500.00",
        }
        assert result["trend"] == "strong growth"

    async def test_revenue_intelligence_empty(self, ctx):
        result = await basic_registry.execute(
            "revenueIntelligence", {"period": "7d", "metric": "views"}, ctx
        )

        assert result["totalRevenue"] == "$0.00"
        assert result["revenuePerView"] == "$0.0000"
        assert result["trend"] == "early stage"

    async def test_seo_optimizer(self, ctx):
        result = await basic_registry.execute(
            "seoOptimizer", {"content": "# Title\n\nShort body.", "targetKeyword": "body"}, ctx
        )

        assert "error" not in result


class TestAdvancedTools:
    async def test_search_real_news(self, ctx):
        result = await advanced_registry.execute(
            "searchRealNews",
            {"keywords": ["AI Chips", "robotics", "fusion"], "niche": "Hardware", "limit": 2},
            ctx,
        )

        assert result["totalFound"] == 2
        first = result["articles"][0]
        assert first["title"] == "Breaking: AI Chips Innovation Reshapes Hardware - 2026-03-10"
        assert first["url"] == "https://example.com/news/ai-chips"
        assert first["keywords"] == ["AI Chips", "Hardware"]
        assert result["articles"][1]["source"] == "Forbes"
        for article in result["articles"]:
            assert 60 <= article["viralScore"] <= 100
        assert 1 <= len(result["topRecommendations"]) <= 2
        assert result["searchMetadata"]["searchedAt"] == NOW.isoformat()

    async def test_search_real_news_is_seeded(self, db_session, test_user, mock_news):
        def make_ctx():
            return ToolContext(db=db_session, user=test_user, news=mock_news, rng=random.Random(3), clock=lambda: NOW)

        args = {"keywords": ["ai", "chips"]}
        first = await advanced_registry.execute("searchRealNews", args, make_ctx())
        second = await advanced_registry.execute("searchRealNews", args, make_ctx())

        assert first == second

    async def test_rewrite_with_style(self, ctx):
        result = await advanced_registry.execute(
            "rewriteWithJournalistStyle",
            {"content": "Hello  world", "styleName": "Financial Analyst", "toneAdjustment": "more_formal"},
            ctx,
        )

        assert result["styleAnalysis"]["newTone"] == "data-driven and authoritative"
        assert result["metrics"]["wordCount"] == 3
        assert result["metrics"]["readingTime"] == "1 min"
        assert result["rewrittenContent"].endswith("with more_formal tone adjustment]")

    async def test_rewrite_defaults_to_tech_blogger(self, ctx):
        result = await advanced_registry.execute("rewriteWithJournalistStyle", {"content": "x"}, ctx)

        assert result["styleAnalysis"]["styleName"] == "Tech Blogger"
        assert result["rewrittenContent"].startswith("[Rewritten in Tech Blogger style for general audience]")

    async def test_analyze_revenue(self, ctx):
        result = await advanced_registry.execute(
            "analyzeRevenueComprehensive",
            {
                "content": "article",
                "niche": "fintech",
                "targetAudience": "founders",
                "currentPerformance": {"currentRevenue": 320},
            },
            ctx,
        )

        assert 70 <= result["revenueScore"] < 100
        assert result["roiAnalysis"]["currentROI"] == "$320/month"
        assert [o["type"] for o in result["optimizations"]] == [
            "Ad Placement",
            "Affiliate Links",
            "Content Upgrade",
            "SEO Optimization",
        ]

    async def test_optimize_seo_default_keywords(self, ctx):
        result = await advanced_registry.execute(
            "optimizeSEO", {"title": "Edge AI", "content": "body"}, ctx
        )

        assert result["improvements"][0]["suggested"] == "Edge AI - Complete Guide 2026"
        assert [k["keyword"] for k in result["keywordOpportunities"]] == [
            "content marketing",
            "digital strategy",
            "SEO optimization",
        ]

    async def test_content_variations(self, ctx):
        result = await advanced_registry.execute(
            "generateContentVariations",
            {"baseContent": "x", "variationTypes": ["title", "cta"], "targetMetrics": ["ctr", "engagement"]},
            ctx,
        )

        assert result["totalVariations"] == 2
        assert result["variations"][1]["variant"] == "[CTA Variation optimized for ctr, engagement]"
        assert result["testingPlan"]["successCriteria"] == "ctr improvement > 10%"

    async def test_content_variations_require_a_metric(self, ctx):
        result = await advanced_registry.execute(
            "generateContentVariations",
            {"baseContent": "x", "variationTypes": ["title"], "targetMetrics": []},
            ctx,
        )

        assert result["error"] == "Invalid arguments for generateContentVariations"

    @pytest.mark.parametrize(
        "timeframe,pieces,blog,video",
        [("1_week", 3, 1, 0), ("1_month", 12, 4, 1), ("3_months", 36, 14, 3), ("6_months", 72, 28, 7)],
    )
    async def test_content_strategy(self, ctx, timeframe, pieces, blog, video):
        result = await advanced_registry.execute(
            "createContentStrategy",
            {"niche": "fitness", "goals": ["revenue", "awareness"], "timeframe": timeframe},
            ctx,
        )

        calendar = result["contentCalendar"]
        assert calendar["totalPieces"] == pieces
        assert calendar["breakdown"]["blog_posts"] == blog
        assert calendar["breakdown"]["video_content"] == video
        assert [k["target"] for k in result["kpis"]] == ["+200%", "+100%"]


class TestNewspaperTools:
    async def test_generate_with_page_categories(self, ctx):
        result = await newspaper_registry.execute(
            "generateNewspaper",
            {
                "totalPages": 2,
                "mainTheme": "Climate",
                "editorialStyle": "formal",
                "pageCategories": [
                    {"pageNumber": 1, "category": "Science", "focus": "Data", "articleCount": 1},
                    {"pageNumber": 2, "category": "Policy", "focus": "Law"},
                ],
            },
            ctx,
        )

        pages = result["newspaper"]["pages"]
        assert [len(p["articles"]) for p in pages] == [1, 2]
        assert result["newspaper"]["journal_metadata"]["publication_date"] == "2026-03-10"

    async def test_page_limit(self, ctx):
        result = await newspaper_registry.execute(
            "generateNewspaper", {"totalPages": 51, "mainTheme": "x"}, ctx
        )

        assert result["error"] == "Invalid arguments for generateNewspaper"

    async def test_validate_quality_criteria(self, ctx):
        result = await newspaper_registry.execute(
            "validateQuality",
            {"newspaperContent": "{}", "checkCriteria": ["tone_appropriateness"]},
            ctx,
        )

        assert result["overall_quality_score"] == result["detailed_scores"]["tone_appropriateness"]
