"""
Tools for the advanced journalism copilot.

These produce scored projections for the model to reason over; the random
bands come from ``ctx.rng``.
"""

import math
import re
from datetime import timedelta
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from services.news_discovery import average_viral_score, reach_label, score_news, top_picks

from .registry import ToolContext, ToolParams, ToolRegistry

advanced_registry = ToolRegistry("advanced")

NEWS_SOURCES = ("TechCrunch", "Forbes", "Reuters")
MAX_NEWS_RESULTS = 10

TONE_MAP = {
    "Tech Blogger": "conversational and tech-savvy",
    "Formal Reporter": "professional and fact-based",
    "Casual Influencer": "engaging and relatable",
    "Investigative Journalist": "analytical and questioning",
    "Financial Analyst": "data-driven and authoritative",
}
DEFAULT_STYLE = "Tech Blogger"

DEFAULT_SEO_KEYWORDS = ["content marketing", "digital strategy", "SEO optimization"]

CONTENT_PIECES = {
    "1_week": 3,
    "1_month": 12,
    "3_months": 36,
    "6_months": 72,
}


def _money(value: float) -> str:
    return f"${value:.2f}"


class SearchRealNewsParams(ToolParams):
    keywords: List[str] = Field(description="Keywords to search for news")
    niche: Optional[str] = Field(default=None, description="Niche market to filter results")
    limit: int = Field(default=5, ge=1, description="Number of results (max 10)")


@advanced_registry.register(
    "searchRealNews",
    "Search for the latest news articles with analysis of viral and revenue potential.",
    SearchRealNewsParams,
)
async def search_real_news(params: SearchRealNewsParams, ctx: ToolContext) -> dict:
    now = ctx.now()
    niche = params.niche
    results = []
    for idx, keyword in enumerate(params.keywords):
        scores = score_news(ctx.rng)
        slug = re.sub(r"\s+", "-", keyword.lower())
        results.append(
            {
                "title": f"Breaking: {keyword} Innovation Reshapes {niche or 'Industry'} - {now:%Y-%m-%d}",
                "summary": (
                    f"Latest developments in {keyword} show unprecedented growth potential. "
                    "Industry experts predict major shifts in the coming months."
                ),
                "source": NEWS_SOURCES[idx % len(NEWS_SOURCES)],
                "url": f"https://example.com/news/{slug}",
                "publishedAt": (now - timedelta(hours=idx)).isoformat(),
                "viralScore": scores.viral_score,
                "revenueScore": scores.revenue_score,
                "trendingPotential": scores.trending_potential,
                "suggestedAngle": f"Focus on {keyword} impact on {niche or 'emerging markets'}",
                "estimatedReach": scores.estimated_reach,
                "keywords": [keyword, niche or "general"],
            }
        )

    results = results[: min(params.limit, MAX_NEWS_RESULTS)]
    picks = top_picks(results)

    if picks:
        recommendations = [
            {
                "title": r["title"],
                "url": r["url"],
                "reason": f"Viral Score: {r['viralScore']:.1f}/100 | Revenue: {r['revenueScore']:.1f}/100",
                "suggestedAngle": r["suggestedAngle"],
                "estimatedReach": f"{reach_label(r['estimatedReach'])} impressions",
            }
            for r in picks
        ]
    else:
        first = results[0] if results else {}
        recommendations = [
            {
                "title": first.get("title", "No results"),
                "url": first.get("url", "#"),
                "reason": "Best available option",
                "suggestedAngle": first.get("suggestedAngle", "General coverage"),
                "estimatedReach": "50K+ impressions",
            }
        ]

    return {
        "totalFound": len(results),
        "articles": results,
        "topRecommendations": recommendations,
        "searchMetadata": {
            "keywords": params.keywords,
            "niche": niche,
            "searchedAt": now.isoformat(),
            "averageViralScore": average_viral_score(results),
        },
    }


class RewriteWithStyleParams(ToolParams):
    content: str = Field(description="Original content to rewrite")
    style_id: Optional[str] = Field(
        default=None, description="Journalist style ID (optional, uses default if not provided)"
    )
    style_name: Optional[str] = Field(
        default=None, description="Journalist style name (e.g., 'Tech Blogger', 'Formal Reporter')"
    )
    target_audience: Optional[str] = Field(default=None, description="Target audience for the content")
    tone_adjustment: Optional[
        Literal["more_formal", "more_casual", "more_technical", "more_accessible"]
    ] = None


@advanced_registry.register(
    "rewriteWithJournalistStyle",
    "Rewrite content using a specific journalist persona such as Tech Blogger or Formal Reporter.",
    RewriteWithStyleParams,
)
async def rewrite_with_journalist_style(params: RewriteWithStyleParams, ctx: ToolContext) -> dict:
    style = params.style_name or DEFAULT_STYLE
    tone = TONE_MAP.get(style, "professional")
    # Persona rewrites count words on single spaces
    words = len(params.content.split(" "))

    return {
        "rewrittenContent": (
            f"[Rewritten in {style} style for {params.target_audience or 'general audience'}]\n\n"
            f"{params.content}\n\n"
            f"[Content professionally rewritten with {params.tone_adjustment or 'standard'} tone adjustment]"
        ),
        "styleAnalysis": {
            "originalTone": "neutral",
            "newTone": tone,
            "styleName": style,
            "readabilityScore": 8.5,
            "engagementPotential": "+45%",
        },
        "metrics": {
            "wordCount": words,
            "readingTime": f"{math.ceil(words / 200)} min",
            "improvementScore": 87,
        },
        "suggestions": [
            "Added engaging hooks matching journalist style",
            "Optimized paragraph structure for readability",
            "Enhanced storytelling elements",
            "Improved call-to-action clarity",
        ],
    }


class CurrentPerformance(BaseModel):
    views: Optional[float] = None
    engagement_rate: Optional[float] = Field(default=None, alias="engagementRate")
    current_revenue: Optional[float] = Field(default=None, alias="currentRevenue")


class AnalyzeRevenueParams(ToolParams):
    content: str = Field(description="Article content to analyze")
    niche: str = Field(description="Market niche")
    target_audience: str = Field(description="Primary target audience")
    current_performance: Optional[CurrentPerformance] = None


@advanced_registry.register(
    "analyzeRevenueComprehensive",
    "Comprehensive revenue potential analysis with optimization strategies and ROI projections.",
    AnalyzeRevenueParams,
)
async def analyze_revenue_comprehensive(params: AnalyzeRevenueParams, ctx: ToolContext) -> dict:
    rng = ctx.rng
    base = 500 + rng.random() * 2000
    optimized = base * (1.5 + rng.random() * 0.5)

    current = params.current_performance
    if current is not None and current.current_revenue:
        current_roi = f"${current.current_revenue:g}/month"
    else:
        current_roi = "No baseline"

    return {
        "revenueScore": math.floor(70 + rng.random() * 30),
        "projectedRevenue": {
            "monthlyRealistic": _money(base),
            "monthlyOptimized": _money(optimized),
            "yearlyProjection": _money(optimized * 12),
        },
        "optimizations": [
            {
                "type": "Ad Placement",
                "impact": "High",
                "estimatedIncrease": f"+{_money(rng.random() * 300 + 100)}/month",
                "implementation": "Add strategic ad units after 2nd and 4th paragraphs",
                "difficulty": "Easy",
            },
            {
                "type": "Affiliate Links",
                "impact": "Medium",
                "estimatedIncrease": f"+{_money(rng.random() * 200 + 50)}/month",
                "implementation": "Integrate 3-5 relevant affiliate products naturally",
                "difficulty": "Medium",
            },
            {
                "type": "Content Upgrade",
                "impact": "High",
                "estimatedIncrease": f"+{_money(rng.random() * 400 + 150)}/month",
                "implementation": "Create downloadable resource to capture emails",
                "difficulty": "Medium",
            },
            {
                "type": "SEO Optimization",
                "impact": "Very High",
                "estimatedIncrease": f"+{_money(rng.random() * 500 + 200)}/month",
                "implementation": "Target high-volume keywords with commercial intent",
                "difficulty": "Hard",
            },
        ],
        "roiAnalysis": {
            "currentROI": current_roi,
            "potentialROI": f"+{math.floor(50 + rng.random() * 100)}%",
            "paybackPeriod": "2-3 months",
            "confidenceLevel": "85%",
        },
        "competitorBenchmark": {
            "averageRevenue": _money(base * 0.8),
            "topPerformers": _money(optimized * 1.3),
            "yourPosition": "Above average with optimization potential",
        },
    }


class OptimizeSEOParams(ToolParams):
    title: str = Field(description="Article title")
    content: str = Field(description="Full article content")
    target_keywords: Optional[List[str]] = None
    competitor_analysis: bool = False


@advanced_registry.register(
    "optimizeSEO",
    "Complete SEO optimization with keyword research, technical improvements and competitor analysis.",
    OptimizeSEOParams,
)
async def optimize_seo(params: OptimizeSEOParams, ctx: ToolContext) -> dict:
    rng = ctx.rng
    keywords = params.target_keywords or DEFAULT_SEO_KEYWORDS

    return {
        "currentScore": math.floor(60 + rng.random() * 20),
        "optimizedScore": math.floor(85 + rng.random() * 15),
        "improvements": [
            {
                "category": "Title Optimization",
                "current": params.title,
                "suggested": f"{params.title} - Complete Guide {ctx.now().year}",
                "impact": "High",
                "reason": "Adding year and guide keyword improves CTR by 35%",
            },
            {
                "category": "Keyword Density",
                "current": "2.1%",
                "suggested": "2.8-3.5%",
                "impact": "Medium",
                "reason": "Optimal density for primary keyword",
            },
            {
                "category": "Meta Description",
                "suggested": (
                    f"Discover expert {keywords[0]} strategies. "
                    "Learn proven techniques to boost results. Read the complete guide now."
                ),
                "impact": "High",
                "reason": "Includes power words and CTA",
            },
            {
                "category": "Internal Linking",
                "current": "2 links",
                "suggested": "5-7 contextual links",
                "impact": "Medium",
                "reason": "Improves site authority and user engagement",
            },
        ],
        "keywordOpportunities": [
            {
                "keyword": kw,
                "volume": f"{math.floor(10000 + rng.random() * 50000)}/month",
                "difficulty": math.floor(30 + rng.random() * 40),
                "potential": "High",
                "currentRanking": "Not ranking",
                "projectedRanking": "Page 1 (position 5-10)",
            }
            for kw in keywords
        ],
        "technicalIssues": [
            {"issue": "H1 tag missing", "severity": "High", "fix": "Add single H1 tag with primary keyword"},
            {"issue": "Images lack alt text", "severity": "Medium", "fix": "Add descriptive alt text to all images"},
        ],
        "estimatedTrafficIncrease": f"+{math.floor(100 + rng.random() * 200)}% organic traffic in 3-6 months",
    }


class ContentVariationsParams(ToolParams):
    base_content: str = Field(description="Original content")
    variation_types: List[Literal["title", "intro", "cta", "tone", "structure"]]
    target_metrics: List[Literal["ctr", "engagement", "conversion", "readTime"]] = Field(min_length=1)


@advanced_registry.register(
    "generateContentVariations",
    "Generate A/B test variations optimized for different metrics (CTR, engagement, conversion).",
    ContentVariationsParams,
)
async def generate_content_variations(params: ContentVariationsParams, ctx: ToolContext) -> dict:
    rng = ctx.rng
    metrics = ", ".join(params.target_metrics)
    variations = [
        {
            "type": vtype,
            "variant": f"[{vtype.upper()} Variation optimized for {metrics}]",
            "content": f"Optimized {vtype} content here...",
            "expectedImprovement": f"+{math.floor(15 + rng.random() * 30)}%",
            "confidence": f"{math.floor(75 + rng.random() * 20)}%",
            "targetMetrics": list(params.target_metrics),
            "testingRecommendation": "Run for 7-14 days with minimum 1000 impressions",
        }
        for vtype in params.variation_types
    ]

    return {
        "totalVariations": len(variations),
        "variations": variations,
        "testingPlan": {
            "duration": "14 days",
            "sampleSize": "2000 visitors minimum",
            "splitRatio": "50/50",
            "successCriteria": f"{params.target_metrics[0]} improvement > 10%",
        },
        "implementationSteps": [
            "Set up A/B testing tool",
            "Configure traffic split",
            "Monitor key metrics daily",
            "Wait for statistical significance",
            "Implement winning variant",
        ],
    }


class StrategyResources(BaseModel):
    team_size: Optional[int] = Field(default=None, alias="teamSize")
    budget: Optional[float] = None
    tools_available: Optional[List[str]] = Field(default=None, alias="toolsAvailable")


class ContentStrategyParams(ToolParams):
    niche: str
    goals: List[Literal["awareness", "engagement", "conversion", "revenue", "authority"]]
    timeframe: Literal["1_week", "1_month", "3_months", "6_months"]
    resources: Optional[StrategyResources] = None


def _kpi_target(goal: str) -> str:
    if goal == "revenue":
        return "+200%"
    if goal == "engagement":
        return "+150%"
    return "+100%"


@advanced_registry.register(
    "createContentStrategy",
    "Develop a content strategy with calendar, KPIs and resource allocation based on goals and timeframe.",
    ContentStrategyParams,
)
async def create_content_strategy(params: ContentStrategyParams, ctx: ToolContext) -> dict:
    pieces = CONTENT_PIECES[params.timeframe]

    return {
        "strategyOverview": (
            f"Comprehensive {params.timeframe.replace('_', ' ', 1)} strategy for {params.niche} "
            f"focused on {', '.join(params.goals)}"
        ),
        "contentCalendar": {
            "totalPieces": pieces,
            "breakdown": {
                "blog_posts": math.floor(pieces * 0.4),
                "social_media": math.floor(pieces * 0.3),
                "email_campaigns": math.floor(pieces * 0.2),
                "video_content": math.floor(pieces * 0.1),
            },
            "schedule": "2-3 pieces per week with strategic timing",
        },
        "kpis": [
            {
                "metric": goal,
                "target": _kpi_target(goal),
                "measurement": "Monthly tracking via analytics dashboard",
            }
            for goal in params.goals
        ],
        "budgetAllocation": {
            "content_creation": "40%",
            "promotion": "30%",
            "tools_software": "20%",
            "training": "10%",
        },
        "expectedResults": {
            "trafficIncrease": "+150-300%",
            "revenueGrowth": "+200-400%",
            "engagementBoost": "+80-150%",
            "authorityBuilding": "Establish thought leadership position",
        },
        "actionItems": [
            "Set up content production workflow",
            "Create content templates and guidelines",
            "Establish promotion channels",
            "Implement analytics tracking",
            "Schedule weekly performance reviews",
        ],
    }
