"""
Tools for the editorial newspaper copilot.
"""

from typing import List, Literal, Optional

from pydantic import Field

from services.newspaper import (
    DEFAULT_AUDIENCE,
    DEFAULT_CRITERIA,
    PagePlan,
    build_newspaper,
    configure_editorial,
    validate_quality,
)

from .registry import ToolContext, ToolParams, ToolRegistry

newspaper_registry = ToolRegistry("newspaper")

QualityCriterion = Literal[
    "pyramid_structure",
    "lead_quality",
    "factual_consistency",
    "tone_appropriateness",
    "logical_progression",
    "engagement_elements",
    "digital_optimization",
]


class PageCategory(ToolParams):
    page_number: int
    category: str
    focus: str
    article_count: int = Field(default=2, ge=0)


class GenerateNewspaperParams(ToolParams):
    total_pages: int = Field(ge=1, le=50, description="Number of pages to generate (1-50)")
    main_theme: str = Field(description="Main subject/theme of the newspaper")
    target_audience: str = DEFAULT_AUDIENCE
    editorial_style: Literal["formal", "casual", "technical", "balanced"] = "balanced"
    page_categories: Optional[List[PageCategory]] = Field(
        default=None,
        description="Specific categories for each page (optional, auto-generated if not provided)",
    )


@newspaper_registry.register(
    "generateNewspaper",
    "Generate a complete multi-page digital newspaper with journalistic content structured for flipbook publication",
    GenerateNewspaperParams,
)
async def generate_newspaper(params: GenerateNewspaperParams, ctx: ToolContext) -> dict:
    plan = None
    if params.page_categories:
        plan = [
            PagePlan(p.page_number, p.category, p.focus, p.article_count)
            for p in params.page_categories
        ]
    return build_newspaper(
        total_pages=params.total_pages,
        main_theme=params.main_theme,
        now=ctx.now(),
        rng=ctx.rng,
        target_audience=params.target_audience,
        editorial_style=params.editorial_style,
        page_plan=plan,
    )


class ConfigureEditorialParams(ToolParams):
    subject: str = Field(description="Main subject of the newspaper")
    user_intent: str = Field(description="What the user wants to achieve with this publication")
    page_count: Optional[int] = Field(default=None, ge=1, description="Desired number of pages (if known)")


@newspaper_registry.register(
    "configureEditorial",
    "Interactive editorial configuration assistant that suggests page count and structure for a newspaper",
    ConfigureEditorialParams,
)
async def configure_editorial_tool(params: ConfigureEditorialParams, ctx: ToolContext) -> dict:
    return configure_editorial(params.subject, params.user_intent, params.page_count)


class ValidateQualityParams(ToolParams):
    newspaper_content: str = Field(description="The newspaper content to validate (JSON format)")
    check_criteria: List[QualityCriterion] = Field(default_factory=lambda: list(DEFAULT_CRITERIA))


@newspaper_registry.register(
    "validateQuality",
    "Validate generated newspaper content against professional journalism quality standards",
    ValidateQualityParams,
)
async def validate_quality_tool(params: ValidateQualityParams, ctx: ToolContext) -> dict:
    return validate_quality(ctx.rng, params.check_criteria)
