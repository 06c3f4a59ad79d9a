"""
Digital newspaper builder.

Produces the page plan, article skeletons and layout hints for a multi-page
flipbook edition, plus the editorial configuration and quality validation
reports used by the newspaper copilot.
"""

import math
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence

DEFAULT_AUDIENCE = "Professionals and organizational leaders aged 25-65"
MODEL_VERSION = "ContentMaster AI v2.0"
MINUTES_PER_PAGE = 3.5

# Inclusive low bound and width of each criterion's score band
QUALITY_BANDS: Dict[str, tuple[int, int]] = {
    "pyramid_structure": (90, 10),
    "lead_quality": (85, 15),
    "factual_consistency": (95, 5),
    "tone_appropriateness": (88, 12),
    "logical_progression": (92, 8),
    "engagement_elements": (87, 13),
    "digital_optimization": (91, 9),
}
DEFAULT_CRITERIA = ["pyramid_structure", "lead_quality", "factual_consistency"]


@dataclass
class PagePlan:
    page_number: int
    category: str
    focus: str
    article_count: int = 2


def default_page_plan(total_pages: int, theme: str) -> List[PagePlan]:
    """Main story first, outlook last, breaking news on page 2, features between."""
    plan = []
    for page in range(1, total_pages + 1):
        if page == 1:
            plan.append(PagePlan(1, "Main Story", f"Primary {theme} coverage with deep analysis"))
        elif page == total_pages:
            plan.append(PagePlan(page, "Future Outlook", "Trends and conclusions"))
        elif page == 2:
            plan.append(PagePlan(2, "Breaking News", "Recent developments and updates", 3))
        else:
            plan.append(PagePlan(page, "Analysis & Features", f"Different aspects of {theme}"))
    return plan


def _article_type(page_number: int, idx: int) -> str:
    if page_number == 1:
        return "feature"
    return "news" if idx == 0 else "analysis"


def _build_article(
    page: PagePlan, idx: int, theme: str, audience: str, rng: random.Random
) -> dict:
    lead_article = idx == 0
    return {
        "article_id": f"article-{page.page_number}-{idx + 1}",
        "article_type": _article_type(page.page_number, idx),
        "metadata": {
            "title": f"{page.category}: {theme} Development {idx + 1}",
            "subtitle": f"Expert analysis on {page.focus}",
            "author": "ContentMaster AI",
            "reading_time": "3-4 min",
            "priority": "high" if lead_article else "medium",
            "word_count": 450 + rng.randrange(200),
        },
        "content": {
            "headline": f"{page.category} - {theme}",
            "lead": (
                f"In a significant development affecting {audience.lower()}, {theme} continues to "
                "evolve with new implications for the industry. This analysis examines the key "
                "factors driving change and what it means for stakeholders."
            ),
            "body": [
                {
                    "paragraph_type": "introduction",
                    "content": (
                        f"The landscape of {theme} has undergone remarkable transformation in recent "
                        "months. Industry experts point to several critical factors that are reshaping "
                        "conventional understanding and practice."
                    ),
                    "style": "normal",
                },
                {
                    "paragraph_type": "development",
                    "content": (
                        "According to recent data, the impact extends across multiple dimensions. Key "
                        "stakeholders are adapting their strategies to accommodate these shifts, with "
                        "early adopters already seeing measurable results."
                    ),
                    "style": "normal",
                },
                {
                    "paragraph_type": "quote",
                    "content": (
                        f'"This represents a fundamental shift in how we approach {theme}. '
                        'Organizations that understand these dynamics will be positioned for success."'
                    ),
                    "style": "emphasis",
                },
                {
                    "paragraph_type": "data",
                    "content": (
                        f"Market analysis indicates a {30 + rng.randrange(50)}% increase in related "
                        "activities, with projections suggesting continued growth through the coming year."
                    ),
                    "style": "highlight",
                },
                {
                    "paragraph_type": "conclusion",
                    "content": (
                        "As the situation continues to develop, maintaining awareness of these trends "
                        "will be crucial for decision-makers. The implications extend well beyond "
                        "immediate impacts, suggesting long-term structural changes."
                    ),
                    "style": "normal",
                },
            ],
            "key_quote": f'"Understanding {theme} is no longer optional; it is essential for competitive advantage."',
            "conclusion": (
                f"The evolution of {theme} presents both challenges and opportunities. Those who engage "
                "thoughtfully with these developments will be best positioned to capitalize on emerging trends."
            ),
        },
        "layout_suggestions": {
            "position": "main" if lead_article else "secondary",
            "visual_elements": "image" if lead_article else "chart",
            "special_formatting": "pull_quote" if lead_article else "highlight_box",
        },
    }


def build_newspaper(
    total_pages: int,
    main_theme: str,
    now: datetime,
    rng: random.Random,
    target_audience: str = DEFAULT_AUDIENCE,
    editorial_style: str = "balanced",
    page_plan: Optional[Sequence[PagePlan]] = None,
) -> dict:
    """
    Build a full newspaper edition.

    Args:
        total_pages: Number of pages (1-50)
        main_theme: Subject of the edition
        now: Publication timestamp
        rng: Random source for word counts and scores
        target_audience: Audience description used in leads and notes
        editorial_style: formal, casual, technical or balanced
        page_plan: Explicit page categories; defaults to default_page_plan()

    Returns:
        Tool payload with ``newspaper``, ``summary``, ``exportFormats``
        and ``nextSteps``
    """
    plan = list(page_plan) if page_plan else default_page_plan(total_pages, main_theme)
    today = now.date().isoformat()
    color_scheme = "classic_black_white" if editorial_style == "formal" else "modern_blue_accent"

    pages = [
        {
            "page_number": page.page_number,
            "page_category": page.category,
            "page_focus": page.focus,
            "articles": [
                _build_article(page, idx, main_theme, target_audience, rng)
                for idx in range(page.article_count)
            ],
            "page_layout_recommendations": {
                "template": "professional_multi_column",
                "color_scheme": color_scheme,
                "typography": "Georgia_serif_body_Helvetica_sans_headers",
            },
        }
        for page in plan
    ]

    newspaper = {
        "journal_metadata": {
            "title": f"{main_theme} - Professional Digital Journal",
            "edition": f"Edition {today}",
            "publication_date": today,
            "total_pages": total_pages,
            "main_theme": main_theme,
            "target_audience": target_audience,
            "editorial_style": editorial_style,
            "estimated_reading_time": f"{math.ceil(total_pages * MINUTES_PER_PAGE)} minutes",
        },
        "pages": pages,
        "supplementary_content": {
            "editorial_note": (
                f"This {total_pages}-page publication provides comprehensive coverage of {main_theme}, "
                f"curated for {target_audience.lower()}."
            ),
            "next_edition_preview": (
                f"Next edition will explore emerging trends and deeper implications of {main_theme}."
            ),
            "contact_information": "Generated by ContentMaster AI - Your Professional Journalism Platform",
        },
        "generation_metadata": {
            "generation_timestamp": now.isoformat(),
            "model_version": MODEL_VERSION,
            "content_quality_score": 85 + rng.randrange(15),
        },
    }

    article_total = sum(p.article_count for p in plan)
    return {
        "success": True,
        "newspaper": newspaper,
        "summary": f'Generated {total_pages}-page newspaper on "{main_theme}" with {article_total} articles',
        "exportFormats": ["json", "html", "pdf"],
        "nextSteps": [
            "Review generated content",
            "Customize specific articles if needed",
            "Export to flipbook format",
            "Publish to your audience",
        ],
    }


def configure_editorial(subject: str, user_intent: str, page_count: Optional[int] = None) -> dict:
    """Suggest a page structure for a subject before generation."""
    complex_subject = len(subject) > 100
    suggested = page_count or (6 if complex_subject else 4)

    structure = [
        {
            "page": 1,
            "category": "Cover Story",
            "rationale": "Establish context and primary narrative",
            "article_types": ["Feature article with comprehensive intro", "Supporting analysis piece"],
            "estimated_impact": "High reader engagement",
        },
        {
            "page": 2,
            "category": "Current Developments",
            "rationale": "Present latest news and updates",
            "article_types": ["Breaking news items", "Recent developments", "Quick hits"],
            "estimated_impact": "Maintains reader interest",
        },
    ]
    if suggested > 3:
        structure.append(
            {
                "page": 3,
                "category": "Expert Analysis",
                "rationale": "Provide depth and multiple perspectives",
                "article_types": ["Interview or expert opinion", "Data-driven analysis"],
                "estimated_impact": "Builds authority",
            }
        )
    structure.append(
        {
            "page": suggested,
            "category": "Future Outlook",
            "rationale": "Conclude with actionable insights",
            "article_types": ["Trend predictions", "Strategic recommendations"],
            "estimated_impact": "Drives action",
        }
    )

    return {
        "configuration": {
            "analysis": {
                "subject_complexity": (
                    "High - requires detailed coverage"
                    if complex_subject
                    else "Medium - focused coverage appropriate"
                ),
                "recommended_pages": suggested,
                "content_depth": "Professional with balanced detail",
                "target_tone": "Authoritative yet accessible",
                "user_intent": user_intent,
            },
            "suggested_structure": structure,
            "personalization_questions": [
                f"This {suggested}-page structure covers {subject} comprehensively. Does this align with your goals?",
                "Would you like to adjust the focus of any specific page?",
                "Should we include more analytical content or keep it news-focused?",
            ],
            "optimization_tips": [
                f"Estimated reading time: {suggested * MINUTES_PER_PAGE:g} minutes - ideal for busy professionals",
                "Balanced mix of news and analysis maintains engagement",
                "Structure allows for logical progression and natural conclusion",
            ],
        },
        "ready_to_generate": page_count is not None,
        "next_action": "Proceed with generation" if page_count else "Confirm page structure and preferences",
    }


def quality_grade(score: int) -> str:
    if score >= 90:
        return "Excellent"
    if score >= 80:
        return "Good"
    if score >= 70:
        return "Fair"
    return "Needs Improvement"


def validate_quality(rng: random.Random, criteria: Optional[Sequence[str]] = None) -> dict:
    """Score each criterion in its band and grade the mean of the selected ones."""
    criteria = list(criteria) if criteria else DEFAULT_CRITERIA
    scores = {name: low + rng.randrange(width) for name, (low, width) in QUALITY_BANDS.items()}

    overall = math.floor(sum(scores[c] for c in criteria) / len(criteria))

    recommendations = []
    if scores["lead_quality"] < 90:
        recommendations.append("Strengthen lead paragraphs with more specific 5W1H elements")
    if scores["engagement_elements"] < 90:
        recommendations.append("Add more pull quotes and data visualizations")
    if scores["digital_optimization"] < 90:
        recommendations.append("Optimize paragraph length for digital reading")

    return {
        "overall_quality_score": overall,
        "grade": quality_grade(overall),
        "detailed_scores": scores,
        "validation_passed": overall >= 70,
        "recommendations": recommendations or ["Content meets professional standards"],
        "certification": (
            "Ready for publication" if overall >= 85 else "Review recommended items before publishing"
        ),
    }
