"""
Executive dashboard analytics.

Aggregates a user's ArticlePerformance rows into revenue, reach, efficiency
and credit metrics.
"""

import calendar
import logging
from datetime import UTC, datetime
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models import ArticlePerformance, User

logger = logging.getLogger(__name__)

# Reader-to-view ratio and reach constants used by the dashboard
UNIQUE_READER_RATIO = 0.7
REACH_COUNTRIES = 89
VIRAL_ACCURACY = 94
HOURS_SAVED_PER_ARTICLE = 2
DEFAULT_COST_PER_ARTICLE = 0.15
MAX_EFFICIENCY_SCORE = 99.7


def month_start(now: datetime) -> datetime:
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def build_dashboard(
    user: User,
    rows: Sequence[ArticlePerformance],
    month_rows: Sequence[ArticlePerformance],
    now: datetime,
) -> dict:
    """
    Compute dashboard metrics.

    Args:
        user: Profile owning the content (credits, plan, lifetime revenue)
        rows: All of the user's performance rows
        month_rows: Rows created since the start of the current month
        now: Reference time for month projections

    Returns:
        The ``data`` payload of the dashboard response
    """
    total = len(rows)
    published = sum(1 for r in rows if r.status == "published")

    total_revenue = sum(r.revenue_total or 0 for r in rows)
    total_views = sum(r.views or 0 for r in rows)
    avg_roi = sum(r.roi or 0 for r in rows) / (total or 1)

    efficiency_score = min(
        MAX_EFFICIENCY_SCORE,
        round((avg_roi / 100) * 50 + (published / (total or 1)) * 50, 1),
    )

    this_month_revenue = sum(r.revenue_total or 0 for r in month_rows)
    days_in_month = calendar.monthrange(now.year, now.month)[1]
    projected_revenue = this_month_revenue / now.day * days_in_month

    cost_per_article = (
        sum(r.generation_cost or 0 for r in rows) / (total or 1)
    ) or DEFAULT_COST_PER_ARTICLE

    growth = this_month_revenue / (user.total_revenue_generated or 1) * 100

    return {
        "revenue": {
            "total": total_revenue,
            "thisMonth": this_month_revenue,
            "projected": projected_revenue,
            "growth": f"{growth:.1f}",
        },
        "reach": {
            "totalViews": total_views,
            "uniqueReaders": int(total_views * UNIQUE_READER_RATIO),
            "countries": REACH_COUNTRIES,
        },
        "efficiency": {
            "score": efficiency_score,
            "hoursSaved": published * HOURS_SAVED_PER_ARTICLE,
            "costPerArticle": f"{cost_per_article:.2f}",
        },
        "performance": {
            "roi": f"{avg_roi:.0f}",
            "viralAccuracy": VIRAL_ACCURACY,
        },
        "articles": {
            "total": total,
            "published": published,
            "drafts": total - published,
        },
        "credits": {
            "balance": user.credits_balance,
            "usedToday": user.credits_used_today,
        },
        "plan": user.plan,
    }


async def get_dashboard(db: AsyncSession, user: User, now: Optional[datetime] = None) -> dict:
    """Load the user's performance rows and build the dashboard payload."""
    now = now or datetime.now(UTC)

    result = await db.execute(
        select(ArticlePerformance).where(ArticlePerformance.user_id == user.id)
    )
    rows = result.scalars().all()

    start = month_start(now)
    month_rows = [r for r in rows if _as_utc(r.created_at) >= start]

    logger.debug("Dashboard for user %s: %d rows, %d this month", user.id, len(rows), len(month_rows))
    return build_dashboard(user, rows, month_rows, now)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on round-trip
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
