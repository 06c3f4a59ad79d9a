"""
Tests for the executive dashboard formulas.
"""

from datetime import UTC, datetime

import pytest

from infrastructure.database.models import ArticlePerformance, User
from services.analytics import build_dashboard, month_start


def _user(**overrides) -> User:
    fields = dict(
        email="u@example.com",
        name="U",
        password_hash="x",
        plan="free",
        credits_balance=80,
        credits_used_today=3,
        total_revenue_generated=0.0,
    )
    fields.update(overrides)
    return User(**fields)


def _row(**overrides) -> ArticlePerformance:
    fields = dict(
        user_id="u1",
        title="t",
        status="draft",
        views=0,
        revenue_total=0.0,
        roi=0.0,
        generation_cost=0.0,
    )
    fields.update(overrides)
    return ArticlePerformance(**fields)


NOW = datetime(2026, 6, 15, 10, 30, tzinfo=UTC)


def test_month_start():
    assert month_start(NOW) == datetime(2026, 6, 1, tzinfo=UTC)


def test_empty_dashboard():
    data = build_dashboard(_user(), [], [], NOW)

    assert data["revenue"] == {"total": 0, "thisMonth": 0, "projected": 0.0, "growth": "0.0"}
    assert data["efficiency"] == {"score": 0.0, "hoursSaved": 0, "costPerArticle": "0.15"}
    assert data["performance"] == {"roi": "0", "viralAccuracy": 94}
    assert data["credits"] == {"balance": 80, "usedToday": 3}
    assert data["plan"] == "free"


def test_projection_scales_month_to_date_revenue():
    month_rows = [_row(revenue_total=30.0)]

    data = build_dashboard(_user(), month_rows, month_rows, NOW)

    # 30 over 15 days of a 30-day month
    assert data["revenue"]["projected"] == pytest.approx(60.0)


def test_growth_against_lifetime_revenue():
    month_rows = [_row(revenue_total=25.0)]

    data = build_dashboard(_user(total_revenue_generated=200.0), month_rows, month_rows, NOW)

    assert data["revenue"]["growth"] == "12.5"


def test_efficiency_score_is_capped():
    rows = [_row(status="published", roi=500.0) for _ in range(4)]

    data = build_dashboard(_user(), rows, [], NOW)

    assert data["efficiency"]["score"] == 99.7
    assert data["efficiency"]["hoursSaved"] == 8
    assert data["articles"] == {"total": 4, "published": 4, "drafts": 0}


def test_cost_per_article_average():
    rows = [_row(generation_cost=0.2), _row(generation_cost=0.4)]

    data = build_dashboard(_user(), rows, [], NOW)

    assert data["efficiency"]["costPerArticle"] == "0.30"


def test_reach():
    rows = [_row(views=300), _row(views=700)]

    data = build_dashboard(_user(), rows, [], NOW)

    assert data["reach"] == {"totalViews": 1000, "uniqueReaders": 700, "countries": 89}
