"""
Viral and revenue potential scoring for discovered news.

Scores are drawn from fixed bands; the caller supplies the RNG so tests can
seed it.
"""

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

VIRAL_BAND = (60, 100)
REVENUE_BAND = (70, 100)
TRENDING_BAND = (5, 10)
REACH_BAND = (100_000, 600_000)

TOP_PICK_THRESHOLD = 75
TOP_PICK_LIMIT = 3


@dataclass
class NewsScores:
    viral_score: float
    revenue_score: float
    trending_potential: float
    estimated_reach: int


def score_news(rng: random.Random) -> NewsScores:
    return NewsScores(
        viral_score=rng.uniform(*VIRAL_BAND),
        revenue_score=rng.uniform(*REVENUE_BAND),
        trending_potential=rng.uniform(*TRENDING_BAND),
        estimated_reach=int(rng.uniform(*REACH_BAND)),
    )


def top_picks(items: Sequence[dict]) -> list[dict]:
    """Items with a viral score above the threshold, at most three."""
    return [i for i in items if i["viralScore"] > TOP_PICK_THRESHOLD][:TOP_PICK_LIMIT]


def average_viral_score(items: Iterable[dict]) -> str:
    scores = [i["viralScore"] for i in items]
    if not scores:
        return "0"
    return f"{sum(scores) / len(scores):.1f}"


def reach_label(reach: int) -> str:
    return f"{reach / 1000:.0f}K"
