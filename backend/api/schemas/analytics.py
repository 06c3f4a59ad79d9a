"""
Executive dashboard and pricing schemas.
"""

from typing import Dict, List

from pydantic import BaseModel


class RevenueMetrics(BaseModel):
    total: float
    thisMonth: float
    projected: float
    growth: str


class ReachMetrics(BaseModel):
    totalViews: int
    uniqueReaders: int
    countries: int


class EfficiencyMetrics(BaseModel):
    score: float
    hoursSaved: int
    costPerArticle: str


class PerformanceMetrics(BaseModel):
    roi: str
    viralAccuracy: int


class ArticleCounts(BaseModel):
    total: int
    published: int
    drafts: int


class CreditMetrics(BaseModel):
    balance: int
    usedToday: int


class DashboardData(BaseModel):
    revenue: RevenueMetrics
    reach: ReachMetrics
    efficiency: EfficiencyMetrics
    performance: PerformanceMetrics
    articles: ArticleCounts
    credits: CreditMetrics
    plan: str


class DashboardResponse(BaseModel):
    success: bool = True
    data: DashboardData


class PlanResponse(BaseModel):
    key: str
    tier: str
    name: str
    price: int
    credits: int
    features: List[str]


class PricingResponse(BaseModel):
    plans: List[PlanResponse]
    apiPricing: Dict[str, float]
