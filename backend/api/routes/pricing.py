"""
Public pricing route.
"""

from fastapi import APIRouter

from api.schemas.analytics import PricingResponse
from core.plans import API_PRICING, PLANS

router = APIRouter(prefix="/pricing", tags=["Pricing"])


@router.get("", response_model=PricingResponse)
async def get_pricing():
    """Subscription tiers and per-operation API pricing."""
    return {
        "plans": [{"key": key, **plan} for key, plan in PLANS.items()],
        "apiPricing": API_PRICING,
    }
