"""
Pricing configuration.

Single source of truth for plan tiers and per-operation API prices. It lives
in core/ so both service and API layers can import from it without creating
circular dependencies.
"""

# Plan configuration keyed by ``User.plan``
PLANS = {
    "free": {
        "tier": "FREE",
        "name": "Starter",
        "price": 0,
        "credits": 100,
        "features": [
            "100 articles/month",
            "Basic AI journalists",
            "Standard news sources",
            "Manual publishing",
            "Basic analytics",
        ],
    },
    "pro": {
        "tier": "PRO",
        "name": "Professional",
        "price": 49,
        "credits": 1000,
        "features": [
            "1,000 articles/month",
            "All AI journalists",
            "Premium news sources",
            "Multi-platform publishing",
            "Advanced analytics",
            "API access",
            "Priority support",
        ],
    },
    "enterprise": {
        "tier": "ENTERPRISE",
        "name": "Enterprise",
        "price": 199,
        "credits": 5000,
        "features": [
            "Unlimited articles",
            "Custom AI journalists",
            "White-label solution",
            "Dedicated support",
            "Custom integrations",
            "Multi-user accounts",
            "SLA guarantee",
        ],
    },
}

# USD charged per API operation
API_PRICING = {
    "generateArticle": 0.25,
    "rewriteNews": 0.15,
    "optimizeSEO": 0.10,
    "searchNews": 0.05,
    "multiPublish": 0.20,
}


def get_plan(plan: str) -> dict:
    """Return the plan config, falling back to the free tier for unknown keys."""
    return PLANS.get(plan, PLANS["free"])


def plan_credits(plan: str) -> int:
    return get_plan(plan)["credits"]
