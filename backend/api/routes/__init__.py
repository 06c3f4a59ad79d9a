"""API Routes."""

from fastapi import APIRouter

from .analytics import router as analytics_router
from .articles import router as articles_router
from .auth import router as auth_router
from .copilot import router as copilot_router
from .health import router as health_router
from .news import router as news_router
from .newspapers import router as newspapers_router
from .pricing import router as pricing_router
from .seo import router as seo_router
from .styles import router as styles_router

# Create main API router
api_router = APIRouter()

# Include route modules
api_router.include_router(health_router, tags=["Health"])
api_router.include_router(auth_router)
api_router.include_router(articles_router)
api_router.include_router(styles_router)
api_router.include_router(news_router)
api_router.include_router(seo_router)
api_router.include_router(copilot_router)
api_router.include_router(newspapers_router)
api_router.include_router(analytics_router)
api_router.include_router(pricing_router)
