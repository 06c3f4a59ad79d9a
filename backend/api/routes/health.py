"""Health check endpoints."""

import asyncio
import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.config import get_settings
from infrastructure.database import get_db, ping_db

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()


@router.get("/health")
async def health_check():
    """Basic health check with configured-provider flags."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "providers": {
            "openai": bool(settings.openai_api_key),
            "groq": bool(settings.groq_api_key),
            "anthropic": bool(settings.anthropic_api_key),
            "newsapi": bool(settings.newsapi_key),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }


@router.get("/health/db")
async def health_check_db(db: AsyncSession = Depends(get_db)):
    """Health check with database connectivity."""
    try:
        await asyncio.wait_for(ping_db(db), timeout=5.0)
        db_status = "connected"
    except TimeoutError:
        logger.error("Health check DB timeout")
        db_status = "error: database timeout"
    except SQLAlchemyError as e:
        logger.error("Health check DB error: %s", str(e))
        db_status = "error: database check failed"

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "database": db_status,
        "timestamp": datetime.now(UTC).isoformat(),
    }


@router.get("/health/live")
async def liveness_check():
    """Kubernetes-style liveness probe."""
    return {"alive": True}
