"""
Shared API dependencies: authentication, RNG and copilot tool context.
"""

import random
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from adapters.news import NewsAPIAdapter, get_news_adapter
from core.security import TokenService
from infrastructure.config.settings import settings
from infrastructure.database.connection import get_db
from infrastructure.database.models.user import User
from services.copilot import ToolContext

token_service = TokenService(
    secret_key=settings.jwt_secret_key,
    algorithm=settings.jwt_algorithm,
    access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
    refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
)


async def get_current_user(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Dependency to get the current authenticated user.

    Checks the Authorization header first (Bearer token), then falls back
    to the HttpOnly access_token cookie.
    """
    token = None
    if authorization and authorization.startswith("Bearer "):
        token = authorization[len("Bearer "):].strip() or None

    if not token:
        token = request.cookies.get("access_token")

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = token_service.verify_access_token(token)

    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    result = await db.execute(select(User).where(User.id == payload.sub))
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is not active",
        )

    return user


def get_rng() -> random.Random:
    """Random source for score bands; overridden in tests for determinism."""
    return random.Random()


async def get_tool_context(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
    news: Annotated[NewsAPIAdapter, Depends(get_news_adapter)],
    rng: Annotated[random.Random, Depends(get_rng)],
) -> ToolContext:
    """Tool context for the copilot endpoints."""
    return ToolContext(db=db, user=current_user, news=news, rng=rng)
