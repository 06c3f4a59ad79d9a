"""
Authentication API routes.
"""

import logging
from datetime import datetime, timezone
from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_current_user, token_service
from api.middleware.rate_limit import get_rate_limit, limiter
from api.schemas.auth import (
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from core.plans import plan_credits
from core.security import PasswordHasher
from infrastructure.config.settings import settings
from infrastructure.database.connection import get_db
from infrastructure.database.models.user import SubscriptionTier, User, UserStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

password_hasher = PasswordHasher()

# Verified against when the email is unknown so both paths cost one bcrypt round
_DUMMY_HASH = "$2b$12$WmDNGEj9s7YLV5sV/N7aBOpWL0.T5.R5ZQOeKHNlLB.d7WN4HFXIC"


def _get_cookie_kwargs() -> dict:
    """Return cookie kwargs based on environment.

    Cross-site cookies (SameSite=None; Secure) are used in production and
    whenever the frontend is not on localhost.
    """
    is_deployed = not any(
        h in settings.frontend_url for h in ("localhost", "127.0.0.1", "0.0.0.0")
    )
    cross_site = settings.is_production or is_deployed
    return dict(
        httponly=True,
        secure=cross_site,
        samesite="none" if cross_site else "lax",
        path="/",
    )


def _token_response(user: User) -> JSONResponse:
    """Token pair in the JSON body plus HttpOnly cookies for browsers."""
    access_token, refresh_token = token_service.create_token_pair(
        user_id=user.id,
        email=user.email,
        plan=user.plan,
    )
    response = JSONResponse(
        content=TokenResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=settings.jwt_access_token_expire_minutes * 60,
        ).model_dump()
    )
    kwargs = _get_cookie_kwargs()
    response.set_cookie(
        "access_token",
        access_token,
        max_age=settings.jwt_access_token_expire_minutes * 60,
        **kwargs,
    )
    response.set_cookie(
        "refresh_token",
        refresh_token,
        max_age=settings.jwt_refresh_token_expire_days * 86400,
        **kwargs,
    )
    return response


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(get_rate_limit("register"))
async def register(
    request: Request,
    register_data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Register a new user account on the free plan.
    """
    email = register_data.email.lower()
    result = await db.execute(select(User).where(User.email == email))
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An account with this email already exists",
        )

    user = User(
        email=email,
        name=register_data.name,
        password_hash=password_hasher.hash(register_data.password),
        status=UserStatus.ACTIVE.value,
        plan=SubscriptionTier.FREE.value,
        credits_balance=plan_credits(SubscriptionTier.FREE.value),
    )

    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user


@router.post("/login", response_model=TokenResponse)
@limiter.limit(get_rate_limit("login"))
async def login(
    request: Request,
    login_data: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """
    Authenticate user and return access tokens.
    """
    result = await db.execute(select(User).where(User.email == login_data.email.lower()))
    user = result.scalar_one_or_none()

    password_ok = password_hasher.verify(
        login_data.password,
        user.password_hash if user else _DUMMY_HASH,
    )
    if not user or not password_ok:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    if user.status == UserStatus.SUSPENDED.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account has been suspended",
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive",
        )

    user.last_login = datetime.now(timezone.utc)
    user.login_count += 1
    await db.commit()

    return _token_response(user)


@router.post("/refresh", response_model=TokenResponse)
@limiter.limit(get_rate_limit("login"))
async def refresh_token(
    request: Request,
    body: Optional[RefreshTokenRequest] = Body(None),
    db: AsyncSession = Depends(get_db),
) -> JSONResponse:
    """
    Refresh access token using refresh token.

    The HttpOnly cookie is read first, then the request body.
    """
    refresh_tok = request.cookies.get("refresh_token")
    if not refresh_tok and body is not None:
        refresh_tok = body.refresh_token

    if not refresh_tok:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token required",
        )

    payload = token_service.verify_refresh_token(refresh_tok)

    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        )

    result = await db.execute(select(User).where(User.id == payload.sub))
    user = result.scalar_one_or_none()

    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return _token_response(user)


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """
    Get current authenticated user profile.
    """
    return current_user


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(
    current_user: Annotated[User, Depends(get_current_user)],
) -> JSONResponse:
    """
    Logout current user.

    JWTs are stateless; this clears the auth cookies and the client discards
    any bearer token it holds.
    """
    response = JSONResponse(content={"message": "Logged out successfully"})
    kwargs = _get_cookie_kwargs()
    response.delete_cookie("access_token", **kwargs)
    response.delete_cookie("refresh_token", **kwargs)
    return response
