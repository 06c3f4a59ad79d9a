"""
Journalist style API routes.

A user has at most one default style: saving a style with ``isDefault``
clears the flag on all of the user's styles first, in the same transaction.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_current_user
from api.schemas.styles import StyleListResponse, StyleRequest, StyleSaveResponse
from infrastructure.database.connection import get_db
from infrastructure.database.models import JournalistStyle, User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/styles", tags=["Journalist Styles"])

# Fields copied from the request onto the row on create and update
_STYLE_FIELDS = (
    "name",
    "description",
    "tone",
    "style_characteristics",
    "example_text",
    "training_text_1",
    "training_text_2",
    "training_text_3",
)


async def _get_own_style(db: AsyncSession, style_id: str, user: User) -> JournalistStyle:
    result = await db.execute(
        select(JournalistStyle).where(
            JournalistStyle.id == style_id,
            JournalistStyle.user_id == user.id,
        )
    )
    style = result.scalar_one_or_none()
    if not style:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Style not found",
        )
    return style


@router.get("", response_model=StyleListResponse)
async def list_styles(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List the user's styles, default first, then most used.
    """
    result = await db.execute(
        select(JournalistStyle)
        .where(JournalistStyle.user_id == current_user.id)
        .order_by(JournalistStyle.is_default.desc(), JournalistStyle.usage_count.desc())
    )
    return {"styles": result.scalars().all()}


@router.post("", response_model=StyleSaveResponse)
async def save_style(
    body: StyleRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a style, or update the user's own style when ``id`` is given.
    """
    style = await _get_own_style(db, body.id, current_user) if body.id else None

    if body.is_default:
        await db.execute(
            update(JournalistStyle)
            .where(JournalistStyle.user_id == current_user.id)
            .values(is_default=False)
        )

    if style is None:
        style = JournalistStyle(user_id=current_user.id)
        db.add(style)

    for field in _STYLE_FIELDS:
        value = getattr(body, field)
        # Empty training texts are stored as NULL
        if field.startswith("training_text_") and not value:
            value = None
        setattr(style, field, value)
    style.is_default = body.is_default

    await db.commit()
    await db.refresh(style)

    logger.info("Saved style %s for user %s (default=%s)", style.id, current_user.id, style.is_default)
    return {"style": style, "success": True}


@router.delete("/{style_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_style(
    style_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete one of the user's styles.
    """
    style = await _get_own_style(db, style_id, current_user)
    await db.delete(style)
    await db.commit()
