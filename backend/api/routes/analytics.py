"""
Executive dashboard analytics route.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_current_user
from api.schemas.analytics import DashboardResponse
from infrastructure.database.connection import get_db
from infrastructure.database.models import User
from services.analytics import get_dashboard

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Revenue, reach, efficiency and credit metrics for the current user.
    """
    data = await get_dashboard(db, current_user)
    return {"success": True, "data": data}
