"""
Digital newspaper copilot route.
"""

import logging

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_tool_context
from api.middleware.rate_limit import get_rate_limit, limiter
from api.schemas.copilot import NewspaperRequest
from api.utils import sse_response
from core.ai_router import TaskType
from services import AIService, get_ai_service
from services.copilot import (
    NEWSPAPER_MAX_STEPS,
    NEWSPAPER_SYSTEM_PROMPT,
    ToolContext,
    newspaper_registry,
    run_copilot,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/newspapers", tags=["Newspapers"])


@router.post("/generate")
@limiter.limit(get_rate_limit("generation"))
async def generate_newspaper(
    request: Request,
    body: NewspaperRequest,
    ctx: ToolContext = Depends(get_tool_context),
    ai_service: AIService = Depends(get_ai_service),
):
    """
    Stream the editorial copilot, which configures, generates and validates
    a multi-page newspaper, as Server-Sent Events.
    """
    provider, selection = ai_service.provider_for_task(TaskType.CHAT_SIMPLE)
    logger.info("Newspaper copilot for user %s on %s", ctx.user.id, selection.model)

    events = run_copilot(
        provider,
        newspaper_registry,
        [m.model_dump() for m in body.messages],
        ctx,
        system=NEWSPAPER_SYSTEM_PROMPT,
        max_steps=NEWSPAPER_MAX_STEPS,
        temperature=0.7,
        model=selection.model,
    )
    return sse_response(events)
