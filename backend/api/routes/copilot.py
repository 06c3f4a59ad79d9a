"""
Copilot API routes: conversations, streaming chat and feedback.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_current_user, get_tool_context
from api.middleware.rate_limit import get_rate_limit, limiter
from api.schemas.copilot import (
    AdvancedChatRequest,
    ChatRequest,
    ConversationCreateRequest,
    ConversationListResponse,
    ConversationSaveResponse,
    FeedbackRequest,
    FeedbackResponse,
    MessageListResponse,
)
from api.utils import sse_response
from core.ai_router import TaskType
from infrastructure.database.connection import get_db
from infrastructure.database.models import (
    Conversation,
    CopilotInteraction,
    CopilotSession,
    Message,
    User,
)
from services import AIService, get_ai_service
from services.copilot import (
    ADVANCED_MAX_STEPS,
    BASIC_MAX_STEPS,
    BASIC_SYSTEM_PROMPT,
    ToolContext,
    advanced_registry,
    basic_registry,
    build_advanced_system_prompt,
    learn_from_feedback,
    run_copilot,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/copilot", tags=["Copilot"])


async def _get_own_conversation(db: AsyncSession, conversation_id: str, user: User) -> Conversation:
    result = await db.execute(
        select(Conversation).where(
            Conversation.id == conversation_id,
            Conversation.user_id == user.id,
        )
    )
    conversation = result.scalar_one_or_none()
    if not conversation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Conversation not found",
        )
    return conversation


def _last_user_text(body: ChatRequest) -> Optional[str]:
    last = body.messages[-1]
    if last.role != "user":
        return None
    return last.content if isinstance(last.content, str) else str(last.content)


@router.post("/conversations", response_model=ConversationSaveResponse, status_code=status.HTTP_201_CREATED)
async def create_conversation(
    body: ConversationCreateRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Start a new copilot conversation.
    """
    conversation = Conversation(
        user_id=current_user.id,
        title=body.title,
        description=body.description,
        context_type=body.context_type,
    )
    db.add(conversation)
    await db.commit()
    await db.refresh(conversation)
    return {"conversation": conversation}


@router.get("/conversations", response_model=ConversationListResponse)
async def list_conversations(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List the user's conversations, newest first.
    """
    result = await db.execute(
        select(Conversation)
        .where(Conversation.user_id == current_user.id)
        .order_by(Conversation.created_at.desc())
    )
    return {"conversations": result.scalars().all()}


@router.get("/conversations/{conversation_id}/messages", response_model=MessageListResponse)
async def list_messages(
    conversation_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List a conversation's messages in the order they were sent.
    """
    conversation = await _get_own_conversation(db, conversation_id, current_user)

    result = await db.execute(
        select(Message)
        .where(
            Message.conversation_id == conversation.id,
            Message.user_id == current_user.id,
        )
        .order_by(Message.created_at.asc())
    )
    return {"messages": result.scalars().all()}


@router.post("/chat")
@limiter.limit(get_rate_limit("chat"))
async def chat(
    request: Request,
    body: ChatRequest,
    ctx: ToolContext = Depends(get_tool_context),
    ai_service: AIService = Depends(get_ai_service),
):
    """
    Stream a basic copilot reply as Server-Sent Events.

    When a conversation is given, the latest user message is stored before
    the model runs and the final assistant answer, with its tool calls,
    once it finishes.
    """
    db, user = ctx.db, ctx.user
    conversation = None
    if body.conversation_id:
        conversation = await _get_own_conversation(db, body.conversation_id, user)
        user_text = _last_user_text(body)
        if user_text is not None:
            db.add(
                Message(
                    conversation_id=conversation.id,
                    user_id=user.id,
                    role="user",
                    content=user_text,
                )
            )
            await db.commit()

    provider, selection = ai_service.provider_for_task(TaskType.CHAT_SIMPLE)

    async def save_answer(result: dict) -> None:
        if conversation is None or not result["text"]:
            return
        db.add(
            Message(
                conversation_id=conversation.id,
                user_id=user.id,
                role="assistant",
                content=result["text"],
                tool_calls=result["toolCalls"] or None,
            )
        )
        await db.commit()

    events = run_copilot(
        provider,
        basic_registry,
        [m.model_dump() for m in body.messages],
        ctx,
        system=BASIC_SYSTEM_PROMPT,
        max_steps=BASIC_MAX_STEPS,
        model=selection.model,
    )
    return sse_response(events, on_finish=save_answer)


@router.post("/advanced-chat")
@limiter.limit(get_rate_limit("chat"))
async def advanced_chat(
    request: Request,
    body: AdvancedChatRequest,
    ctx: ToolContext = Depends(get_tool_context),
    ai_service: AIService = Depends(get_ai_service),
):
    """
    Stream an advanced copilot reply as Server-Sent Events.

    A copilot session is opened for the conversation when the client has
    none, and the user's query is logged as an interaction whose response
    is filled in when the model finishes.
    """
    db, user = ctx.db, ctx.user
    context = dict(body.context)

    session_id = context.get("sessionId")
    if session_id:
        session_id = str(session_id)
        result = await db.execute(
            select(CopilotSession).where(
                CopilotSession.id == session_id,
                CopilotSession.user_id == user.id,
            )
        )
        if not result.scalar_one_or_none():
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Session not found",
            )
    elif body.conversation_id:
        conversation = await _get_own_conversation(db, body.conversation_id, user)
        session = CopilotSession(
            user_id=user.id,
            conversation_id=conversation.id,
            context_data=context,
        )
        db.add(session)
        await db.flush()
        session_id = session.id

    interaction_id = None
    query = _last_user_text(body)
    if session_id and query is not None:
        interaction = CopilotInteraction(
            session_id=session_id,
            user_id=user.id,
            query=query,
            response="Processing...",
            context=context,
        )
        db.add(interaction)
        await db.flush()
        interaction_id = interaction.id

    await db.commit()

    provider, selection = ai_service.provider_for_task(TaskType.CHAT_SIMPLE)

    async def record_answer(result: dict) -> None:
        if interaction_id is None:
            return
        await db.execute(
            update(CopilotInteraction)
            .where(CopilotInteraction.id == interaction_id)
            .values(response=result["text"])
        )
        await db.commit()

    events = run_copilot(
        provider,
        advanced_registry,
        [m.model_dump() for m in body.messages],
        ctx,
        system=build_advanced_system_prompt(user, context),
        max_steps=ADVANCED_MAX_STEPS,
        temperature=0.7,
        model=selection.model,
    )
    headers = {"X-Copilot-Session-Id": session_id} if session_id else None
    return sse_response(events, on_finish=record_answer, headers=headers)


@router.post("/feedback", response_model=FeedbackResponse)
async def feedback(
    body: FeedbackRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Learn copilot preferences from thumbs-up/down feedback on a message.
    """
    current_user.copilot_preferences = learn_from_feedback(
        current_user.copilot_preferences,
        body.is_positive,
        body.context,
        datetime.now(timezone.utc),
    )
    await db.commit()

    logger.info(
        "Copilot feedback on message %s from user %s (positive=%s)",
        body.message_id, current_user.id, body.is_positive,
    )
    return {"success": True, "learned": True}
