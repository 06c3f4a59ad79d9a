"""
Shared API utility functions.
"""

from typing import AsyncIterator, Awaitable, Callable, Dict, Optional

from fastapi.responses import StreamingResponse

from services.copilot import CopilotEvent
from services.copilot.engine import FINISH

FinishHook = Callable[[dict], Awaitable[None]]


async def _sse_lines(
    events: AsyncIterator[CopilotEvent],
    on_finish: Optional[FinishHook],
) -> AsyncIterator[str]:
    async for event in events:
        if event.type == FINISH and on_finish is not None:
            await on_finish(event.data)
        yield event.to_sse()


def sse_response(
    events: AsyncIterator[CopilotEvent],
    on_finish: Optional[FinishHook] = None,
    headers: Optional[Dict[str, str]] = None,
) -> StreamingResponse:
    """
    Stream copilot events as Server-Sent Events.

    ``on_finish`` runs with the finish payload before that event is sent.
    """
    return StreamingResponse(
        _sse_lines(events, on_finish),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no", **(headers or {})},
    )
