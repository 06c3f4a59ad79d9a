"""
Tool-calling loop shared by the copilots.

``run_copilot`` drives a provider through repeated model steps. After each
step it executes the tool calls the model asked for and feeds the results
back, until the model answers in plain text or ``max_steps`` is reached. It
yields CopilotEvents as it goes; the HTTP layer streams them as SSE.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, Iterable, List, Optional

from adapters.ai import AIProviderError, LLMProvider

from .registry import ToolContext, ToolRegistry

logger = logging.getLogger(__name__)

BASIC_MAX_STEPS = 5
ADVANCED_MAX_STEPS = 10
NEWSPAPER_MAX_STEPS = 10

TOOL_CALL = "tool-call"
TOOL_RESULT = "tool-result"
TEXT = "text"
FINISH = "finish"
ERROR = "error"


@dataclass
class CopilotEvent:
    type: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_sse(self) -> str:
        return f"event: {self.type}\ndata: {json.dumps(self.data, default=str)}\n\n"


def to_history(messages: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Keep the user and assistant text turns of a client message list."""
    history = []
    for msg in messages:
        role = msg.get("role")
        if role not in ("user", "assistant"):
            continue
        content = msg.get("content")
        if not isinstance(content, str):
            content = json.dumps(content, default=str) if content is not None else ""
        history.append({"role": role, "content": content})
    return history


async def run_copilot(
    provider: LLMProvider,
    registry: ToolRegistry,
    messages: Iterable[Dict[str, Any]],
    ctx: ToolContext,
    system: Optional[str] = None,
    max_steps: int = BASIC_MAX_STEPS,
    temperature: float = 0.7,
    model: Optional[str] = None,
) -> AsyncIterator[CopilotEvent]:
    """
    Run the tool loop and yield events.

    The final event is always ``finish`` (with the answer text, every tool
    call made and the step count) or ``error`` when the provider fails.
    """
    history = to_history(messages)
    tools = registry.specs()
    calls_made: List[Dict[str, Any]] = []
    final_text = ""
    steps = 0

    while steps < max_steps:
        steps += 1
        try:
            turn = await provider.chat(
                history,
                system=system,
                tools=tools,
                temperature=temperature,
                model=model,
            )
        except AIProviderError as e:
            logger.error("Copilot step %d failed: %s", steps, e, extra={"provider": e.provider})
            yield CopilotEvent(ERROR, {"error": str(e), "step": steps})
            return

        if turn.text:
            final_text = turn.text
            yield CopilotEvent(TEXT, {"text": turn.text, "step": steps})

        if not turn.tool_calls:
            break

        history.append(
            {
                "role": "assistant",
                "content": turn.text,
                "tool_calls": [tc.to_dict() for tc in turn.tool_calls],
            }
        )

        for call in turn.tool_calls:
            yield CopilotEvent(TOOL_CALL, call.to_dict())
            result = await registry.execute(call.name, call.arguments, ctx)
            calls_made.append({**call.to_dict(), "result": result})
            yield CopilotEvent(
                TOOL_RESULT, {"id": call.id, "name": call.name, "result": result}
            )
            history.append(
                {
                    "role": "tool",
                    "tool_call_id": call.id,
                    "name": call.name,
                    "content": json.dumps(result, default=str),
                }
            )
    else:
        logger.info("Copilot %s stopped at max steps (%d)", registry.name, max_steps)

    yield CopilotEvent(
        FINISH, {"text": final_text, "toolCalls": calls_made, "steps": steps}
    )
