"""
Tool registry for the copilots.

Tools register themselves with ``@registry.register(...)``. Each tool has a
pydantic parameter model whose JSON schema is what the model sees, and an
async handler that receives the validated parameters and a ToolContext.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from adapters.ai import ToolSpec
from adapters.news import NewsAPIAdapter
from infrastructure.database.models import User

logger = logging.getLogger(__name__)


class ToolParams(BaseModel):
    """Base for tool parameter models; the model speaks camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@dataclass
class ToolContext:
    """Per-request state handed to every tool handler."""

    db: AsyncSession
    user: User
    news: NewsAPIAdapter
    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], datetime] = lambda: datetime.now(UTC)

    def now(self) -> datetime:
        return self.clock()


ToolHandler = Callable[[Any, ToolContext], Awaitable[Dict[str, Any]]]


@dataclass
class CopilotTool:
    name: str
    description: str
    params: Type[ToolParams]
    handler: ToolHandler

    def spec(self) -> ToolSpec:
        return ToolSpec(
            name=self.name,
            description=self.description,
            parameters=self.params.model_json_schema(by_alias=True),
        )


class ToolRegistry:
    """
    A named set of tools exposed to one copilot.

    Usage:
        registry = ToolRegistry("basic")

        @registry.register("seoOptimizer", "Analyze content for SEO", SeoParams)
        async def seo_optimizer(params: SeoParams, ctx: ToolContext) -> dict:
            ...
    """

    def __init__(self, name: str):
        self.name = name
        self._tools: Dict[str, CopilotTool] = {}

    def register(self, name: str, description: str, params: Type[ToolParams]):
        def decorator(func: ToolHandler) -> ToolHandler:
            self._tools[name] = CopilotTool(
                name=name, description=description, params=params, handler=func
            )
            return func

        return decorator

    @property
    def names(self) -> List[str]:
        return list(self._tools)

    def get(self, name: str) -> Optional[CopilotTool]:
        return self._tools.get(name)

    def specs(self) -> List[ToolSpec]:
        return [t.spec() for t in self._tools.values()]

    async def execute(self, name: str, arguments: Dict[str, Any], ctx: ToolContext) -> Dict[str, Any]:
        """
        Validate arguments and run a tool.

        Failures come back as ``{"error": ...}`` payloads so the model can
        read them and carry on; they never abort the chat.
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning("Model requested unknown tool %s", name, extra={"tool": name})
            return {"error": f"Unknown tool: {name}", "availableTools": self.names}

        try:
            params = tool.params.model_validate(arguments)
        except ValidationError as e:
            return {
                "error": f"Invalid arguments for {name}",
                "details": e.errors(include_url=False, include_context=False),
            }

        try:
            return await tool.handler(params, ctx)
        except Exception as e:
            logger.exception("Tool %s failed", name, extra={"tool": name})
            return {"error": f"{name} failed: {e}"}
