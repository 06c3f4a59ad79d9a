"""
Copilot tool registries, prompts and the tool-calling loop.
"""

from .advanced_tools import advanced_registry
from .basic_tools import basic_registry
from .engine import (
    ADVANCED_MAX_STEPS,
    BASIC_MAX_STEPS,
    NEWSPAPER_MAX_STEPS,
    CopilotEvent,
    run_copilot,
    to_history,
)
from .newspaper_tools import newspaper_registry
from .preferences import learn_from_feedback
from .prompts import (
    BASIC_SYSTEM_PROMPT,
    NEWSPAPER_SYSTEM_PROMPT,
    build_advanced_system_prompt,
)
from .registry import ToolContext, ToolParams, ToolRegistry

__all__ = [
    "ADVANCED_MAX_STEPS",
    "BASIC_MAX_STEPS",
    "NEWSPAPER_MAX_STEPS",
    "BASIC_SYSTEM_PROMPT",
    "NEWSPAPER_SYSTEM_PROMPT",
    "CopilotEvent",
    "ToolContext",
    "ToolParams",
    "ToolRegistry",
    "advanced_registry",
    "basic_registry",
    "build_advanced_system_prompt",
    "learn_from_feedback",
    "newspaper_registry",
    "run_copilot",
    "to_history",
]
