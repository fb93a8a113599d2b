"""MAS creation: document rendering, agent invocation and event streaming."""

from .agent import COMPLETED_NOTICE, AgentRunner, ClaudeAgentRunner, message_to_events, tool_notice
from .document import (
    NONE_PLACEHOLDER,
    USER_INPUT_FILENAME,
    build_prompt,
    render_references,
    render_user_input,
)
from .orchestrator import MasCreator, PreparedCreation, merge_selection, validate_request

__all__ = [
    "COMPLETED_NOTICE",
    "NONE_PLACEHOLDER",
    "USER_INPUT_FILENAME",
    "AgentRunner",
    "ClaudeAgentRunner",
    "MasCreator",
    "PreparedCreation",
    "build_prompt",
    "merge_selection",
    "message_to_events",
    "render_references",
    "render_user_input",
    "tool_notice",
    "validate_request",
]
