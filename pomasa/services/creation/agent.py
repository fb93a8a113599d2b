"""Bridge to the external coding agent (Claude Agent SDK).

The agent receives a prompt and a working directory and yields typed
messages; this module runs it and turns those messages into stream events.
"""

from collections.abc import AsyncIterator
from contextlib import aclosing
from pathlib import Path
from typing import Any, Protocol

from claude_agent_sdk import (
    AssistantMessage,
    ClaudeAgentOptions,
    ClaudeSDKError,
    ResultMessage,
    TextBlock,
    ToolUseBlock,
    query,
)

from pomasa.exceptions import AgentError
from pomasa.models import StreamEvent

COMPLETED_NOTICE = "\n--- Completed ---\n"


class AgentRunner(Protocol):
    """Anything that can run the agent and yield its messages in order."""

    def run(self, prompt: str, cwd: Path) -> AsyncIterator[Any]: ...


class ClaudeAgentRunner:
    """Runs the Claude agent with file edits auto-accepted.

    Args:
        permission_mode: SDK permission mode, ``acceptEdits`` by default
    """

    def __init__(self, permission_mode: str = "acceptEdits") -> None:
        self.permission_mode = permission_mode

    async def run(self, prompt: str, cwd: Path) -> AsyncIterator[Any]:
        """Yield agent messages as they arrive.

        Closing this generator closes the SDK query, which stops the agent
        process.

        Raises:
            AgentError: If the agent process cannot be started or fails
        """
        options = ClaudeAgentOptions(cwd=cwd, permission_mode=self.permission_mode)  # type: ignore[arg-type]
        try:
            async with aclosing(query(prompt=prompt, options=options)) as messages:
                async for message in messages:
                    yield message
        except ClaudeSDKError as e:
            raise AgentError(str(e) or "Agent failed") from e


def tool_notice(tool_name: str) -> str:
    return f"[Tool: {tool_name}]\n"


def message_to_events(message: Any) -> list[StreamEvent]:
    """Map one agent message to zero or more ``output`` events.

    Assistant text becomes output as-is, tool calls become a bracketed
    notice, and the final result becomes a completion marker. Other message
    kinds (system, user/tool results) produce nothing.
    """
    if isinstance(message, AssistantMessage):
        events: list[StreamEvent] = []
        for block in message.content or []:
            if isinstance(block, TextBlock):
                events.append(StreamEvent.output(block.text))
            elif isinstance(block, ToolUseBlock):
                events.append(StreamEvent.output(tool_notice(block.name)))
        return events
    if isinstance(message, ResultMessage):
        return [StreamEvent.output(COMPLETED_NOTICE)]
    return []
