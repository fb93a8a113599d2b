"""
Unit tests for the Claude agent runner.
"""

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import pytest
from claude_agent_sdk import AssistantMessage, ClaudeAgentOptions, ClaudeSDKError, TextBlock

from pomasa.exceptions import AgentError
from pomasa.services.creation import ClaudeAgentRunner
from pomasa.services.creation import agent as agent_module


class FakeQuery:
    """Stands in for the SDK ``query`` function and records how it was used."""

    def __init__(self, messages: list[Any], error: Exception | None = None) -> None:
        self.messages = messages
        self.error = error
        self.options: ClaudeAgentOptions | None = None
        self.prompt: str | None = None
        self.closed = False

    async def __call__(self, *, prompt: str, options: ClaudeAgentOptions) -> AsyncIterator[Any]:
        self.prompt = prompt
        self.options = options
        try:
            for message in self.messages:
                yield message
            if self.error is not None:
                raise self.error
        finally:
            self.closed = True


def _text(text: str) -> AssistantMessage:
    return AssistantMessage(content=[TextBlock(text=text)], model="claude-test")


@pytest.mark.asyncio
class TestClaudeAgentRunner:
    """Tests for ClaudeAgentRunner.run."""

    async def test_yields_messages_with_options(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test that messages pass through and the SDK gets the working directory."""
        fake_query = FakeQuery([_text("one"), _text("two")])
        monkeypatch.setattr(agent_module, "query", fake_query)

        runner = ClaudeAgentRunner(permission_mode="bypassPermissions")
        messages = [message async for message in runner.run("Build it", tmp_path)]

        assert [m.content[0].text for m in messages] == ["one", "two"]
        assert fake_query.prompt == "Build it"
        assert fake_query.options is not None
        assert fake_query.options.cwd == tmp_path
        assert fake_query.options.permission_mode == "bypassPermissions"
        assert fake_query.closed

    async def test_close_stops_query(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test that closing the run early closes the SDK query too."""
        fake_query = FakeQuery([_text("one"), _text("two")])
        monkeypatch.setattr(agent_module, "query", fake_query)

        run = ClaudeAgentRunner().run("Build it", tmp_path)
        first = await anext(run)
        await run.aclose()

        assert first.content[0].text == "one"
        assert fake_query.closed

    async def test_sdk_error_becomes_agent_error(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test that SDK failures surface as AgentError with the SDK message."""
        fake_query = FakeQuery([_text("one")], error=ClaudeSDKError("CLI not found"))
        monkeypatch.setattr(agent_module, "query", fake_query)

        received = []
        with pytest.raises(AgentError, match="CLI not found") as exc_info:
            async for message in ClaudeAgentRunner().run("Build it", tmp_path):
                received.append(message)

        assert len(received) == 1
        assert isinstance(exc_info.value.__cause__, ClaudeSDKError)
        assert fake_query.closed
