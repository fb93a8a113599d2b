"""Global test configuration for POMASA."""

import asyncio
from collections.abc import AsyncGenerator, AsyncIterator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from pomasa.api.app import app
from pomasa.api.dependencies import get_agent_runner, get_dialog_service
from pomasa.settings import Settings, get_settings

CATALOG = """# Pattern Catalog

## Core Patterns

| ID | Pattern | Necessity | Description |
|----|---------|-----------|-------------|
| COR-1 | [Prompt Defined Agent](COR-01-prompt-defined-agent.md) | Required | Agents are blueprints |
| COR-02 | [Intelligent Runtime](COR-02-intelligent-runtime.md) | Required | Runtime executes blueprints |

## Structure Patterns

| ID | Pattern | Necessity | Description |
|----|---------|-----------|-------------|
| STR-01 | [Reference Data](STR-01-reference-data.md) | Recommended | Domain knowledge in files |

## Behavior Patterns

| ID | Pattern | Necessity | Description |
|----|---------|-----------|-------------|
| BHV-03 | [Parallel  Fan Out](BHV-03-parallel-fan-out.md) | Optional | Run work in parallel |
"""

GENERATOR = "# Generator\n\nCreate agents/, references/ and data/.\n"

TEMPLATE = "# User Input\n\n**Project Identifier**: example\n"


class FakeRunner:
    """Agent runner replaying a fixed list of messages.

    Args:
        messages: Messages yielded in order
        error: Raised after the messages, if set
        delay: Seconds to sleep after the messages, before finishing
    """

    def __init__(
        self,
        messages: list[Any] | None = None,
        error: Exception | None = None,
        delay: float = 0,
    ) -> None:
        self.messages = messages or []
        self.error = error
        self.delay = delay
        self.calls: list[tuple[str, Path]] = []
        self.closed = False

    async def run(self, prompt: str, cwd: Path) -> AsyncIterator[Any]:
        self.calls.append((prompt, cwd))
        try:
            for message in self.messages:
                yield message
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.error is not None:
                raise self.error
        finally:
            self.closed = True


class FakeDialog:
    """Dialog service returning canned selections."""

    def __init__(self, folder: str | None = None, files: list[str] | None = None) -> None:
        self.folder = folder
        self.files = files or []
        self.prompts: list[str | None] = []

    async def select_folder(self, prompt: str | None = None) -> str | None:
        self.prompts.append(prompt)
        return self.folder

    async def select_files(self, prompt: str | None = None) -> list[str]:
        self.prompts.append(prompt)
        return list(self.files)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Framework data directory with a small catalog and documents."""
    root = tmp_path / "framework"
    patterns = root / "patterns"
    patterns.mkdir(parents=True)
    (patterns / "README.md").write_text(CATALOG, encoding="utf-8")
    (patterns / "COR-01-prompt-defined-agent.md").write_text(
        "# COR-01\n\nBlueprint details.\n", encoding="utf-8"
    )
    (root / "generator.md").write_text(GENERATOR, encoding="utf-8")
    (root / "user_input_template.md").write_text(TEMPLATE, encoding="utf-8")
    return root


@pytest.fixture
def test_settings(data_dir: Path) -> Settings:
    """Settings pointing at the temporary framework data."""
    return Settings(data_dir=data_dir, catalog_cache=False, dialog_timeout=5.0)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Parent directory for MAS projects created by tests."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def fake_dialog() -> FakeDialog:
    return FakeDialog()


@pytest_asyncio.fixture
async def client(
    test_settings: Settings, fake_runner: FakeRunner, fake_dialog: FakeDialog
) -> AsyncGenerator[AsyncClient, None]:
    """API client with settings, agent and dialogs replaced."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_agent_runner] = lambda: fake_runner
    app.dependency_overrides[get_dialog_service] = lambda: fake_dialog

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
