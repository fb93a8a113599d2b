"""MasCreator: validates a creation request, prepares the MAS directory and
streams the agent's work back as events.

A request moves through these steps::

    validate -> check collision -> prepare -> invoke agent -> stream -> done

Everything up to and including ``prepare`` raises domain exceptions, so
callers can answer with a normal error response. Once streaming starts,
failures are reported in-band and the stream always ends with exactly one
``done`` event.
"""

import asyncio
from collections.abc import AsyncIterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import aiofiles

from pomasa.exceptions import (
    CatalogUnavailableError,
    InvalidMasNameError,
    MasAlreadyExistsError,
    MasWriteError,
    MissingFieldError,
)
from pomasa.models import CreationRequest, StreamEvent
from pomasa.services.creation.agent import AgentRunner, message_to_events
from pomasa.services.creation.document import (
    USER_INPUT_FILENAME,
    build_prompt,
    render_user_input,
)
from pomasa.services.framework import FrameworkService
from pomasa.utils.logger import logger

SIDECAR_DIRNAME = ".pomasa"
SIDECAR_FILENAME = "request.json"


@dataclass
class PreparedCreation:
    """A MAS directory that is ready for the agent.

    Attributes:
        mas_path: The newly created project directory
        document: Rendered ``user_input.md`` text
        prompt: Full prompt for the agent
        selected_patterns: Effective pattern selection, required ones included
    """

    mas_path: Path
    document: str
    prompt: str
    selected_patterns: list[str] = field(default_factory=list)


def validate_request(request: CreationRequest) -> Path:
    """Check required fields and return ``target_dir / mas_name``.

    Raises:
        MissingFieldError: If the target directory or MAS name is empty
        InvalidMasNameError: If the MAS name is not a single path component
    """
    target_dir = request.target_dir.strip()
    mas_name = request.mas_name.strip()
    if not target_dir or not mas_name:
        raise MissingFieldError()
    if mas_name in (".", "..") or "/" in mas_name or "\\" in mas_name:
        raise InvalidMasNameError(mas_name)
    return Path(target_dir) / mas_name


def merge_selection(selected: Sequence[str], required: Sequence[str]) -> list[str]:
    """User selection in order without repeats, followed by any missing required ids."""
    merged: list[str] = []
    for pid in [*selected, *required]:
        if pid not in merged:
            merged.append(pid)
    return merged


class MasCreator:
    """Creates a new MAS by handing a rendered request to the agent.

    Args:
        framework: Access to generator instructions and the pattern catalog
        runner: Agent runner used for the generation step
        agent_timeout: Upper bound on total agent runtime in seconds, None for no limit
    """

    def __init__(
        self,
        framework: FrameworkService,
        runner: AgentRunner,
        agent_timeout: float | None = None,
    ) -> None:
        self.framework = framework
        self.runner = runner
        self.agent_timeout = agent_timeout

    async def prepare(self, request: CreationRequest) -> PreparedCreation:
        """Validate the request and set up the MAS directory.

        Raises:
            MissingFieldError: If a required field is empty
            InvalidMasNameError: If the MAS name is not a plain directory name
            MasAlreadyExistsError: If the directory exists; nothing is written
            FrameworkFileError: If the generator instructions cannot be read
            MasWriteError: If the directory or its documents cannot be written
        """
        mas_path = validate_request(request)

        if mas_path.exists():
            logger.warning(f"Refusing to create MAS, {mas_path} already exists")
            raise MasAlreadyExistsError(mas_path)

        generator = await self.framework.read_generator()
        selected = merge_selection(request.selected_patterns, self._required_ids())
        document = render_user_input(request.user_input, selected)

        try:
            mas_path.mkdir(parents=True)
            logger.info(f"Created MAS directory {mas_path}")

            async with aiofiles.open(mas_path / USER_INPUT_FILENAME, "w", encoding="utf-8") as f:
                await f.write(document)
            await self._write_sidecar(mas_path, request, selected)
        except OSError as e:
            logger.error(f"Failed to prepare MAS directory {mas_path}: {e}")
            raise MasWriteError() from e

        prompt = build_prompt(generator, self.framework.patterns_dir, document, mas_path)
        return PreparedCreation(
            mas_path=mas_path,
            document=document,
            prompt=prompt,
            selected_patterns=selected,
        )

    async def stream(self, prepared: PreparedCreation) -> AsyncIterator[StreamEvent]:
        """Run the agent and yield its output as events.

        Yields ``output`` events in the order the agent produced them, then a
        single ``done`` event. Agent failures and timeouts yield one ``error``
        event before a failing ``done``.
        """
        mas_path = str(prepared.mas_path)
        logger.info(f"Invoking agent for {mas_path}")
        messages = aiter(self.runner.run(prepared.prompt, prepared.mas_path))
        try:
            async for event in self._events(messages):
                yield event
        except TimeoutError:
            logger.error(f"Agent timed out after {self.agent_timeout}s for {mas_path}")
            yield StreamEvent.error(f"Agent timed out after {self.agent_timeout} seconds")
            yield StreamEvent.done(1, mas_path)
            return
        except Exception as e:
            logger.exception(f"Agent failed for {mas_path}: {e}")
            yield StreamEvent.error(str(e) or type(e).__name__)
            yield StreamEvent.done(1, mas_path)
            return
        finally:
            await _close(messages)

        logger.info(f"Agent finished for {mas_path}")
        yield StreamEvent.done(0, mas_path)

    async def _events(self, messages: AsyncIterator[Any]) -> AsyncIterator[StreamEvent]:
        loop = asyncio.get_running_loop()
        deadline = None if self.agent_timeout is None else loop.time() + self.agent_timeout
        while True:
            remaining = None if deadline is None else max(deadline - loop.time(), 0)
            try:
                message = await asyncio.wait_for(anext(messages), timeout=remaining)
            except StopAsyncIteration:
                return
            for event in message_to_events(message):
                yield event

    def _required_ids(self) -> list[str]:
        try:
            return self.framework.catalog.required_ids()
        except CatalogUnavailableError:
            logger.warning("Pattern catalog unavailable, required patterns not enforced")
            return []

    @staticmethod
    async def _write_sidecar(
        mas_path: Path, request: CreationRequest, selected: list[str]
    ) -> None:
        """Keep the structured request beside the rendered document."""
        sidecar_dir = mas_path / SIDECAR_DIRNAME
        sidecar_dir.mkdir()
        record = request.model_copy(update={"selected_patterns": selected})
        async with aiofiles.open(sidecar_dir / SIDECAR_FILENAME, "w", encoding="utf-8") as f:
            await f.write(record.model_dump_json(by_alias=True, indent=2))


async def _close(messages: AsyncIterator[Any]) -> None:
    aclose = getattr(messages, "aclose", None)
    if aclose is not None:
        await aclose()
