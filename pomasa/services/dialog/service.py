"""DialogService: runs native folder and file pickers."""

import asyncio

from pomasa.services.dialog.backends import DialogBackend, detect_backend
from pomasa.settings import settings
from pomasa.utils.logger import logger

DEFAULT_FOLDER_PROMPT = "Select folder"
DEFAULT_FILES_PROMPT = "Select files"


class DialogService:
    """Opens native pickers and parses what they print.

    Cancellation, a missing picker program, a timeout and any process error
    all produce an empty result; nothing is raised to the caller.

    Args:
        backend: Picker backend; detected from ``PATH`` when omitted
        timeout: Seconds to wait for the user before giving up
    """

    def __init__(self, backend: DialogBackend | None = None, timeout: float | None = None) -> None:
        self.backend = backend if backend is not None else detect_backend()
        self.timeout = timeout if timeout is not None else settings.dialog_timeout

    async def select_folder(self, prompt: str | None = None) -> str | None:
        """Ask the user for one folder.

        Returns:
            Absolute folder path without a trailing slash, or None
        """
        if self.backend is None:
            logger.warning("No native folder picker available")
            return None
        stdout = await self._run(self.backend.folder_command(prompt or DEFAULT_FOLDER_PROMPT))
        if stdout is None:
            return None
        path = stdout.strip()
        if not path:
            return None
        return path.rstrip("/") or path

    async def select_files(self, prompt: str | None = None) -> list[str]:
        """Ask the user for one or more files.

        Returns:
            Selected paths in picker order; empty if none
        """
        if self.backend is None:
            logger.warning("No native file picker available")
            return []
        stdout = await self._run(self.backend.files_command(prompt or DEFAULT_FILES_PROMPT))
        if stdout is None:
            return []
        return [line for line in stdout.strip().split("\n") if line.strip()]

    async def _run(self, command: list[str]) -> str | None:
        """Run a picker and return its stdout, or None on cancel or failure."""
        logger.debug(f"Opening picker: {command[0]}")
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.warning(f"Failed to start picker {command[0]}: {e}")
            return None

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except TimeoutError:
            logger.warning(f"Picker {command[0]} timed out after {self.timeout}s")
            process.kill()
            await process.wait()
            return None

        if process.returncode != 0:
            # Non-zero exit is how every backend reports cancel
            logger.debug(
                f"Picker {command[0]} exited with {process.returncode}: "
                f"{stderr.decode(errors='replace').strip()}"
            )
            return None
        return stdout.decode("utf-8", errors="replace")
