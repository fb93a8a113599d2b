"""
Unit tests for the native dialog bridge.

Picker programs are replaced by small ``sh`` scripts that behave like a
picker: print a selection and exit 0, or exit non-zero on cancel.
"""

import shutil
from dataclasses import dataclass, field

import pytest

from pomasa.services.dialog import (
    DEFAULT_FILES_PROMPT,
    DEFAULT_FOLDER_PROMPT,
    DialogService,
    KdialogBackend,
    OsascriptBackend,
    ZenityBackend,
    detect_backend,
)

requires_sh = pytest.mark.skipif(shutil.which("sh") is None, reason="sh not available")

ECHO_PROMPT = 'printf "%s\\n" "$1"'


@dataclass
class ScriptBackend:
    """Backend running a shell snippet with the prompt as ``$1``."""

    folder_script: str = ECHO_PROMPT
    files_script: str = ECHO_PROMPT
    name: str = "script"
    executable: str = "sh"
    prompts: list[str] = field(default_factory=list)

    def folder_command(self, prompt: str) -> list[str]:
        self.prompts.append(prompt)
        return [self.executable, "-c", self.folder_script, "picker", prompt]

    def files_command(self, prompt: str) -> list[str]:
        self.prompts.append(prompt)
        return [self.executable, "-c", self.files_script, "picker", prompt]


class TestBackends:
    """Tests for picker argv construction."""

    PROMPT = 'Pick "this" folder\'s name; do shell script "rm -rf ~"'

    def test_osascript_prompt_is_separate_argument(self) -> None:
        """Test that the prompt never appears inside the AppleScript source."""
        command = OsascriptBackend().folder_command(self.PROMPT)

        assert command[0] == "osascript"
        assert command[-2:] == ["--", self.PROMPT]
        scripts = [command[i + 1] for i, arg in enumerate(command) if arg == "-e"]
        assert scripts[0] == "on run argv"
        assert all(self.PROMPT not in line for line in scripts)

    def test_osascript_files_command(self) -> None:
        """Test the multi-file AppleScript joins paths with newlines."""
        command = OsascriptBackend().files_command(self.PROMPT)
        assert command[-1] == self.PROMPT
        assert any("multiple selections allowed" in arg for arg in command)

    def test_zenity_commands(self) -> None:
        """Test zenity folder and file commands."""
        backend = ZenityBackend()
        folder = backend.folder_command(self.PROMPT)
        files = backend.files_command(self.PROMPT)

        assert "--directory" in folder
        assert folder[folder.index("--title") + 1] == self.PROMPT
        assert "--multiple" in files
        assert files[files.index("--separator") + 1] == "\n"

    def test_kdialog_commands(self) -> None:
        """Test kdialog folder and file commands."""
        backend = KdialogBackend()
        assert "--getexistingdirectory" in backend.folder_command(self.PROMPT)
        files = backend.files_command(self.PROMPT)
        assert "--separate-output" in files
        assert files[files.index("--title") + 1] == self.PROMPT

    def test_detect_backend_first_available(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that detection picks the first program found on PATH."""
        available = {"zenity", "kdialog"}
        monkeypatch.setattr(
            "pomasa.services.dialog.backends.shutil.which",
            lambda name: f"/usr/bin/{name}" if name in available else None,
        )
        backend = detect_backend()
        assert backend is not None
        assert backend.name == "zenity"

    def test_detect_backend_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that no picker on PATH yields None."""
        monkeypatch.setattr("pomasa.services.dialog.backends.shutil.which", lambda name: None)
        assert detect_backend() is None


@requires_sh
@pytest.mark.asyncio
class TestSelectFolder:
    """Tests for DialogService.select_folder."""

    async def test_returns_path_without_trailing_slash(self) -> None:
        """Test that the trailing slash is stripped."""
        backend = ScriptBackend(folder_script='printf "/Users/me/projects/\\n"')
        service = DialogService(backend=backend, timeout=5)
        assert await service.select_folder() == "/Users/me/projects"

    async def test_root_keeps_slash(self) -> None:
        """Test that the filesystem root stays as-is."""
        backend = ScriptBackend(folder_script='printf "/\\n"')
        service = DialogService(backend=backend, timeout=5)
        assert await service.select_folder() == "/"

    async def test_default_prompt(self) -> None:
        """Test that a missing prompt uses the default."""
        backend = ScriptBackend()
        service = DialogService(backend=backend, timeout=5)
        assert await service.select_folder() == DEFAULT_FOLDER_PROMPT
        assert backend.prompts == [DEFAULT_FOLDER_PROMPT]

    async def test_prompt_with_quotes(self) -> None:
        """Test that a prompt with quotes reaches the picker unchanged."""
        prompt = 'Choose "parent" folder; echo pwned'
        service = DialogService(backend=ScriptBackend(), timeout=5)
        assert await service.select_folder(prompt) == prompt

    async def test_cancel_returns_none(self) -> None:
        """Test that a non-zero exit is treated as cancel."""
        service = DialogService(backend=ScriptBackend(folder_script="exit 1"), timeout=5)
        assert await service.select_folder() is None

    async def test_empty_output_returns_none(self) -> None:
        """Test that blank output means nothing was chosen."""
        service = DialogService(backend=ScriptBackend(folder_script="printf '  \\n'"), timeout=5)
        assert await service.select_folder() is None

    async def test_timeout_returns_none(self) -> None:
        """Test that a picker left open past the timeout yields None."""
        service = DialogService(backend=ScriptBackend(folder_script="exec sleep 5"), timeout=0.2)
        assert await service.select_folder() is None

    async def test_missing_program_returns_none(self) -> None:
        """Test that a picker that cannot be started yields None."""
        backend = ScriptBackend(executable="/nonexistent/picker")
        service = DialogService(backend=backend, timeout=5)
        assert await service.select_folder() is None


@pytest.mark.asyncio
class TestNoBackend:
    """Tests for a host without any picker program."""

    async def test_empty_results(self) -> None:
        """Test that both pickers return empty results."""
        service = DialogService(timeout=5)
        service.backend = None
        assert await service.select_folder() is None
        assert await service.select_files() == []


@requires_sh
@pytest.mark.asyncio
class TestSelectFiles:
    """Tests for DialogService.select_files."""

    async def test_splits_lines(self) -> None:
        """Test that output is split into paths and blank lines dropped."""
        backend = ScriptBackend(files_script='printf "/a/one.md\\n\\n/b/two.pdf\\n"')
        service = DialogService(backend=backend, timeout=5)
        assert await service.select_files() == ["/a/one.md", "/b/two.pdf"]

    async def test_default_prompt(self) -> None:
        """Test that a missing prompt uses the default."""
        backend = ScriptBackend()
        service = DialogService(backend=backend, timeout=5)
        assert await service.select_files() == [DEFAULT_FILES_PROMPT]

    async def test_cancel_returns_empty(self) -> None:
        """Test that cancel yields an empty list."""
        service = DialogService(backend=ScriptBackend(files_script="exit 1"), timeout=5)
        assert await service.select_files() == []
