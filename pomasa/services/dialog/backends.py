"""Native picker backends.

Each backend knows how to build an argv for a folder picker and a multi-file
picker. The user-facing prompt is always passed as its own argv element and
never interpolated into a script body.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

# AppleScript run handlers read the prompt from ``argv``
_OSA_FOLDER_SCRIPT = (
    "on run argv",
    "return POSIX path of (choose folder with prompt (item 1 of argv))",
    "end run",
)

_OSA_FILES_SCRIPT = (
    "on run argv",
    "set fileList to choose file with prompt (item 1 of argv) with multiple selections allowed",
    "set posixPaths to {}",
    "repeat with f in fileList",
    "set end of posixPaths to POSIX path of f",
    "end repeat",
    "set AppleScript's text item delimiters to linefeed",
    "return posixPaths as text",
    "end run",
)


def _osa_args(lines: tuple[str, ...]) -> list[str]:
    args: list[str] = []
    for line in lines:
        args.extend(["-e", line])
    return args


class DialogBackend(Protocol):
    """Builds argv lists for one native picker program."""

    name: str
    executable: str

    def folder_command(self, prompt: str) -> list[str]: ...

    def files_command(self, prompt: str) -> list[str]: ...


@dataclass(frozen=True)
class OsascriptBackend:
    """macOS ``choose folder`` / ``choose file`` via osascript."""

    name: str = "osascript"
    executable: str = "osascript"

    def folder_command(self, prompt: str) -> list[str]:
        return [self.executable, *_osa_args(_OSA_FOLDER_SCRIPT), "--", prompt]

    def files_command(self, prompt: str) -> list[str]:
        return [self.executable, *_osa_args(_OSA_FILES_SCRIPT), "--", prompt]


@dataclass(frozen=True)
class ZenityBackend:
    """GTK file chooser via zenity."""

    name: str = "zenity"
    executable: str = "zenity"

    def folder_command(self, prompt: str) -> list[str]:
        return [self.executable, "--file-selection", "--directory", "--title", prompt]

    def files_command(self, prompt: str) -> list[str]:
        return [
            self.executable,
            "--file-selection",
            "--multiple",
            "--separator",
            "\n",
            "--title",
            prompt,
        ]


@dataclass(frozen=True)
class KdialogBackend:
    """KDE file chooser via kdialog."""

    name: str = "kdialog"
    executable: str = "kdialog"

    def folder_command(self, prompt: str) -> list[str]:
        return [self.executable, "--title", prompt, "--getexistingdirectory", str(Path.home())]

    def files_command(self, prompt: str) -> list[str]:
        return [
            self.executable,
            "--title",
            prompt,
            "--multiple",
            "--separate-output",
            "--getopenfilename",
            str(Path.home()),
        ]


BACKENDS: tuple[DialogBackend, ...] = (OsascriptBackend(), ZenityBackend(), KdialogBackend())


def detect_backend() -> DialogBackend | None:
    """Return the first backend whose program is on ``PATH``."""
    for backend in BACKENDS:
        if shutil.which(backend.executable):
            return backend
    return None
