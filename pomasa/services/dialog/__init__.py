"""Native folder/file picker bridge."""

from .backends import (
    BACKENDS,
    DialogBackend,
    KdialogBackend,
    OsascriptBackend,
    ZenityBackend,
    detect_backend,
)
from .service import DEFAULT_FILES_PROMPT, DEFAULT_FOLDER_PROMPT, DialogService

__all__ = [
    "BACKENDS",
    "DEFAULT_FILES_PROMPT",
    "DEFAULT_FOLDER_PROMPT",
    "DialogBackend",
    "DialogService",
    "KdialogBackend",
    "OsascriptBackend",
    "ZenityBackend",
    "detect_backend",
]
