"""
Request and response models for the native picker dialogs.
"""

from .base import BaseModel


class DialogRequest(BaseModel):
    """Optional prompt shown in the picker window."""

    prompt: str | None = None


class FolderSelection(BaseModel):
    """Selected folder, or ``None`` when nothing was chosen."""

    path: str | None


class FileSelection(BaseModel):
    """Selected files; empty when nothing was chosen."""

    paths: list[str]
