"""
Dialog router for the POMASA workbench.

This module exposes the native folder and file pickers to the browser.
Cancelling a picker is not an error: the response is simply empty.
"""

from fastapi import APIRouter

from ...models import DialogRequest, FileSelection, FolderSelection
from ..dependencies import DialogServiceDep

router = APIRouter(tags=["Dialog"])


@router.post("/select-folder")
async def select_folder(
    dialog: DialogServiceDep, body: DialogRequest | None = None
) -> FolderSelection:
    """Open a native folder picker.

    Returns:
        The chosen folder, or ``null`` if the user cancelled
    """
    prompt = body.prompt if body else None
    return FolderSelection(path=await dialog.select_folder(prompt))


@router.post("/select-files")
async def select_files(dialog: DialogServiceDep, body: DialogRequest | None = None) -> FileSelection:
    """Open a native multi-file picker.

    Returns:
        The chosen files, empty if the user cancelled
    """
    prompt = body.prompt if body else None
    return FileSelection(paths=await dialog.select_files(prompt))
