"""
File tree service for browsing MAS directories.

This module builds the nested file listing shown in the MAS viewer and reads
individual documents for the content pane.
"""

import asyncio
import locale
import os
from collections.abc import Iterable
from pathlib import Path

import aiofiles

from pomasa.exceptions import MasDirectoryError, MasReadError
from pomasa.models import FileNode, MasInfo, NodeType
from pomasa.settings import settings
from pomasa.utils.logger import logger

HIDDEN_PREFIX = "."


def use_collation_locale() -> None:
    """Adopt the environment's collation locale for tree ordering.

    Python starts in the C locale, where ``strxfrm`` is plain code point order.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"Cannot use the system collation locale, sorting by code point: {e}")


def _sort_key(entry: os.DirEntry[str]) -> tuple[int, str, str]:
    """Directories first, then a locale-aware case-insensitive name order."""
    is_dir = _is_dir(entry)
    return (0 if is_dir else 1, locale.strxfrm(entry.name.casefold()), entry.name)


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_ignored(name: str, ignored: Iterable[str]) -> bool:
    return name.startswith(HIDDEN_PREFIX) or name in ignored


def _walk(directory: Path, ignored: frozenset[str], ancestors: frozenset[Path]) -> list[FileNode]:
    with os.scandir(directory) as it:
        entries = sorted((e for e in it if not _is_ignored(e.name, ignored)), key=_sort_key)

    nodes: list[FileNode] = []
    for entry in entries:
        full_path = directory / entry.name
        if not _is_dir(entry):
            nodes.append(FileNode(name=entry.name, path=str(full_path), type=NodeType.file))
            continue

        real_path = full_path.resolve()
        if real_path in ancestors:
            # Symlink back into an ancestor
            children: list[FileNode] = []
        else:
            children = _walk(full_path, ignored, ancestors | {real_path})
        nodes.append(
            FileNode(
                name=entry.name,
                path=str(full_path),
                type=NodeType.directory,
                children=children,
            )
        )
    return nodes


def build_file_tree(root: Path, ignored: Iterable[str] | None = None) -> list[FileNode]:
    """List a directory recursively.

    Hidden entries and ignored directory names are skipped. Within each
    level, directories come before files and names sort case-insensitively.

    Args:
        root: Directory to list
        ignored: Names to skip; defaults to ``settings.ignored_directories``

    Returns:
        Top-level nodes with children filled in eagerly

    Raises:
        MasDirectoryError: If ``root`` exists but is not a directory
        MasReadError: If ``root`` is missing or any directory under it cannot be listed
    """
    if not root.exists():
        logger.error(f"Failed to read directory {root}: path does not exist")
        raise MasReadError().with_context("Failed to read directory")
    if not root.is_dir():
        raise MasDirectoryError(root)

    ignored_names = frozenset(settings.ignored_directories if ignored is None else ignored)
    try:
        return _walk(root, ignored_names, frozenset({root.resolve()}))
    except OSError as e:
        logger.error(f"Failed to read directory {root}: {e}")
        raise MasReadError().with_context("Failed to read directory") from e


async def get_mas_info(path: str) -> MasInfo:
    """Describe a MAS directory: its name, path and full tree."""
    root = Path(path)
    tree = await asyncio.to_thread(build_file_tree, root)
    return MasInfo(name=root.name, path=path, tree=tree)


async def read_text_file(path: str | Path) -> str:
    """Read a document as UTF-8.

    Raises:
        MasReadError: If the file cannot be read or decoded
    """
    try:
        async with aiofiles.open(path, encoding="utf-8") as f:
            return await f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read file {path}: {e}")
        raise MasReadError().with_context("Failed to read file") from e
