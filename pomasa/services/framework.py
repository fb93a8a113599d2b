"""
Framework data service for POMASA.

Gives access to the documents shipped in the framework data directory: the
user input template, the generator instructions, the pattern catalog and the
per-pattern detail documents.
"""

from pathlib import Path

import aiofiles

from pomasa.exceptions import FrameworkFileError
from pomasa.models import Pattern, PatternDetail
from pomasa.services.pattern_catalog import PatternCatalog
from pomasa.settings import Settings
from pomasa.utils.logger import logger


class FrameworkService:
    """Reads framework documents from ``settings.data_dir``."""

    def __init__(self, settings: Settings, catalog: PatternCatalog | None = None) -> None:
        self.settings = settings
        self.catalog = catalog or PatternCatalog(
            settings.patterns_dir,
            use_cache=settings.catalog_cache,
            strict=settings.catalog_strict,
        )

    @property
    def patterns_dir(self) -> Path:
        return self.settings.patterns_dir

    def list_patterns(self) -> list[Pattern]:
        return self.catalog.load()

    async def read_template(self) -> str:
        return await self._read(self.settings.template_path, "Failed to load template")

    async def read_generator(self) -> str:
        return await self._read(self.settings.generator_path, "Failed to load generator")

    async def pattern_detail(self, pid: str) -> PatternDetail:
        """Return a pattern together with its detail document.

        Raises:
            PatternNotFoundError: If the id is not in the catalog
            FrameworkFileError: If the detail document cannot be read
        """
        pattern = self.catalog.get(pid)
        content = await self._read(pattern.file_path, "Failed to load pattern document")
        return PatternDetail(pattern=pattern, content=content)

    @staticmethod
    async def _read(path: Path, message: str) -> str:
        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"{message}: {path}: {e}")
            raise FrameworkFileError(message) from e
