"""
Pattern catalog service for POMASA.

This module parses the pattern catalog (``patterns/README.md``) into
:class:`~pomasa.models.Pattern` records. The catalog is a markdown document
with one or more pipe-delimited tables whose rows look like::

    | COR-1 | [Foo Pattern](COR-01-foo-pattern.md) | Required | Description |
"""

import re
from dataclasses import dataclass
from pathlib import Path

from pomasa.exceptions import CatalogParseError, CatalogUnavailableError, PatternNotFoundError
from pomasa.models import Necessity, Pattern, PatternCategory
from pomasa.utils.logger import logger

CATALOG_FILENAME = "README.md"

PATTERN_ROW_REGEX = re.compile(
    r"\|\s*(COR|STR|BHV|QUA)-(\d+)\s*"
    r"\|\s*\[([^\]]+)\]\([^)]+\)\s*"
    r"\|\s*(Required|Recommended|Optional)\s*"
    r"\|\s*([^|]+)\|"
)

# A row that starts like a pattern row; used only by strict parsing
_ROW_START_REGEX = re.compile(r"^\s*\|\s*(COR|STR|BHV|QUA)-\d+\s*\|")

_WHITESPACE_REGEX = re.compile(r"\s+")


def pattern_id(category: str, number: str) -> str:
    """Build the canonical id, zero-padding the number to two digits."""
    return f"{category}-{number.zfill(2)}"


def pattern_file_path(patterns_dir: Path, pid: str, name: str) -> Path:
    """Derive the detail document path for a pattern.

    Examples:
        >>> pattern_file_path(Path("/data/patterns"), "COR-01", "Foo  Pattern")
        PosixPath('/data/patterns/COR-01-foo-pattern.md')
    """
    slug = _WHITESPACE_REGEX.sub("-", name.lower())
    return patterns_dir / f"{pid}-{slug}.md"


def parse_patterns(content: str, patterns_dir: Path, strict: bool = False) -> list[Pattern]:
    """Extract patterns from catalog text.

    Rows that do not match the table shape are skipped. Duplicate ids keep
    the first row.

    Args:
        content: Catalog markdown text
        patterns_dir: Directory the detail documents live in
        strict: Raise on rows that begin like a pattern row but are malformed

    Returns:
        Patterns in document order

    Raises:
        CatalogParseError: In strict mode, for a malformed pattern row
    """
    if strict:
        _check_rows(content)

    patterns: list[Pattern] = []
    seen: set[str] = set()
    for match in PATTERN_ROW_REGEX.finditer(content):
        prefix, number, name, necessity, description = match.groups()
        pid = pattern_id(prefix, number)
        if pid in seen:
            logger.warning(f"Duplicate pattern id {pid} in catalog, keeping first occurrence")
            continue
        seen.add(pid)

        name = name.strip()
        patterns.append(
            Pattern(
                id=pid,
                name=name,
                category=PatternCategory(prefix),
                necessity=Necessity(necessity),
                description=description.strip(),
                file_path=pattern_file_path(patterns_dir, pid, name),
            )
        )
    return patterns


def _check_rows(content: str) -> None:
    for line_number, line in enumerate(content.splitlines(), start=1):
        if _ROW_START_REGEX.match(line) and not PATTERN_ROW_REGEX.search(line):
            raise CatalogParseError(line_number, line)


@dataclass
class _CacheEntry:
    mtime_ns: int
    patterns: list[Pattern]


class PatternCatalog:
    """Loads the pattern catalog from disk.

    Parsed results are cached against the catalog's modification time, so an
    edited catalog is picked up on the next call without a restart.

    Args:
        patterns_dir: Directory containing ``README.md`` and detail documents
        use_cache: Reuse the parsed catalog while the file is unchanged
        strict: Fail on malformed pattern rows instead of skipping them
    """

    def __init__(self, patterns_dir: Path, use_cache: bool = True, strict: bool = False) -> None:
        self.patterns_dir = patterns_dir
        self.use_cache = use_cache
        self.strict = strict
        self._cache: _CacheEntry | None = None

    @property
    def catalog_path(self) -> Path:
        return self.patterns_dir / CATALOG_FILENAME

    def load(self) -> list[Pattern]:
        """Return all patterns in the catalog.

        Raises:
            CatalogUnavailableError: If the catalog cannot be read
            CatalogParseError: In strict mode, for a malformed row
        """
        try:
            mtime_ns = self.catalog_path.stat().st_mtime_ns
            if self.use_cache and self._cache and self._cache.mtime_ns == mtime_ns:
                return list(self._cache.patterns)
            content = self.catalog_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read pattern catalog {self.catalog_path}: {e}")
            raise CatalogUnavailableError() from e

        patterns = parse_patterns(content, self.patterns_dir, strict=self.strict)
        logger.debug(f"Parsed {len(patterns)} patterns from {self.catalog_path}")
        if self.use_cache:
            self._cache = _CacheEntry(mtime_ns=mtime_ns, patterns=patterns)
        return list(patterns)

    def invalidate(self) -> None:
        """Drop the cached catalog."""
        self._cache = None

    def get(self, pid: str) -> Pattern:
        """Look up a pattern by id.

        Raises:
            PatternNotFoundError: If no pattern has this id
        """
        for pattern in self.load():
            if pattern.id == pid:
                return pattern
        raise PatternNotFoundError(pid)

    def required_ids(self) -> list[str]:
        """Ids of the patterns that cannot be deselected."""
        return [pattern.id for pattern in self.load() if pattern.is_required]

    def default_selection(self) -> list[str]:
        """Ids selected when the user has not changed anything."""
        return [pattern.id for pattern in self.load() if pattern.selected_by_default]
