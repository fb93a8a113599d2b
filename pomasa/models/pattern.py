"""
Pattern models for the POMASA workbench.

A pattern is one row of the catalog table: a named, categorized design
guideline with a necessity level and a detail document beside the catalog.
"""

from pathlib import Path

from pydantic import ConfigDict

from .base import BaseModel, Necessity, PatternCategory


class Pattern(BaseModel):
    """A single catalog pattern.

    Attributes:
        id: Canonical identifier, ``{CATEGORY}-{NN}``
        name: Display name from the catalog link text
        category: Category prefix of the identifier
        necessity: Whether the pattern is required, recommended or optional
        description: Free-text description from the catalog
        file_path: Location of the per-pattern detail document
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: PatternCategory
    necessity: Necessity
    description: str
    file_path: Path

    @property
    def is_required(self) -> bool:
        return self.necessity == Necessity.REQUIRED

    @property
    def selected_by_default(self) -> bool:
        return self.necessity in (Necessity.REQUIRED, Necessity.RECOMMENDED)


class PatternList(BaseModel):
    """Response body for the pattern catalog."""

    patterns: list[Pattern]


class PatternDetail(BaseModel):
    """Response body for a single pattern with its detail document."""

    pattern: Pattern
    content: str
