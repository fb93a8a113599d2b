"""
Base models for the POMASA workbench.

This module provides the base pydantic classes and enumerations
used throughout the POMASA models.
"""

import enum

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class BaseModel(PydanticBaseModel):
    """Base model for all POMASA models.

    Fields are snake_case in Python and camelCase on the wire; both
    spellings are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatternCategory(str, enum.Enum):
    """Enumeration of pattern categories in the catalog."""

    COR = "COR"
    STR = "STR"
    BHV = "BHV"
    QUA = "QUA"


class Necessity(str, enum.Enum):
    """Enumeration of pattern necessity levels."""

    REQUIRED = "Required"
    RECOMMENDED = "Recommended"
    OPTIONAL = "Optional"


class QualityLevel(str, enum.Enum):
    """Enumeration of quality assurance levels."""

    simple = "simple"
    standard = "standard"
    strict = "strict"


class NodeType(str, enum.Enum):
    """Kind of entry in a file tree."""

    file = "file"
    directory = "directory"
