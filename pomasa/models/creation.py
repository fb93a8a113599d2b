"""
Creation request models for the POMASA workbench.

This module provides the models that describe a request to scaffold a new
MAS, and the events streamed back while the agent generates it.
"""

import enum
import json
from typing import Literal

from pydantic import Field, field_validator

from .base import BaseModel, QualityLevel


class ReferenceFile(BaseModel):
    """A user-supplied reference document with an optional description."""

    path: str
    description: str = ""


class UserInput(BaseModel):
    """Structured answers collected by the creation form.

    All free-text fields default to an empty string; empty optional fields
    are rendered as ``None`` in the generated document.
    """

    blueprint_language: str = "English"
    report_language: str = "English"
    project_id: str = ""
    research_topic: str = ""
    initial_ideas: str = ""
    data_sources: str = ""
    references: list[ReferenceFile] = Field(default_factory=list)
    analysis_methods: str = ""
    report_format: str = ""
    report_structure: str = ""
    quality_level: QualityLevel = QualityLevel.standard
    pattern_overrides: str = ""
    other_requirements: str = ""

    @field_validator("references")
    @classmethod
    def unique_references(cls, value: list[ReferenceFile]) -> list[ReferenceFile]:
        """Drop repeated paths, keeping the first occurrence in order."""
        seen: set[str] = set()
        unique: list[ReferenceFile] = []
        for ref in value:
            if ref.path in seen:
                continue
            seen.add(ref.path)
            unique.append(ref)
        return unique


class CreationRequest(BaseModel):
    """Request body for creating a new MAS."""

    target_dir: str = ""
    mas_name: str = ""
    user_input: UserInput = Field(default_factory=UserInput)
    selected_patterns: list[str] = Field(default_factory=list)


class EventType(str, enum.Enum):
    """Kinds of frames sent on the creation stream."""

    output = "output"
    error = "error"
    done = "done"


class StreamEvent(BaseModel):
    """A single frame of the creation stream."""

    type: EventType
    content: str | None = None
    code: Literal[0, 1] | None = None
    mas_path: str | None = None

    @classmethod
    def output(cls, content: str) -> "StreamEvent":
        return cls(type=EventType.output, content=content)

    @classmethod
    def error(cls, content: str) -> "StreamEvent":
        return cls(type=EventType.error, content=content)

    @classmethod
    def done(cls, code: Literal[0, 1], mas_path: str) -> "StreamEvent":
        return cls(type=EventType.done, code=code, mas_path=mas_path)

    def to_sse(self) -> str:
        """Serialize as a server-sent events ``data:`` frame."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return f"data: {json.dumps(payload, ensure_ascii=False)}\n\n"
