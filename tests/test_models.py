"""
Unit tests for POMASA request and response models.
"""

import json

import pytest
from pydantic import ValidationError

from pomasa.models import (
    CreationRequest,
    EventType,
    FileNode,
    NodeType,
    QualityLevel,
    StreamEvent,
    UserInput,
)


class TestCreationRequest:
    """Tests for parsing the creation request body."""

    def test_camel_case_body(self) -> None:
        """Test that the camelCase wire format is accepted."""
        request = CreationRequest.model_validate(
            {
                "targetDir": "/work",
                "masName": "mas1",
                "userInput": {"projectId": "mas1", "qualityLevel": "simple"},
                "selectedPatterns": ["COR-01"],
            }
        )
        assert request.target_dir == "/work"
        assert request.user_input.project_id == "mas1"
        assert request.user_input.quality_level == QualityLevel.simple
        assert request.selected_patterns == ["COR-01"]

    def test_defaults(self) -> None:
        """Test that omitted fields fall back to defaults."""
        request = CreationRequest.model_validate({})
        assert request.target_dir == ""
        assert request.user_input.blueprint_language == "English"
        assert request.user_input.quality_level == QualityLevel.standard
        assert request.selected_patterns == []

    def test_invalid_quality_level(self) -> None:
        """Test that an unknown quality level is rejected."""
        with pytest.raises(ValidationError):
            UserInput.model_validate({"qualityLevel": "extreme"})

    def test_references_deduplicated(self) -> None:
        """Test that repeated reference paths keep the first entry."""
        user_input = UserInput.model_validate(
            {
                "references": [
                    {"path": "/a.md", "description": "first"},
                    {"path": "/b.md"},
                    {"path": "/a.md", "description": "second"},
                ]
            }
        )
        assert [ref.path for ref in user_input.references] == ["/a.md", "/b.md"]
        assert user_input.references[0].description == "first"


class TestStreamEvent:
    """Tests for stream event framing."""

    def test_output_frame(self) -> None:
        """Test an output event frame."""
        frame = StreamEvent.output("hello").to_sse()
        assert frame == 'data: {"type": "output", "content": "hello"}\n\n'

    def test_done_frame(self) -> None:
        """Test that the done frame carries code and masPath."""
        frame = StreamEvent.done(0, "/work/mas1").to_sse()
        assert frame.startswith("data: ")
        assert frame.endswith("\n\n")
        payload = json.loads(frame[len("data: ") :])
        assert payload == {"type": "done", "code": 0, "masPath": "/work/mas1"}

    def test_non_ascii_content(self) -> None:
        """Test that non-ASCII output is sent as-is."""
        frame = StreamEvent.output("研究").to_sse()
        assert "研究" in frame

    def test_newlines_stay_in_one_frame(self) -> None:
        """Test that multi-line content is escaped inside a single data line."""
        frame = StreamEvent.error("line1\nline2").to_sse()
        assert frame.count("\n") == 2
        assert json.loads(frame[6:])["type"] == EventType.error.value


def test_file_node_serialization() -> None:
    """Files serialize without children; directories with them."""
    node = FileNode(
        name="agents",
        path="/m/agents",
        type=NodeType.directory,
        children=[FileNode(name="a.md", path="/m/agents/a.md", type=NodeType.file)],
    )
    data = node.model_dump(mode="json", exclude_none=True)
    assert data["type"] == "directory"
    assert data["children"][0] == {"name": "a.md", "path": "/m/agents/a.md", "type": "file"}
