"""
File tree models for browsing MAS directories.
"""

from .base import BaseModel, NodeType


class FileNode(BaseModel):
    """A file or directory inside a MAS project.

    Directories always carry ``children`` (possibly empty); files never do.
    """

    name: str
    path: str
    type: NodeType
    children: list["FileNode"] | None = None

    @property
    def is_directory(self) -> bool:
        return self.type == NodeType.directory


class MasInfo(BaseModel):
    """Response body describing a MAS directory."""

    name: str
    path: str
    tree: list[FileNode]


class FileContent(BaseModel):
    """Response body carrying the text of a single document."""

    content: str
