"""
POMASA workbench data models.

This package contains the pydantic models that define the request and
response bodies and the data structures used throughout the workbench.
"""

# Base models
from .base import BaseModel, Necessity, NodeType, PatternCategory, QualityLevel

# Creation models
from .creation import CreationRequest, EventType, ReferenceFile, StreamEvent, UserInput

# Dialog models
from .dialog import DialogRequest, FileSelection, FolderSelection

# File tree models
from .file_tree import FileContent, FileNode, MasInfo

# Pattern models
from .pattern import Pattern, PatternDetail, PatternList

__all__ = [
    # Base
    "BaseModel",
    "Necessity",
    "NodeType",
    "PatternCategory",
    "QualityLevel",
    # Creation
    "CreationRequest",
    "EventType",
    "ReferenceFile",
    "StreamEvent",
    "UserInput",
    # Dialog
    "DialogRequest",
    "FileSelection",
    "FolderSelection",
    # File tree
    "FileContent",
    "FileNode",
    "MasInfo",
    # Pattern
    "Pattern",
    "PatternDetail",
    "PatternList",
]
