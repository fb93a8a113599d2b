"""
Domain exceptions for business logic layer.

These exceptions are used in services to represent workbench errors
without coupling to HTTP status codes.
"""

from pathlib import Path
from typing import Self


class PomasaError(Exception):
    """Base exception for all POMASA-specific errors."""

    def with_context(self, detail: str) -> Self:
        """Add context information to the exception.

        Args:
            detail: Additional details about the error

        Returns:
            Self with updated message
        """
        self.args = (detail,)
        return self


# Base domain exceptions
class EntityNotFoundError(PomasaError):
    """Raised when a requested entity does not exist."""

    pass


class EntityAlreadyExistsError(PomasaError):
    """Raised when trying to create an entity that already exists."""

    pass


class ValidationError(PomasaError):
    """Raised when request data validation fails."""

    pass


# Creation request exceptions
class MissingFieldError(ValidationError):
    """Raised when a required creation field is empty."""

    def __init__(self, message: str = "Missing targetDir or masName") -> None:
        super().__init__(message)


class InvalidMasNameError(ValidationError):
    """Raised when the MAS name is not a single path component."""

    def __init__(self, mas_name: str) -> None:
        super().__init__(f"Invalid MAS name '{mas_name}'")


class MasAlreadyExistsError(EntityAlreadyExistsError):
    """Raised when the target MAS directory already exists."""

    def __init__(self, mas_path: Path | None = None) -> None:
        self.mas_path = mas_path
        super().__init__("Directory already exists")


# Filesystem exceptions
class MasDirectoryError(PomasaError):
    """Raised when a MAS path exists but is not a directory."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = path
        super().__init__("Path is not a directory")


class MasReadError(PomasaError):
    """Raised when a directory or file under a MAS cannot be read."""

    pass


class MasWriteError(PomasaError):
    """Raised when the new MAS directory or its documents cannot be written."""

    def __init__(self, message: str = "Failed to create MAS directory") -> None:
        super().__init__(message)


# Framework data exceptions
class FrameworkFileError(PomasaError):
    """Raised when a framework data document cannot be read."""

    pass


class CatalogUnavailableError(FrameworkFileError):
    """Raised when the pattern catalog document cannot be read."""

    def __init__(self, message: str = "Failed to load patterns") -> None:
        super().__init__(message)


class CatalogParseError(FrameworkFileError):
    """Raised in strict mode when a catalog row has an unexpected shape."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"Malformed pattern row at line {line_number}: {line.strip()}")


class PatternNotFoundError(EntityNotFoundError):
    """Raised when a pattern id is not present in the catalog."""

    def __init__(self, pattern_id: str) -> None:
        super().__init__(f"Pattern '{pattern_id}' not found")


# Agent exceptions
class AgentError(PomasaError):
    """Raised when the external agent fails or times out."""

    pass
