"""
Exceptions for the POMASA workbench.

Domain exceptions are raised by services; HTTP exceptions only by routers.
"""

from .domain import (
    AgentError,
    CatalogParseError,
    CatalogUnavailableError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    FrameworkFileError,
    InvalidMasNameError,
    MasAlreadyExistsError,
    MasDirectoryError,
    MasReadError,
    MasWriteError,
    MissingFieldError,
    PatternNotFoundError,
    PomasaError,
    ValidationError,
)
from .http import CustomHTTPException, bad_request, not_found

__all__ = [
    "AgentError",
    "CatalogParseError",
    "CatalogUnavailableError",
    "CustomHTTPException",
    "EntityAlreadyExistsError",
    "EntityNotFoundError",
    "FrameworkFileError",
    "InvalidMasNameError",
    "MasAlreadyExistsError",
    "MasDirectoryError",
    "MasReadError",
    "MasWriteError",
    "MissingFieldError",
    "PatternNotFoundError",
    "PomasaError",
    "ValidationError",
    "bad_request",
    "not_found",
]
