"""
HTTP exceptions for API layer.

These exceptions are used ONLY in API routers to return proper HTTP responses.
They should NOT be used in services.
"""

from typing import Self

from fastapi import HTTPException, status


class CustomHTTPException(HTTPException):
    """Base HTTP exception with context support."""

    def with_context(self, detail: str) -> Self:
        """
        Add context to an HTTP exception.

        Args:
            detail: Additional information about the error

        Returns:
            The same HTTPException with updated details
        """
        self.detail = detail
        return self


def bad_request(detail: str = "Invalid request parameters") -> CustomHTTPException:
    """Build a fresh 400 exception; instances are mutable so none are shared."""
    return CustomHTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def not_found(detail: str = "The requested resource was not found") -> CustomHTTPException:
    """Build a fresh 404 exception."""
    return CustomHTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
