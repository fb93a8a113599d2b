"""
Exception handlers for converting domain exceptions to HTTP responses.

This module maps domain exceptions to appropriate HTTP status codes and the
``{"error": message}`` body the UI expects. Filesystem and framework errors
are answered with a generic message; the underlying cause is only logged.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..utils.logger import logger


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup exception handlers using decorators.

    This function registers exception handlers for domain exceptions,
    converting them to appropriate HTTP responses.

    Args:
        app: FastAPI application instance
    """
    # Import domain exceptions inside function to avoid circular imports
    from ..exceptions.domain import (
        EntityAlreadyExistsError,
        EntityNotFoundError,
        FrameworkFileError,
        MasDirectoryError,
        MasReadError,
        MasWriteError,
        PomasaError,
        ValidationError,
    )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(_: Request, exc: ValidationError) -> JSONResponse:
        """Convert ValidationError to 400 response."""
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc) or "Validation failed")

    @app.exception_handler(EntityAlreadyExistsError)
    async def handle_entity_already_exists(
        _: Request, exc: EntityAlreadyExistsError
    ) -> JSONResponse:
        """Convert EntityAlreadyExistsError to 400 response."""
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc) or "Resource already exists")

    @app.exception_handler(MasDirectoryError)
    async def handle_mas_directory(_: Request, exc: MasDirectoryError) -> JSONResponse:
        """Convert MasDirectoryError to 400 response."""
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc) or "Path is not a directory")

    @app.exception_handler(EntityNotFoundError)
    async def handle_entity_not_found(_: Request, exc: EntityNotFoundError) -> JSONResponse:
        """Convert EntityNotFoundError to 404 response."""
        return error_response(status.HTTP_404_NOT_FOUND, str(exc) or "Resource not found")

    @app.exception_handler(MasReadError)
    async def handle_mas_read(_: Request, exc: MasReadError) -> JSONResponse:
        """Convert MasReadError to 500 response."""
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Failed to read directory"
        )

    @app.exception_handler(MasWriteError)
    async def handle_mas_write(_: Request, exc: MasWriteError) -> JSONResponse:
        """Convert MasWriteError to 500 response."""
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(FrameworkFileError)
    async def handle_framework_file(_: Request, exc: FrameworkFileError) -> JSONResponse:
        """Convert FrameworkFileError to 500 response."""
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Failed to load framework data"
        )

    @app.exception_handler(PomasaError)
    async def handle_pomasa_error(_: Request, exc: PomasaError) -> JSONResponse:
        """Convert any other PomasaError to 500 response."""
        logger.error(f"Unhandled POMASA error: {exc!r}")
        # Don't expose internal errors to clients
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Render HTTP exceptions with the same error body as domain errors."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(_: Request, exc: RequestValidationError) -> JSONResponse:
        """Convert request validation failures to 400 response."""
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
        else:
            message = "Invalid request"
        return error_response(status.HTTP_400_BAD_REQUEST, message)
