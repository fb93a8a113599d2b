"""
Main API application module for POMASA.

This module creates and configures the FastAPI application with all routers,
middleware, and the bundled single-page frontend.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from pomasa import __version__
from pomasa.api.exception_handlers import setup_exception_handlers
from pomasa.api.routers import dialog, framework, mas
from pomasa.exceptions import not_found
from pomasa.frontend import STATIC_DIR
from pomasa.services.file_tree import use_collation_locale
from pomasa.settings import settings
from pomasa.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # noqa: ARG001
    """
    Application lifespan context manager.

    Reports where framework data is read from and warns when it is missing.
    """
    use_collation_locale()
    logger.info(f"POMASA data directory: {settings.data_dir}")
    if not settings.catalog_path.is_file():
        logger.warning(f"Pattern catalog not found at {settings.catalog_path}")
    if not settings.generator_path.is_file():
        logger.warning(f"Generator instructions not found at {settings.generator_path}")

    logger.info("Application startup complete")
    try:
        yield
    finally:
        logger.info("Application shutdown")


def create_app(root_path: str = "/") -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        root_path: The root path for the application

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="POMASA",
        description="Browse and scaffold pattern-oriented multi-agent systems",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        root_path=root_path,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(dialog.router, prefix="/api/dialog")
    app.include_router(mas.router, prefix="/api/mas")
    app.include_router(framework.router, prefix="/api/framework")

    @app.get("/api/health", tags=["Health"])
    async def health() -> dict[str, str]:
        """Liveness check."""
        return {"status": "ok", "dataDir": str(settings.data_dir)}

    if settings.frontend_enabled:
        if not (STATIC_DIR / "index.html").is_file():
            logger.warning(f"Frontend not found in {STATIC_DIR}")

        # Serve index.html for all non-API routes (SPA support)
        @app.get("/{full_path:path}", include_in_schema=False)
        async def serve_spa(full_path: str) -> FileResponse:
            """Serve SPA for all non-API routes."""
            if full_path.startswith("api/"):
                raise not_found("API endpoint not found")

            requested_file = (STATIC_DIR / full_path).resolve()
            if (
                full_path
                and requested_file.is_relative_to(STATIC_DIR.resolve())
                and requested_file.is_file()
            ):
                return FileResponse(requested_file)

            index_path = STATIC_DIR / "index.html"
            if index_path.is_file():
                return FileResponse(index_path)

            raise not_found("index.html not found in static directory")

    return app


# Create default application instance
app = create_app(root_path=settings.root_url)
