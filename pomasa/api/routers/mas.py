"""
MAS router for the POMASA workbench.

This module provides endpoints to browse an existing MAS directory and to
create a new one, streaming the agent's progress as server-sent events.
"""

from collections.abc import AsyncIterator
from contextlib import aclosing

from fastapi import APIRouter, Query, Request
from fastapi.responses import StreamingResponse

from ...exceptions import bad_request
from ...models import CreationRequest, FileContent, MasInfo
from ...services.creation import MasCreator, PreparedCreation
from ...services.file_tree import get_mas_info, read_text_file
from ...utils.logger import logger
from ..dependencies import MasCreatorDep

router = APIRouter(tags=["MAS"])

SSE_HEADERS = {"Cache-Control": "no-cache", "X-Accel-Buffering": "no"}


@router.get("/info", response_model_exclude_none=True)
async def mas_info(path: str | None = Query(None, description="MAS directory")) -> MasInfo:
    """Describe a MAS directory and return its full file tree.

    Raises:
        MasDirectoryError: If the path is not a directory
        MasReadError: If the path is missing or cannot be listed
    """
    if not path:
        raise bad_request().with_context("Missing path parameter")
    return await get_mas_info(path)


@router.get("/file")
async def mas_file(path: str | None = Query(None, description="File to read")) -> FileContent:
    """Return the text of a single file.

    Raises:
        MasReadError: If the file cannot be read
    """
    if not path:
        raise bad_request().with_context("Missing path parameter")
    return FileContent(content=await read_text_file(path))


@router.post("/create")
async def create_mas(
    creation: CreationRequest, request: Request, creator: MasCreatorDep
) -> StreamingResponse:
    """Create a new MAS and stream the agent's output.

    Validation and directory setup happen before the stream opens, so those
    failures come back as ordinary JSON errors. After that, every frame is a
    ``data: {...}`` event and the last one is always ``{"type": "done"}``.

    Raises:
        MissingFieldError: If targetDir or masName is empty
        MasAlreadyExistsError: If the MAS directory already exists
        FrameworkFileError: If the generator instructions cannot be read
    """
    prepared = await creator.prepare(creation)
    logger.info(
        f"Creating MAS {prepared.mas_path} with patterns {', '.join(prepared.selected_patterns)}"
    )
    return StreamingResponse(
        _event_stream(prepared, creator, request),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


async def _event_stream(
    prepared: PreparedCreation, creator: MasCreator, request: Request
) -> AsyncIterator[str]:
    async with aclosing(creator.stream(prepared)) as events:
        async for event in events:
            if await request.is_disconnected():
                # Closing the stream closes the agent
                logger.warning(f"Client disconnected, aborting agent for {prepared.mas_path}")
                return
            yield event.to_sse()
