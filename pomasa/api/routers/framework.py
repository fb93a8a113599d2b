"""
Framework router for the POMASA workbench.

This module serves the framework's documents: the pattern catalog, the
per-pattern detail documents, the user input template and the generator
instructions.
"""

from fastapi import APIRouter

from ...models import FileContent, PatternDetail, PatternList
from ..dependencies import FrameworkServiceDep

router = APIRouter(tags=["Framework"])


@router.get("/patterns")
async def list_patterns(framework: FrameworkServiceDep) -> PatternList:
    """List every pattern in the catalog.

    Raises:
        CatalogUnavailableError: If the catalog cannot be read
    """
    return PatternList(patterns=framework.list_patterns())


@router.get("/patterns/{pattern_id}")
async def get_pattern(pattern_id: str, framework: FrameworkServiceDep) -> PatternDetail:
    """Return one pattern with its detail document.

    Raises:
        PatternNotFoundError: If the id is not in the catalog
        FrameworkFileError: If the detail document cannot be read
    """
    return await framework.pattern_detail(pattern_id)


@router.get("/template")
async def get_template(framework: FrameworkServiceDep) -> FileContent:
    """Return the user input template."""
    return FileContent(content=await framework.read_template())


@router.get("/generator")
async def get_generator(framework: FrameworkServiceDep) -> FileContent:
    """Return the generator instructions."""
    return FileContent(content=await framework.read_generator())
