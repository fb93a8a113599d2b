"""
Common dependencies for POMASA API endpoints.

This module provides the service factories injected into routers, so tests
can swap any of them through ``app.dependency_overrides``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from ..services.creation import AgentRunner, ClaudeAgentRunner, MasCreator
from ..services.dialog import DialogService
from ..services.framework import FrameworkService
from ..services.pattern_catalog import PatternCatalog
from ..settings import Settings, get_settings


@lru_cache
def _pattern_catalog(patterns_dir: Path, use_cache: bool, strict: bool) -> PatternCatalog:
    # Shared between requests so the mtime cache survives
    return PatternCatalog(patterns_dir, use_cache=use_cache, strict=strict)


def get_framework_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> FrameworkService:
    """Framework data access bound to the active settings."""
    catalog = _pattern_catalog(
        settings.patterns_dir, settings.catalog_cache, settings.catalog_strict
    )
    return FrameworkService(settings, catalog=catalog)


def get_dialog_service(settings: Annotated[Settings, Depends(get_settings)]) -> DialogService:
    """Native picker service using the first backend found on PATH."""
    return DialogService(timeout=settings.dialog_timeout)


def get_agent_runner(settings: Annotated[Settings, Depends(get_settings)]) -> AgentRunner:
    """Runner for the external coding agent."""
    return ClaudeAgentRunner(permission_mode=settings.agent_permission_mode)


def get_mas_creator(
    settings: Annotated[Settings, Depends(get_settings)],
    framework: Annotated[FrameworkService, Depends(get_framework_service)],
    runner: Annotated[AgentRunner, Depends(get_agent_runner)],
) -> MasCreator:
    """Creation orchestrator wired to the framework data and agent runner."""
    return MasCreator(framework, runner, agent_timeout=settings.agent_timeout)


FrameworkServiceDep = Annotated[FrameworkService, Depends(get_framework_service)]
DialogServiceDep = Annotated[DialogService, Depends(get_dialog_service)]
MasCreatorDep = Annotated[MasCreator, Depends(get_mas_creator)]
