"""POMASA frontend module.

This module contains the browser UI for the POMASA workbench: a plain
HTML/JavaScript single-page application served by the FastAPI backend.
"""

from pathlib import Path

FRONTEND_DIR = Path(__file__).parent
STATIC_DIR = FRONTEND_DIR / "static"

__all__ = ["FRONTEND_DIR", "STATIC_DIR"]
