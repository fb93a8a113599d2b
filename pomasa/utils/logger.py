"""
Logging setup for POMASA.

All output goes through loguru. Standard library loggers used by uvicorn,
FastAPI and the agent SDK are forwarded into it, so the console shows a
single stream.
"""

import inspect
import logging
import sys
from pathlib import Path

from loguru import logger as _logger

from ..settings import Settings, settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

LOG_FILENAME = "pomasa.log"

# Standard library loggers whose records are forwarded to loguru
FORWARDED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "claude_agent_sdk")


class InterceptHandler(logging.Handler):
    """Forwards standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip this frame and the logging module's own frames to find the real caller
        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        _logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def log_file_path(config: Settings) -> Path | None:
    """Rotating log file location, or None when file logging is off."""
    if not config.log_to_file:
        return None
    return config.get_log_dir() / LOG_FILENAME


def setup_logging(config: Settings) -> None:
    """Configure loguru sinks from settings and capture stdlib logging.

    Existing sinks are removed first, so calling this again replaces the
    configuration instead of duplicating output.

    Args:
        config: Settings providing level, format, and file sink options
    """
    fmt = config.log_format or CONSOLE_FORMAT

    _logger.remove()
    _logger.add(
        sys.stderr,
        level=config.log_level,
        format=fmt,
        colorize=True,
        backtrace=True,
        diagnose=config.debug,
    )

    log_path = log_file_path(config)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            str(log_path),
            level=config.log_level,
            format=fmt,
            rotation=config.log_rotation,
            retention=config.log_retention,
            compression="zip",
            backtrace=True,
            diagnose=False,
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in FORWARDED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False


setup_logging(settings)

logger = _logger
