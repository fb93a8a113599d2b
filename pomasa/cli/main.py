#!/usr/bin/env python3
"""POMASA CLI - management utility for the POMASA workbench.

Starts the server, writes a starter configuration and lets the framework data
be inspected without a browser.
"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from pomasa.exceptions import CatalogParseError, CatalogUnavailableError
from pomasa.models import CreationRequest
from pomasa.services.creation import merge_selection, render_user_input
from pomasa.services.pattern_catalog import PatternCatalog
from pomasa.settings import settings
from pomasa.utils.logger import logger

SETTINGS_TEMPLATE = """# POMASA Configuration File

# Server settings
port = 3001
host = "127.0.0.1"
debug = false

# Framework data (patterns/README.md, generator.md, user_input_template.md)
data_dir = "{data_dir}"

# Pattern catalog
catalog_strict = false

# Agent settings
agent_permission_mode = "acceptEdits"
# agent_timeout = 1800
"""


def init_project(path: str) -> None:
    """Write a starter settings.toml into the given directory."""
    project_path = Path(path).resolve()
    project_path.mkdir(parents=True, exist_ok=True)

    settings_file = project_path / "settings.toml"
    if settings_file.exists():
        logger.warning(f"Settings file already exists: {settings_file}")
        return

    settings_file.write_text(
        SETTINGS_TEMPLATE.format(data_dir=settings.data_dir.as_posix()), encoding="utf-8"
    )
    logger.info(f"Created settings file: {settings_file}")


def run_server(host: str | None = None, port: int | None = None) -> None:
    """Run the POMASA server."""
    import uvicorn

    host = host or settings.host
    port = port or settings.port

    logger.info(f"Starting POMASA server at http://{host}:{port}")
    logger.info(f"Framework data directory: {settings.data_dir}")

    uvicorn.run(
        "pomasa.api.app:app",
        host=host,
        port=port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


def list_patterns(data_dir: str | None = None) -> int:
    """Print the pattern catalog as a table. Returns the exit code."""
    patterns_dir = Path(data_dir) / "patterns" if data_dir else settings.patterns_dir
    catalog = PatternCatalog(patterns_dir, use_cache=False, strict=settings.catalog_strict)
    try:
        patterns = catalog.load()
    except (CatalogUnavailableError, CatalogParseError) as e:
        logger.error(f"{e}: {catalog.catalog_path}")
        return 1

    if not patterns:
        print("No patterns found")
        return 0

    width = max(len(p.name) for p in patterns)
    for p in patterns:
        print(f"{p.id:<8}{p.name:<{width + 2}}{p.necessity.value:<13}{p.description}")
    return 0


def render_request(request_file: str, output: str | None = None) -> int:
    """Render user_input.md for a saved creation request. Returns the exit code."""
    try:
        request = CreationRequest.model_validate_json(Path(request_file).read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Cannot read {request_file}: {e}")
        return 1
    except PydanticValidationError as e:
        logger.error(f"Invalid creation request in {request_file}: {e}")
        return 1

    catalog = PatternCatalog(settings.patterns_dir, use_cache=False)
    try:
        required = catalog.required_ids()
    except CatalogUnavailableError:
        logger.warning("Pattern catalog unavailable, required patterns not merged")
        required = []

    document = render_user_input(
        request.user_input, merge_selection(request.selected_patterns, required)
    )
    if output:
        Path(output).write_text(document, encoding="utf-8")
        logger.info(f"Wrote {output}")
    else:
        sys.stdout.write(document)
    return 0


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pomasa", description="POMASA CLI - Pattern-Oriented Multi-Agent System workbench"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init command
    init_parser = subparsers.add_parser("init", help="Write a starter settings.toml")
    init_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory for the settings file (default: current directory)",
    )

    # run command
    run_parser = subparsers.add_parser("run", help="Run the server")
    run_parser.add_argument(
        "--host", type=str, default=None, help="Host to bind to (default: 127.0.0.1)"
    )
    run_parser.add_argument(
        "--port", type=int, default=None, help="Port to bind to (default: 3001)"
    )

    # patterns command
    patterns_parser = subparsers.add_parser("patterns", help="List the pattern catalog")
    patterns_parser.add_argument(
        "--data-dir", type=str, default=None, help="Framework data directory to read from"
    )

    # render command
    render_parser = subparsers.add_parser(
        "render", help="Render user_input.md from a saved creation request"
    )
    render_parser.add_argument("request", help="Path to a request JSON file")
    render_parser.add_argument(
        "-o", "--output", type=str, default=None, help="Write to this file instead of stdout"
    )

    args = parser.parse_args()

    if args.command == "init":
        init_project(args.path)
    elif args.command == "run":
        run_server(args.host, args.port)
    elif args.command == "patterns":
        sys.exit(list_patterns(args.data_dir))
    elif args.command == "render":
        sys.exit(render_request(args.request, args.output))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
