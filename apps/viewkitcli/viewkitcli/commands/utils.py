"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from viewkit import AdapterOptions, LocalFileSystem, ROOT_SOURCE_ID, TemplateAdapter
from viewkit.config import ViewkitConfig, find_config_file
from viewkit.exceptions import ViewkitError

console = Console()

log = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the viewkit CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows compile summaries
    - Debug (VIEWKIT_DEBUG=1): DEBUG level - shows every parsed file
    """
    if os.environ.get("VIEWKIT_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=bool(os.environ.get("VIEWKIT_DEBUG")),
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    for name in ("viewkit", "viewkitcli"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = [handler]
        logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=exit_code)


def parse_source(value: str) -> tuple[str, Path]:
    """Parse a --source argument: ``ID=DIR`` or just ``DIR`` for the root source."""
    if "=" in value:
        source_id, directory = value.split("=", 1)
    else:
        source_id, directory = ROOT_SOURCE_ID, value
    if source_id in ("", "."):
        source_id = ROOT_SOURCE_ID
    return source_id, Path(directory)


def build_adapter(
    config_file: Optional[Path],
    sources: list[str],
    extension: Optional[str],
) -> TemplateAdapter:
    """Create and initialize an adapter from CLI flags or viewkit.yaml."""
    try:
        if sources:
            file_systems = {}
            for value in sources:
                source_id, directory = parse_source(value)
                if not directory.is_dir():
                    exit_with_error(f"Not a directory: {directory}")
                file_systems[source_id] = LocalFileSystem.at(directory)
            options = AdapterOptions(
                extension=extension or "", file_systems=file_systems
            )
        else:
            path = config_file or find_config_file()
            if path is None:
                exit_with_error(
                    "No viewkit.yaml found in current directory or parents "
                    "(use --config or --source)."
                )
            log.debug(f"Using config {path}")
            config = ViewkitConfig.load(path)
            if extension:
                config.extension = extension
            options = config.to_options()

        adapter = TemplateAdapter(options)
        adapter.init()
    except ViewkitError as e:
        exit_with_error(str(e))

    return adapter
