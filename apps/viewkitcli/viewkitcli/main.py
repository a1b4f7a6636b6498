"""viewkit CLI Main Entry Point

Usage:
    viewkit list                          # List pages from viewkit.yaml
    viewkit list --source ./templates     # List pages of a root source
    viewkit list -s ./site -s blog=./blog # Several sources
    viewkit render home --data '{"title": "Hi"}'
    viewkit --version
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ._version import __version__
from .commands import list_command, render_command
from .commands.utils import build_adapter, setup_logging

typer_app = typer.Typer(
    name="viewkit",
    help="Inspect and render page templates composed from layouts and partials.",
    no_args_is_help=True,
)

ConfigOption = typer.Option(
    None, "-c", "--config", help="Path to viewkit.yaml (default: search upwards)."
)
SourceOption = typer.Option(
    None,
    "-s",
    "--source",
    help="Content source as ID=DIR, or DIR for the root source. Repeatable.",
    metavar="ID=DIR",
)
ExtensionOption = typer.Option(
    None, "-e", "--ext", help="Template file extension (default: .html)."
)
VerboseOption = typer.Option(False, "-v", "--verbose", help="Enable verbose logging.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"viewkit {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """viewkit - page template composition."""


@typer_app.command("list")
def list_cmd(
    config: Optional[Path] = ConfigOption,
    source: Optional[List[str]] = SourceOption,
    ext: Optional[str] = ExtensionOption,
    no_fragments: bool = typer.Option(
        False, "--no-fragments", help="Only show page ids."
    ),
    verbose: bool = VerboseOption,
) -> None:
    """List compiled page ids with their layouts and partials."""
    setup_logging(verbose)
    adapter = build_adapter(config, source or [], ext)
    list_command(adapter, show_fragments=not no_fragments)


@typer_app.command("render")
def render_cmd(
    page: str = typer.Argument(..., help="Page id, e.g. 'home' or 'blog:post'."),
    data: Optional[str] = typer.Option(
        None, "-d", "--data", help="Template data as a JSON object."
    ),
    data_file: Optional[Path] = typer.Option(
        None, "-f", "--data-file", help="YAML or JSON file with template data."
    ),
    config: Optional[Path] = ConfigOption,
    source: Optional[List[str]] = SourceOption,
    ext: Optional[str] = ExtensionOption,
    verbose: bool = VerboseOption,
) -> None:
    """Render one page to stdout."""
    setup_logging(verbose)
    adapter = build_adapter(config, source or [], ext)
    render_command(adapter, page, data=data, data_file=data_file)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
