"""Render command - execute one page template"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from jinja2 import TemplateError

from viewkit import TemplateAdapter
from viewkit.exceptions import TemplateNotFoundError

from .utils import exit_with_error


def load_data(data: Optional[str], data_file: Optional[Path]) -> dict[str, Any]:
    """Merge --data-file (YAML/JSON) and --data (JSON), the latter winning."""
    context: dict[str, Any] = {}

    if data_file is not None:
        try:
            loaded = yaml.safe_load(data_file.read_text())
        except (OSError, yaml.YAMLError) as e:
            exit_with_error(f"Cannot read {data_file}: {e}")
        if loaded is not None and not isinstance(loaded, dict):
            exit_with_error(f"{data_file} must contain a mapping")
        context.update(loaded or {})

    if data is not None:
        try:
            loaded = json.loads(data)
        except json.JSONDecodeError as e:
            exit_with_error(f"Invalid JSON for --data: {e}")
        if not isinstance(loaded, dict):
            exit_with_error("--data must be a JSON object")
        context.update(loaded)

    return context


def render_command(
    adapter: TemplateAdapter,
    page: str,
    data: Optional[str] = None,
    data_file: Optional[Path] = None,
) -> None:
    """Render ``page`` to stdout."""
    context = load_data(data, data_file)

    try:
        unit = adapter.lookup(page)
    except TemplateNotFoundError:
        known = ", ".join(adapter.page_ids()) or "none"
        exit_with_error(f"Page not found: {page} (known: {known})")

    try:
        output = unit.render(context)
    except TemplateError as e:
        exit_with_error(f"Failed to render {page}: {e}")

    typer.echo(output, nl=False)
