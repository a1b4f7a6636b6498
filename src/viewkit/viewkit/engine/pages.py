"""Page compilation: one independent clone of the common base per view."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import PurePosixPath

from viewkit.constants import NAMESPACE_SEPARATOR, ROOT_SOURCE_ID, VIEWS_DIR
from viewkit.engine.discovery import find_templates
from viewkit.engine.group import TemplateGroup
from viewkit.fs.base import FileSystem

log = logging.getLogger(__name__)


def page_id(source_id: str, path: str, extension: str) -> str:
    """Registry key for the view at ``path``.

    ``views/a/b.html`` in the root source is ``a/b``; in source ``blog`` it
    is ``blog:a/b``.

    Raises:
        ValueError: If ``path`` is not under the views directory.
    """
    name = PurePosixPath(path).relative_to(VIEWS_DIR).as_posix()
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    if source_id != ROOT_SOURCE_ID:
        name = f"{source_id}{NAMESPACE_SEPARATOR}{name}"
    return name


def compile_pages(
    sources: Sequence[tuple[str, FileSystem]],
    extension: str,
    common: TemplateGroup,
    logger: logging.Logger | None = None,
) -> dict[str, TemplateGroup]:
    """Compile every ``views/**/*<ext>`` file of every source.

    Each page is parsed into its own clone of ``common`` and becomes that
    clone's entry template. A later page with the same id replaces the
    earlier one.
    """
    logger = logger or log
    pages: dict[str, TemplateGroup] = {}

    for source_id, fs in sources:
        if not fs.exists(VIEWS_DIR):
            logger.debug(f"{source_id}: no {VIEWS_DIR}/ directory, skipping")
            continue

        for path in find_templates(fs, VIEWS_DIR, extension):
            name = page_id(source_id, path, extension)

            unit = common.clone()
            unit.parse_files(fs, path)
            unit.entry = path

            if name in pages:
                logger.debug(f"{source_id}: page {name} replaces an earlier one")
            pages[name] = unit
            logger.debug(f"Compiled page {name} from {fs.name}/{path}")

    return pages
