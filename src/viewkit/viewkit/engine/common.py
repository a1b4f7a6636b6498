"""Common base: every layout and partial merged into one template group."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from viewkit.constants import COMMON_GROUP_NAME, LAYOUTS_DIR, PARTIALS_DIR
from viewkit.engine.discovery import find_templates
from viewkit.engine.funcs import FuncMap
from viewkit.engine.group import TemplateGroup
from viewkit.fs.base import FileSystem

log = logging.getLogger(__name__)


def load_common_templates(
    sources: Sequence[tuple[str, FileSystem]],
    extension: str,
    funcs: FuncMap,
    logger: logging.Logger | None = None,
) -> TemplateGroup:
    """Build the shared ancestor group for all pages.

    For each source that has a ``partials/`` directory, its top-level
    ``layouts/*<ext>`` files and every ``partials/**/*<ext>`` file are parsed
    into the same group. Sources are processed in the given order, and a
    later source replaces an earlier one's fragment of the same name.

    Sources without ``partials/`` contribute nothing.
    """
    logger = logger or log
    common = TemplateGroup(COMMON_GROUP_NAME, funcs)

    for source_id, fs in sources:
        if not fs.exists(PARTIALS_DIR):
            logger.debug(f"{source_id}: no {PARTIALS_DIR}/ directory, skipping")
            continue

        layouts = fs.glob(f"{LAYOUTS_DIR}/*{extension}")
        partials = find_templates(fs, PARTIALS_DIR, extension)

        for path in (*layouts, *partials):
            if path in common:
                logger.debug(f"{source_id}: {path} overrides an earlier source")
            common.parse_files(fs, path)

        logger.debug(
            f"{source_id}: loaded {len(layouts)} layout(s), {len(partials)} partial(s)"
        )

    return common
