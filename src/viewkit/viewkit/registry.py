"""Template registry - the adapter host renderers talk to."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from viewkit.engine.common import load_common_templates
from viewkit.engine.funcs import FuncMap, build_funcs
from viewkit.engine.group import TemplateGroup
from viewkit.engine.pages import compile_pages
from viewkit.exceptions import (
    CommonTemplatesError,
    PageCompileError,
    TemplateNotFoundError,
    ViewkitError,
)
from viewkit.fs.base import FileSystem
from viewkit.options import AdapterOptions, ordered_sources

log = logging.getLogger(__name__)

# Failures that abort an initialization phase. ValueError covers page id paths
# and decoding errors from third-party FileSystem implementations.
LOAD_ERRORS = (ViewkitError, ValueError)


class TemplateAdapter:
    """Compiles the pages of a set of content sources and serves lookups.

    Usage:
        adapter = TemplateAdapter(AdapterOptions(file_systems={ROOT_SOURCE_ID: fs}))
        adapter.init()
        html = adapter.lookup("home").render({"title": "Hello"})

    Thread safety: ``lookup`` may be called from any number of threads. Calls
    to ``init`` must be serialized by the caller. A running ``init`` never
    exposes a half-built registry: the new mapping is published in a single
    assignment once complete.
    """

    def __init__(self, options: AdapterOptions | None = None):
        options = options or AdapterOptions()
        self.extension = options.extension
        self.file_systems: Mapping[str, FileSystem] = MappingProxyType(
            dict(options.file_systems)
        )
        self.funcs: FuncMap = build_funcs(options.funcs)
        self.logger = options.logger or log
        self._templates: Mapping[str, TemplateGroup] = MappingProxyType({})

    def init(self) -> None:
        """(Re)build the registry from the content sources.

        On failure the previously published registry is left in place.

        Raises:
            CommonTemplatesError: If a layout or partial fails to load.
            PageCompileError: If a page fails to load or compile.
        """
        sources = ordered_sources(self.file_systems)

        try:
            common = load_common_templates(
                sources, self.extension, self.funcs, logger=self.logger
            )
        except LOAD_ERRORS as e:
            raise CommonTemplatesError(str(e)) from e

        try:
            pages = compile_pages(sources, self.extension, common, logger=self.logger)
        except LOAD_ERRORS as e:
            raise PageCompileError(str(e)) from e

        self._templates = MappingProxyType(pages)
        self.logger.info(
            f"Compiled {len(pages)} page template(s) from {len(sources)} source(s)"
        )

    def lookup(self, page_id: str) -> TemplateGroup:
        """Compiled page for ``page_id``.

        Raises:
            TemplateNotFoundError: If no page has that id.
        """
        try:
            return self._templates[page_id]
        except KeyError:
            raise TemplateNotFoundError(page_id) from None

    def get(
        self, page_id: str, default: TemplateGroup | None = None
    ) -> TemplateGroup | None:
        return self._templates.get(page_id, default)

    def render(self, page_id: str, data: Mapping[str, Any] | None = None) -> str:
        return self.lookup(page_id).render(data)

    def page_ids(self) -> list[str]:
        return sorted(self._templates)

    def __contains__(self, page_id: object) -> bool:
        return page_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def templates(self) -> Mapping[str, TemplateGroup]:
        """The currently published registry (read-only)."""
        return self._templates

    def describe(self) -> dict[str, list[str]]:
        """Page id -> names of every template in that page's group."""
        templates = self._templates
        return {pid: templates[pid].template_names() for pid in sorted(templates)}

    def log_templates(self) -> None:
        for pid, names in self.describe().items():
            self.logger.info(f"Template: {pid}")
            for name in names:
                self.logger.info(f"\tPartial/Child: {name}")
