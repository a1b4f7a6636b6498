"""Named template groups on top of Jinja2.

A group is a set of named templates that can reference each other through
``{% extends %}``, ``{% include %}`` and ``{% import %}``. Each group owns its
own Jinja2 environment, so a clone shares no compiled templates, caches or
globals with its original.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from jinja2 import DictLoader, Environment, TemplateSyntaxError, select_autoescape

from viewkit.engine.funcs import FuncMap
from viewkit.exceptions import TemplateParseError
from viewkit.fs.base import FileSystem


class TemplateGroup:
    """A named, mutable collection of templates bound to helper functions."""

    def __init__(
        self,
        name: str,
        funcs: FuncMap | None = None,
        *,
        sources: Mapping[str, str] | None = None,
        entry: str | None = None,
    ):
        self.name = name
        self.entry = entry
        self._funcs: FuncMap = MappingProxyType(dict(funcs or {}))
        self._sources: dict[str, str] = dict(sources or {})
        self._env = self._make_env()

    def _make_env(self) -> Environment:
        env = Environment(
            loader=DictLoader(self._sources),
            autoescape=select_autoescape(["html", "htm", "xml"]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.globals.update(self._funcs)
        return env

    @property
    def funcs(self) -> FuncMap:
        return self._funcs

    def parse_string(self, name: str, source: str) -> "TemplateGroup":
        """Add or replace the template ``name``.

        Raises:
            TemplateParseError: If the source is not valid template syntax.
        """
        try:
            # compile, not just parse: unknown filters/tests fail only here
            self._env.compile(source, name=name, filename=name)
        except TemplateSyntaxError as e:
            raise TemplateParseError(name, e.message or str(e), e.lineno) from e

        self._sources[name] = source
        return self

    def parse_files(self, fs: FileSystem, *paths: str) -> "TemplateGroup":
        """Read each path from ``fs`` and add it under its source-relative name."""
        for path in paths:
            self.parse_string(path, fs.read_text(path))
        return self

    def clone(self) -> "TemplateGroup":
        """Independent copy: later parses on either side are not seen by the other."""
        return TemplateGroup(
            self.name, self._funcs, sources=self._sources, entry=self.entry
        )

    def template_names(self) -> list[str]:
        return sorted(self._sources)

    def __contains__(self, name: object) -> bool:
        return name in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def render_template(self, name: str, data: Mapping[str, Any] | None = None) -> str:
        """Execute the template ``name`` against ``data``."""
        return self._env.get_template(name).render(dict(data or {}))

    def render(self, data: Mapping[str, Any] | None = None) -> str:
        """Execute the entry template against ``data``."""
        if self.entry is None:
            raise ValueError(f"Template group {self.name!r} has no entry template")
        return self.render_template(self.entry, data)

    def __repr__(self) -> str:
        return (
            f"TemplateGroup(name={self.name!r}, entry={self.entry!r}, "
            f"templates={len(self._sources)})"
        )
