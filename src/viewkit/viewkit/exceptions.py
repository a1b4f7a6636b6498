"""viewkit exceptions

Custom exceptions for template loading and lookup.
"""

from __future__ import annotations


class ViewkitError(Exception):
    """Base exception for all viewkit errors."""

    pass


class ConfigError(ViewkitError):
    """Raised when adapter configuration is invalid."""

    pass


class SourceAccessError(ViewkitError):
    """Raised when a content source cannot be read for a reason other than absence."""

    def __init__(self, source: str, path: str, reason: str):
        self.source = source
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access {path!r} in {source}: {reason}")


class TemplateParseError(ViewkitError):
    """Raised when a template file has malformed syntax."""

    def __init__(self, name: str, message: str, lineno: int | None = None):
        self.name = name
        self.lineno = lineno
        location = f"{name}:{lineno}" if lineno else name
        super().__init__(f"{location}: {message}")


class TemplateLoadError(ViewkitError):
    """Raised when an initialization phase fails. Always chained to the cause."""

    phase = "load"
    what = "templates"

    def __init__(self, message: str):
        super().__init__(f"error loading {self.what}: {message}")


class CommonTemplatesError(TemplateLoadError):
    """Raised when partials or layouts cannot be loaded."""

    phase = "common"
    what = "partials and layouts"


class PageCompileError(TemplateLoadError):
    """Raised when a page template cannot be compiled."""

    phase = "page"
    what = "page templates"


class TemplateNotFoundError(ViewkitError, KeyError):
    """Raised when no compiled page exists for an identifier."""

    def __init__(self, page_id: str):
        self.page_id = page_id
        super().__init__(f"Template not found: {page_id}")

    def __str__(self) -> str:
        return self.args[0]
