"""viewkit CLI - inspect and render compiled page templates."""

from ._version import __version__

__all__ = ["__version__"]
