"""CLI commands"""

from .list import list_command
from .render import render_command

__all__ = ["list_command", "render_command"]
