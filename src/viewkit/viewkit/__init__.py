"""viewkit - page template composition on Jinja2.

Discovers layouts, partials and views across named content sources, merges
layouts and partials into a shared base, and compiles every view into its
own independent clone of that base.
"""

from viewkit.constants import (
    DEFAULT_EXTENSION,
    LAYOUTS_DIR,
    PARTIALS_DIR,
    ROOT_SOURCE_ID,
    VIEWS_DIR,
)
from viewkit.engine import TemplateGroup, build_funcs, page_id
from viewkit.exceptions import (
    CommonTemplatesError,
    ConfigError,
    PageCompileError,
    SourceAccessError,
    TemplateLoadError,
    TemplateNotFoundError,
    TemplateParseError,
    ViewkitError,
)
from viewkit.fs import FileSystem, LocalFileSystem, MemoryFileSystem
from viewkit.options import AdapterOptions
from viewkit.registry import TemplateAdapter

__version__ = "0.1.0"

__all__ = [
    # Adapter
    "TemplateAdapter",
    "AdapterOptions",
    "TemplateGroup",
    "build_funcs",
    "page_id",
    # Filesystems
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    # Constants
    "DEFAULT_EXTENSION",
    "LAYOUTS_DIR",
    "PARTIALS_DIR",
    "ROOT_SOURCE_ID",
    "VIEWS_DIR",
    # Errors
    "ViewkitError",
    "ConfigError",
    "SourceAccessError",
    "TemplateParseError",
    "TemplateLoadError",
    "CommonTemplatesError",
    "PageCompileError",
    "TemplateNotFoundError",
]
