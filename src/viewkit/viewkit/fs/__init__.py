"""Filesystem backends for content sources"""

from .base import (
    FileSystem,
    FileSystemConfig,
    filesystem_types,
    Visitor,
    create_filesystem,
    register_filesystem,
)
from .local import LocalFileSystem, LocalFileSystemConfig
from .memory import MemoryFileSystem, MemoryFileSystemConfig

__all__ = [
    "FileSystem",
    "FileSystemConfig",
    "filesystem_types",
    "Visitor",
    "create_filesystem",
    "register_filesystem",
    "LocalFileSystem",
    "LocalFileSystemConfig",
    "MemoryFileSystem",
    "MemoryFileSystemConfig",
]
