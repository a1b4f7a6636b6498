"""In-memory filesystem backend

Templates embedded in a mapping of path -> text. Directories are implied by
the file paths, the same way a zip archive or package resources work.
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from posixpath import dirname
from typing import Literal

from pydantic import Field

from viewkit.exceptions import SourceAccessError
from viewkit.fs.base import FileSystem, FileSystemConfig, Visitor, register_filesystem


class MemoryFileSystemConfig(FileSystemConfig):
    """Configuration for an in-memory content source"""

    type: Literal["memory"] = "memory"
    label: str = "memory"
    files: dict[str, str] = Field(default_factory=dict)


@register_filesystem
class MemoryFileSystem(FileSystem):
    """Content source backed by a dict of file contents."""

    config_class = MemoryFileSystemConfig

    def __init__(self, config: MemoryFileSystemConfig):
        self.config = config
        self._files = {p.strip("/"): text for p, text in config.files.items()}
        self._dirs = set()
        for path in self._files:
            parent = dirname(path)
            while parent:
                self._dirs.add(parent)
                parent = dirname(parent)

    @classmethod
    def of(cls, files: dict[str, str], label: str = "memory") -> "MemoryFileSystem":
        return cls(MemoryFileSystemConfig(label=label, files=files))

    @property
    def name(self) -> str:
        return f"memory:{self.config.label}"

    def exists(self, path: str) -> bool:
        path = path.strip("/")
        return path in self._files or path in self._dirs

    def walk(self, root: str, visit: Visitor) -> None:
        root = root.strip("/")
        if root in self._files:
            visit(root, False)
            return
        if root not in self._dirs:
            raise SourceAccessError(self.name, root, "no such file or directory")

        visit(root, True)
        prefix = root + "/"
        children = {
            p[len(prefix):].split("/", 1)[0]
            for p in (*self._files, *self._dirs)
            if p.startswith(prefix)
        }
        for child in sorted(children):
            self.walk(prefix + child, visit)

    def glob(self, pattern: str) -> list[str]:
        depth = pattern.count("/")
        return sorted(
            p for p in self._files
            if p.count("/") == depth and fnmatchcase(p, pattern)
        )

    def read_text(self, path: str) -> str:
        try:
            return self._files[path.strip("/")]
        except KeyError:
            raise SourceAccessError(self.name, path, "no such file") from None
