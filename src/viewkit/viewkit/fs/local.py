"""Local directory filesystem backend"""

from __future__ import annotations

import stat
from pathlib import Path, PurePosixPath
from typing import Literal

from viewkit.exceptions import SourceAccessError
from viewkit.fs.base import FileSystem, FileSystemConfig, Visitor, register_filesystem


class LocalFileSystemConfig(FileSystemConfig):
    """Configuration for a content source on local disk"""

    type: Literal["local"] = "local"
    root: Path


@register_filesystem
class LocalFileSystem(FileSystem):
    """Content source rooted at a directory on disk."""

    config_class = LocalFileSystemConfig

    def __init__(self, config: LocalFileSystemConfig):
        self.config = config
        self.root = Path(config.root).expanduser()

    @classmethod
    def at(cls, root: str | Path) -> "LocalFileSystem":
        return cls(LocalFileSystemConfig(root=Path(root)))

    @property
    def name(self) -> str:
        return f"local:{self.root}"

    def _resolve(self, path: str) -> Path:
        rel = PurePosixPath(path)
        if rel.is_absolute() or ".." in rel.parts:
            raise SourceAccessError(self.name, path, "path escapes source root")
        return self.root.joinpath(*rel.parts)

    def exists(self, path: str) -> bool:
        try:
            self._resolve(path).stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            raise SourceAccessError(self.name, path, str(e)) from e
        return True

    def walk(self, root: str, visit: Visitor) -> None:
        """Lexical walk below ``root``.

        Symlinked directories below ``root`` are visited as plain entries and
        never descended into, so link cycles cannot recurse.
        """
        target = self._resolve(root)
        try:
            is_dir = stat.S_ISDIR(target.stat().st_mode)
        except OSError as e:
            raise SourceAccessError(self.name, root, str(e)) from e
        self._walk(root, target, is_dir, visit)

    def _walk(self, path: str, target: Path, is_dir: bool, visit: Visitor) -> None:
        visit(path, is_dir)
        if not is_dir:
            return

        try:
            children = sorted(target.iterdir(), key=lambda p: p.name)
            entries = [(c, stat.S_ISDIR(c.lstat().st_mode)) for c in children]
        except OSError as e:
            raise SourceAccessError(self.name, path, str(e)) from e

        for child, child_is_dir in entries:
            self._walk(f"{path}/{child.name}", child, child_is_dir, visit)

    def glob(self, pattern: str) -> list[str]:
        try:
            matches = [p for p in self.root.glob(pattern) if p.is_file()]
        except OSError as e:
            raise SourceAccessError(self.name, pattern, str(e)) from e
        return sorted(p.relative_to(self.root).as_posix() for p in matches)

    def read_text(self, path: str) -> str:
        try:
            return self._resolve(path).read_text(encoding="utf-8")
        except OSError as e:
            raise SourceAccessError(self.name, path, str(e)) from e
        except UnicodeDecodeError as e:
            raise SourceAccessError(self.name, path, f"not valid UTF-8: {e}") from e
