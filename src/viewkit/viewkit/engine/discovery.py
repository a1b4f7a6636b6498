"""Template file discovery inside a content source."""

from __future__ import annotations

from viewkit.fs.base import FileSystem


def find_templates(fs: FileSystem, root: str, extension: str) -> list[str]:
    """Every file under ``root`` (recursively) whose name ends in ``extension``.

    Paths come back in walk order, which is lexical.
    """
    found: list[str] = []

    def visit(path: str, is_dir: bool) -> None:
        if not is_dir and path.endswith(extension):
            found.append(path)

    fs.walk(root, visit)
    return found
