"""Adapter options and content source ordering."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from viewkit.constants import DEFAULT_EXTENSION, NAMESPACE_SEPARATOR, ROOT_SOURCE_ID
from viewkit.engine.funcs import FuncMap
from viewkit.exceptions import ConfigError
from viewkit.fs.base import FileSystem


def normalize_extension(extension: str | None) -> str:
    """``""``/``None`` -> ``.html``; ``"tmpl"`` -> ``".tmpl"``."""
    if not extension:
        return DEFAULT_EXTENSION
    return extension if extension.startswith(".") else f".{extension}"


def validate_source_id(source_id: str) -> str:
    if not source_id:
        raise ConfigError("Content source id must not be empty")
    if NAMESPACE_SEPARATOR in source_id:
        raise ConfigError(
            f"Content source id {source_id!r} must not contain {NAMESPACE_SEPARATOR!r}"
        )
    return source_id


def ordered_sources(
    file_systems: Mapping[str, FileSystem],
) -> list[tuple[str, FileSystem]]:
    """Processing order: namespaced sources by id, then the root source last.

    The root source goes last so that its fragments win name collisions.
    """
    named = sorted(
        ((sid, fs) for sid, fs in file_systems.items() if sid != ROOT_SOURCE_ID),
        key=lambda item: item[0],
    )
    if ROOT_SOURCE_ID in file_systems:
        named.append((ROOT_SOURCE_ID, file_systems[ROOT_SOURCE_ID]))
    return named


@dataclass
class AdapterOptions:
    """Options for TemplateAdapter."""

    # Template file suffix
    extension: str = DEFAULT_EXTENSION

    # Content sources by id; ROOT_SOURCE_ID means no page id prefix
    file_systems: Mapping[str, FileSystem] = field(default_factory=dict)

    # Extra helper functions, merged over the defaults
    funcs: FuncMap | None = None

    logger: logging.Logger | None = None

    def __post_init__(self):
        self.extension = normalize_extension(self.extension)
        self.file_systems = dict(self.file_systems)
        for source_id in self.file_systems:
            validate_source_id(source_id)
