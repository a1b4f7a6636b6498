"""Base filesystem abstraction for content sources"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, ClassVar

from pydantic import BaseModel, ValidationError

from viewkit.exceptions import ConfigError

# visit(path, is_dir) - called once per entry during a walk
Visitor = Callable[[str, bool], None]


class FileSystemConfig(BaseModel):
    """Base configuration for filesystem backends.

    Subclasses pin ``type`` to a default (``type: Literal["local"] = "local"``);
    that default is the name the backend is registered under.
    """

    type: str

    model_config = {"extra": "forbid"}


class FileSystem(ABC):
    """Read-only view of one content source.

    Paths are POSIX strings relative to the source root
    (e.g. ``views/blog/post.html``).
    """

    config_class: ClassVar[type[FileSystemConfig]]

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Whether ``path`` exists. Raises SourceAccessError for I/O failures."""

    @abstractmethod
    def walk(self, root: str, visit: Visitor) -> None:
        """Visit ``root`` and everything below it in lexical order."""

    @abstractmethod
    def glob(self, pattern: str) -> list[str]:
        """Sorted file paths matching a single-level glob pattern."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass


_FILESYSTEM_REGISTRY: dict[str, type[FileSystem]] = {}


def filesystem_types() -> list[str]:
    """Registered backend type names."""
    return sorted(_FILESYSTEM_REGISTRY)


def register_filesystem(cls: type[FileSystem]) -> type[FileSystem]:
    """Class decorator: make ``cls`` creatable by its config's ``type``."""
    config_cls = getattr(cls, "config_class", None)
    if config_cls is None or not issubclass(config_cls, FileSystemConfig):
        raise TypeError(f"{cls.__name__}.config_class must be a FileSystemConfig")

    type_value = config_cls.model_fields["type"].default
    if not isinstance(type_value, str) or not type_value:
        raise TypeError(f"{config_cls.__name__}.type needs a string default")

    existing = _FILESYSTEM_REGISTRY.get(type_value)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Filesystem type {type_value!r} is already registered by {existing.__name__}"
        )

    _FILESYSTEM_REGISTRY[type_value] = cls
    return cls


def create_filesystem(config: FileSystemConfig | dict) -> FileSystem:
    """Create a filesystem instance from a config model or a plain mapping.

    Raises:
        ConfigError: If the type is unknown or the config does not validate.
    """
    data = dict(config) if isinstance(config, dict) else config.model_dump()
    type_key = data.get("type")
    known = ", ".join(filesystem_types())

    if not type_key:
        raise ConfigError(f"Filesystem config needs a 'type' (known: {known})")

    fs_cls = _FILESYSTEM_REGISTRY.get(type_key)
    if fs_cls is None:
        raise ConfigError(f"Unknown filesystem type: {type_key} (known: {known})")

    if isinstance(config, fs_cls.config_class):
        return fs_cls(config)

    try:
        typed_config = fs_cls.config_class.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {type_key} filesystem config: {e}") from e
    return fs_cls(typed_config)
