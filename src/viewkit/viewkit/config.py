"""Configuration parsing for viewkit.yaml

Example:

    extension: .html
    sources:
      - id: _root_
        filesystem:
          type: local
          root: ./templates
      - id: blog
        filesystem:
          type: local
          root: ./plugins/blog/templates
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from viewkit.constants import DEFAULT_EXTENSION, ROOT_SOURCE_ID
from viewkit.engine.funcs import FuncMap
from viewkit.exceptions import ConfigError
from viewkit.fs.base import FileSystem, create_filesystem
from viewkit.options import AdapterOptions, normalize_extension, validate_source_id

CONFIG_FILENAME = "viewkit.yaml"


class SourceConfig(BaseModel):
    """One content source: an id and the filesystem backing it."""

    id: str = Field(default=ROOT_SOURCE_ID, description="Namespace id")
    filesystem: dict[str, Any] = Field(description="Filesystem backend config")

    @field_validator("id")
    @classmethod
    def check_id(cls, value: str) -> str:
        try:
            return validate_source_id(value)
        except ConfigError as e:
            raise ValueError(str(e)) from e


class ViewkitConfig(BaseModel):
    """Root configuration (viewkit.yaml)"""

    extension: str = Field(default=DEFAULT_EXTENSION, description="Template suffix")
    sources: list[SourceConfig] = Field(default_factory=list)

    @field_validator("extension")
    @classmethod
    def check_extension(cls, value: str) -> str:
        return normalize_extension(value)

    @model_validator(mode="after")
    def unique_ids(self) -> "ViewkitConfig":
        seen: set[str] = set()
        for source in self.sources:
            if source.id in seen:
                raise ValueError(f"Duplicate content source id: {source.id}")
            seen.add(source.id)
        return self

    @classmethod
    def load(cls, path: Path) -> "ViewkitConfig":
        """Load config from a YAML file.

        Relative ``root`` paths of local sources resolve against the
        config file's directory.
        """
        try:
            data = yaml.safe_load(path.read_text()) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config {path}: {e}") from e

        base = path.parent
        for source in config.sources:
            fs_config = source.filesystem
            if fs_config.get("type") == "local" and "root" in fs_config:
                root = Path(fs_config["root"]).expanduser()
                if not root.is_absolute():
                    fs_config["root"] = str(base / root)
        return config

    def build_file_systems(self) -> dict[str, FileSystem]:
        file_systems: dict[str, FileSystem] = {}
        for source in self.sources:
            try:
                file_systems[source.id] = create_filesystem(source.filesystem)
            except ConfigError as e:
                raise ConfigError(f"Source {source.id}: {e}") from e
        return file_systems

    def to_options(
        self, funcs: FuncMap | None = None, logger: logging.Logger | None = None
    ) -> AdapterOptions:
        return AdapterOptions(
            extension=self.extension,
            file_systems=self.build_file_systems(),
            funcs=funcs,
            logger=logger,
        )


def find_config_file(start: Path | None = None) -> Path | None:
    """Find viewkit.yaml in ``start`` (default cwd) or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None
