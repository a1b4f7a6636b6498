"""Tests for viewkit.yaml configuration and adapter options."""

import pytest
import yaml

from viewkit import AdapterOptions, ConfigError, LocalFileSystem, MemoryFileSystem
from viewkit.config import ViewkitConfig, find_config_file
from viewkit.constants import ROOT_SOURCE_ID
from viewkit.options import ordered_sources
from viewkit.registry import TemplateAdapter


def write_config(path, data):
    path.write_text(yaml.safe_dump(data))
    return path


def test_load_resolves_relative_roots(tmp_path):
    (tmp_path / "site" / "views").mkdir(parents=True)
    (tmp_path / "site" / "views" / "home.html").write_text("home")
    cfg = write_config(
        tmp_path / "viewkit.yaml",
        {"sources": [{"filesystem": {"type": "local", "root": "site"}}]},
    )

    config = ViewkitConfig.load(cfg)
    options = config.to_options()

    fs = options.file_systems[ROOT_SOURCE_ID]
    assert isinstance(fs, LocalFileSystem)
    assert fs.root == tmp_path / "site"

    adapter = TemplateAdapter(options)
    adapter.init()
    assert adapter.render("home") == "home"


def test_memory_source_from_config(tmp_path):
    cfg = write_config(
        tmp_path / "viewkit.yaml",
        {
            "extension": "tmpl",
            "sources": [
                {
                    "id": "docs",
                    "filesystem": {
                        "type": "memory",
                        "files": {"views/intro.tmpl": "intro"},
                    },
                }
            ],
        },
    )
    options = ViewkitConfig.load(cfg).to_options()

    assert options.extension == ".tmpl"
    assert isinstance(options.file_systems["docs"], MemoryFileSystem)


def test_duplicate_source_ids_rejected(tmp_path):
    cfg = write_config(
        tmp_path / "viewkit.yaml",
        {
            "sources": [
                {"id": "a", "filesystem": {"type": "memory"}},
                {"id": "a", "filesystem": {"type": "memory"}},
            ]
        },
    )
    with pytest.raises(ConfigError, match="Duplicate content source id"):
        ViewkitConfig.load(cfg)


def test_source_id_with_separator_rejected(tmp_path):
    cfg = write_config(
        tmp_path / "viewkit.yaml",
        {"sources": [{"id": "a:b", "filesystem": {"type": "memory"}}]},
    )
    with pytest.raises(ConfigError):
        ViewkitConfig.load(cfg)


def test_unknown_filesystem_type(tmp_path):
    cfg = write_config(
        tmp_path / "viewkit.yaml",
        {"sources": [{"filesystem": {"type": "ftp"}}]},
    )
    config = ViewkitConfig.load(cfg)
    with pytest.raises(ConfigError, match="Unknown filesystem type"):
        config.to_options()


def test_unreadable_yaml(tmp_path):
    cfg = tmp_path / "viewkit.yaml"
    cfg.write_text("sources: [unclosed")
    with pytest.raises(ConfigError):
        ViewkitConfig.load(cfg)


def test_find_config_file_in_parent(tmp_path):
    cfg = write_config(tmp_path / "viewkit.yaml", {})
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config_file(nested) == cfg


def test_options_normalize_extension():
    assert AdapterOptions().extension == ".html"
    assert AdapterOptions(extension="").extension == ".html"
    assert AdapterOptions(extension="tmpl").extension == ".tmpl"


def test_options_reject_bad_source_id():
    with pytest.raises(ConfigError):
        AdapterOptions(file_systems={"a:b": MemoryFileSystem.of({})})


def test_ordered_sources_root_last():
    root, a, b = (MemoryFileSystem.of({}, label=n) for n in ("root", "a", "b"))
    ordered = ordered_sources({"b": b, ROOT_SOURCE_ID: root, "a": a})
    assert [sid for sid, _ in ordered] == ["a", "b", ROOT_SOURCE_ID]


def test_bundled_example_site():
    """The example under examples/basic compiles and renders."""
    from pathlib import Path

    cfg = Path(__file__).resolve().parents[3] / "examples" / "basic" / "viewkit.yaml"
    adapter = TemplateAdapter(ViewkitConfig.load(cfg).to_options())
    adapter.init()

    assert adapter.page_ids() == ["blog:index", "docs/intro", "home"]
    home = adapter.render("home", {"title": "Example", "count": 2})
    assert "<h1>Example</h1>" in home
    assert "2 visitors today" in home
    assert "<li>first</li>" in adapter.render("blog:index", {"posts": ["first"]})
