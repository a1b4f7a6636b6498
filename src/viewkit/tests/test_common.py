"""Tests for loading layouts and partials into the common base."""

import pytest

from viewkit import MemoryFileSystem, ROOT_SOURCE_ID, TemplateParseError, build_funcs
from viewkit.engine.common import load_common_templates


def test_loads_layouts_and_nested_partials():
    fs = MemoryFileSystem.of(
        {
            "layouts/base.html": "base",
            "layouts/print.html": "print",
            "layouts/nested/ignored.html": "not a layout",
            "partials/header.html": "header",
            "partials/forms/input.html": "input",
            "partials/readme.txt": "wrong extension",
        }
    )
    common = load_common_templates([(ROOT_SOURCE_ID, fs)], ".html", build_funcs())

    assert common.name == "_common_"
    assert common.template_names() == [
        "layouts/base.html",
        "layouts/print.html",
        "partials/forms/input.html",
        "partials/header.html",
    ]


def test_source_without_partials_is_skipped():
    """A source lacking partials/ contributes nothing, layouts included."""
    fs = MemoryFileSystem.of({"layouts/base.html": "base", "views/home.html": "x"})
    common = load_common_templates([(ROOT_SOURCE_ID, fs)], ".html", build_funcs())
    assert len(common) == 0


def test_partials_without_layouts():
    fs = MemoryFileSystem.of({"partials/header.html": "header"})
    common = load_common_templates([(ROOT_SOURCE_ID, fs)], ".html", build_funcs())
    assert common.template_names() == ["partials/header.html"]


def test_later_source_wins_fragment_collision():
    first = MemoryFileSystem.of({"partials/header.html": "first"})
    second = MemoryFileSystem.of({"partials/header.html": "second"})

    common = load_common_templates(
        [("alpha", first), ("beta", second)], ".html", build_funcs()
    )
    assert common.render_template("partials/header.html") == "second"


def test_custom_extension():
    fs = MemoryFileSystem.of(
        {"partials/header.tmpl": "tmpl", "partials/other.html": "html"}
    )
    common = load_common_templates([(ROOT_SOURCE_ID, fs)], ".tmpl", build_funcs())
    assert common.template_names() == ["partials/header.tmpl"]


def test_parse_error_propagates():
    fs = MemoryFileSystem.of({"partials/bad.html": "{{ unclosed "})
    with pytest.raises(TemplateParseError):
        load_common_templates([(ROOT_SOURCE_ID, fs)], ".html", build_funcs())
