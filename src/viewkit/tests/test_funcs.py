"""Tests for the template helper functions."""

import pytest

from viewkit.engine.funcs import DEFAULT_FUNCS, build_funcs, pluralize, random_string
from viewkit.engine.group import TemplateGroup


def test_defaults_present():
    """Built-in helpers are available without overrides."""
    funcs = build_funcs()
    for name in ("env", "random_string", "now", "safe_html", "pluralize", "join"):
        assert name in funcs


def test_override_wins_over_default():
    """Caller-supplied functions replace defaults of the same name."""
    funcs = build_funcs({"join": lambda items, sep="": "custom"})
    assert funcs["join"](["a", "b"]) == "custom"
    # Defaults themselves are untouched
    assert DEFAULT_FUNCS["join"](["a", "b"]) == "a, b"


def test_each_build_is_private():
    """Two function maps never share registrations."""
    first = build_funcs({"shout": str.upper})
    second = build_funcs()
    assert "shout" in first
    assert "shout" not in second
    assert "shout" not in DEFAULT_FUNCS


def test_result_is_read_only():
    funcs = build_funcs()
    with pytest.raises(TypeError):
        funcs["new"] = len  # type: ignore[index]


def test_invalid_name_rejected():
    with pytest.raises(ValueError, match="Invalid template function name"):
        build_funcs({"not-valid": len})


def test_non_callable_rejected():
    with pytest.raises(TypeError, match="not callable"):
        build_funcs({"value": 42})


def test_pluralize():
    assert pluralize(1, "item") == "item"
    assert pluralize(2, "item") == "items"
    assert pluralize(0, "child", "children") == "children"


def test_random_string_length():
    value = random_string(12)
    assert len(value) == 12
    assert value.isalnum()


def test_helpers_callable_from_templates():
    """Bound helpers are usable in template expressions."""
    group = TemplateGroup("test", build_funcs({"shout": str.upper}))
    group.parse_string(
        "page.html", "{{ shout(name) }} has {{ n }} {{ pluralize(n, 'post') }}"
    )
    assert group.render_template("page.html", {"name": "ada", "n": 3}) == (
        "ADA has 3 posts"
    )
