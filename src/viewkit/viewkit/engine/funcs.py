"""Helper functions available to every template.

The default set is merged with caller overrides into a private, read-only
mapping per adapter. Nothing here is shared mutable state.
"""

from __future__ import annotations

import os
import random
import string
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

from markupsafe import Markup

FuncMap = Mapping[str, Callable[..., Any]]


def random_string(length: int = 8) -> str:
    """Generate a random alphanumeric string.

    Args:
        length: Length of the string to generate.

    Returns:
        Random string of specified length.
    """
    chars = string.ascii_uppercase + string.digits
    return "".join(random.choices(chars, k=length))


def env_var(name: str, default: str = "") -> str:
    """Get an environment variable value, or ``default`` if unset."""
    return os.environ.get(name, default)


def now() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


def safe_html(value: Any) -> Markup:
    """Mark a value as safe HTML so autoescaping leaves it alone."""
    return Markup(value)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Pick the singular or plural word for ``count``.

    Example:
        {{ count }} {{ pluralize(count, "comment") }}
    """
    if count == 1:
        return singular
    return plural if plural is not None else singular + "s"


def join(items: Iterable[Any], sep: str = ", ") -> str:
    return sep.join(str(item) for item in items)


DEFAULT_FUNCS: FuncMap = MappingProxyType(
    {
        "env": env_var,
        "random_string": random_string,
        "now": now,
        "safe_html": safe_html,
        "pluralize": pluralize,
        "join": join,
    }
)


def build_funcs(overrides: FuncMap | None = None) -> FuncMap:
    """Merge ``overrides`` over the defaults into a new read-only mapping.

    Overrides win on name collision. Each call returns a fresh mapping, so
    two adapters never see each other's helpers.

    Raises:
        ValueError: If a name is not a valid identifier.
        TypeError: If a value is not callable.
    """
    funcs: dict[str, Callable[..., Any]] = dict(DEFAULT_FUNCS)

    for name, fn in (overrides or {}).items():
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"Invalid template function name: {name!r}")
        if not callable(fn):
            raise TypeError(f"Template function {name!r} is not callable")
        funcs[name] = fn

    return MappingProxyType(funcs)
