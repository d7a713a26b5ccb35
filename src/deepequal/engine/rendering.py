"""Rendering of values, types and diff lines."""

from __future__ import annotations

import builtins
from typing import Any


def render_value(value: Any) -> str:
    """Render a value the way it appears in a diff line (``str()``)."""
    return str(value)


def short_type_name(value_type: type) -> str:
    """Return the bare class name, e.g. ``Point``."""
    return value_type.__name__


def full_type_name(value_type: type) -> str:
    """Return the module-qualified class name, e.g. ``geometry.Point``."""
    return f"{value_type.__module__}.{value_type.__qualname__}"


def is_builtin_type(value_type: type) -> bool:
    """Check whether a type is one of Python's built-in types."""
    return value_type.__module__ == builtins.__name__


def render_type_mismatch(a_type: type, b_type: type) -> tuple[str, str]:
    """Render two differing types so that the difference is visible.

    Built-in types render by their short names. Two user types that share a
    short name (declared in different modules) render fully qualified.

    Args:
        a_type: Type of the first value.
        b_type: Type of the second value.

    Returns:
        Pair of renderings for the diff line.
    """
    if is_builtin_type(a_type) or is_builtin_type(b_type):
        return short_type_name(a_type), short_type_name(b_type)
    if short_type_name(a_type) == short_type_name(b_type):
        return full_type_name(a_type), full_type_name(b_type)
    return short_type_name(a_type), short_type_name(b_type)


def format_diff(path: list[str], a: Any, b: Any) -> str:
    """Format one diff line.

    Args:
        path: Path segments leading to the difference.
        a: First value or sentinel.
        b: Second value or sentinel.

    Returns:
        ``"A != B"`` for an empty path, otherwise ``"seg1.seg2: A != B"``.

    Example:
        >>> format_diff(["Alias", "Nickname"], "Bob", "Bobby")
        'Alias.Nickname: Bob != Bobby'
    """
    line = f"{render_value(a)} != {render_value(b)}"
    if not path:
        return line
    return f"{'.'.join(path)}: {line}"
