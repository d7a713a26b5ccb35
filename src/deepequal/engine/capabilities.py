"""Discovery and invocation of optional value capabilities.

Three capabilities change how a value is compared:

    - error: exceptions compare by their message, ``str(exc)``
    - truncate: ``datetime`` and ``timedelta`` are truncated to the
      configured time precision before comparison
    - equal: a user-defined ``equal(other) -> bool`` method decides equality

The ``equal`` probe only accepts a method whose single parameter is
annotated with the compared type itself (or ``Self``). A method inherited
from a base class and annotated with that base is not used for the
subclass, so a record never delegates its comparison to a parent type's
notion of equality. Anything that does not match the expected signature
falls through to normal structural comparison.
"""

from __future__ import annotations

import inspect
import typing
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

import typing_extensions

if TYPE_CHECKING:
    from collections.abc import Callable

EQUAL_METHOD = "equal"

_ZERO_TIME = datetime.min
_ZERO_TIME_UTC = datetime.min.replace(tzinfo=timezone.utc)
_SELF_NAMES = frozenset({"Self", "typing.Self", "typing_extensions.Self"})


def error_message(value: Any) -> str | None:
    """Return the message of an exception, or None for other values."""
    if isinstance(value, BaseException):
        return str(value)
    return None


def truncate(value: Any, precision: timedelta) -> Any:
    """Truncate a timestamp or duration to a multiple of ``precision``.

    Timestamps are floored to a multiple of precision since ``datetime.min``
    (UTC for aware values). Durations are rounded toward zero. Other values
    and a non-positive precision are returned unchanged.

    Args:
        value: Value to truncate.
        precision: Granularity to truncate to.

    Returns:
        The truncated value.

    Example:
        >>> truncate(timedelta(milliseconds=1500), timedelta(seconds=1))
        datetime.timedelta(seconds=1)
    """
    if precision <= timedelta(0):
        return value
    if isinstance(value, datetime):
        zero = _ZERO_TIME if value.tzinfo is None else _ZERO_TIME_UTC
        return value - (value - zero) % precision
    if isinstance(value, timedelta):
        if value < timedelta(0):
            return -(-value - (-value) % precision)
        return value - value % precision
    return value


def find_equal(value: Any) -> Callable[[Any], Any] | None:
    """Find a usable ``equal`` method on a value.

    Args:
        value: Value to probe.

    Returns:
        The bound method, or None when absent or its signature does not
        take exactly one argument of the value's own type.
    """
    method = getattr(value, EQUAL_METHOD, None)
    if method is None or not inspect.ismethod(method):
        return None

    try:
        signature = inspect.signature(method)
    except (TypeError, ValueError):
        return None

    params = list(signature.parameters.values())
    if len(params) != 1 or params[0].kind not in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ):
        return None

    hints = _annotations(method.__func__)
    param_hint = hints.get(params[0].name, inspect.Parameter.empty)
    if not _is_own_type(param_hint, type(value)):
        return None

    return_hint = hints.get("return", inspect.Parameter.empty)
    if return_hint is not inspect.Parameter.empty and return_hint not in (bool, "bool"):
        return None

    return method


def call_equal(method: Callable[[Any], Any], other: Any) -> bool | None:
    """Call an ``equal`` method.

    Returns:
        The boolean result, or None if the method returned something else.
    """
    result = method(other)
    if isinstance(result, bool):
        return result
    return None


def _annotations(func: Any) -> dict[str, Any]:
    # Unresolvable string annotations (local classes) are compared by name
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError):
        return dict(getattr(func, "__annotations__", {}))


def _is_own_type(hint: Any, value_type: type) -> bool:
    if hint is value_type:
        return True
    if hint is typing_extensions.Self or hint is getattr(typing, "Self", None):
        return True
    if isinstance(hint, str):
        return hint in _SELF_NAMES or hint in (value_type.__name__, value_type.__qualname__)
    return False
