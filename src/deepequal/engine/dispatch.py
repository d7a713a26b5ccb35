"""Recursive comparison engine.

This module provides ``equal()``, the library's entry point, and
``compare()``, which adds hooks for filtering diffs, matching list
elements by key, and receiving diagnostics.

A comparison walks both values in lockstep. At every node the engine
checks, in order: the diff and depth caps, missing attributes, None,
type identity, the error capability, time truncation, a user ``equal``
method, the cycle guard, and finally dispatches on the value's kind.

No exception escapes a comparison. Values nested deeper than the
interpreter's recursion limit end the walk with a fatal
RecursionLimitError diagnostic and the diffs found so far.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from deepequal.core.config import get_settings
from deepequal.core.exceptions import (
    EqualMethodError,
    KindNotHandledError,
    MaxRecursionError,
    RecursionLimitError,
    TypeMismatchError,
)
from deepequal.core.types import (
    CYCLIC_KINDS,
    INVALID,
    INVALID_VALUE,
    NIL_MAP,
    NIL_POINTER,
    NIL_SLICE,
    UNTYPED_NIL,
    Kind,
)
from deepequal.engine import capabilities, scalars, walkers
from deepequal.engine.context import CycleGuard, DiffSink, PathStack
from deepequal.engine.kinds import kind_of
from deepequal.engine.rendering import render_type_mismatch, short_type_name

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from deepequal.core.config import Settings
    from deepequal.core.exceptions import DeepEqualError

logger = logging.getLogger(__name__)


class Comparison:
    """State for one top-level comparison.

    Attributes:
        settings: Snapshot of the process-wide settings taken at entry.
        float_format: Format string derived from settings.float_precision.
        path: Current location inside the value tree.
        sink: Collected diff lines.
        guard: (a, b) pairs on the active path.
        match_keys: Optional hook returning identity fields for lists.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        diff_filter: Callable[[Any, Any, str], bool] | None = None,
        match_keys: Callable[[Any], Sequence[str] | None] | None = None,
        on_error: Callable[[str, bool], None] | None = None,
    ) -> None:
        """Initialize a comparison context.

        Args:
            settings: Settings snapshot, read-only for the whole comparison.
            diff_filter: Hook called with (a, b, text) per diff; False drops it.
            match_keys: Hook mapping the enclosing mapping key of a list to
                the fields identifying its elements.
            on_error: Hook receiving (message, fatal) for each diagnostic.
        """
        self.settings = settings
        self.float_format = settings.float_format
        self.path = PathStack()
        self.sink = DiffSink(settings.max_diff, diff_filter)
        self.guard = CycleGuard()
        self.match_keys = match_keys
        self._on_error = on_error

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def save(self, a: Any, b: Any) -> None:
        self.sink.save(self.path, a, b)

    def save_with_suffix(self, segment: str, a: Any, b: Any) -> None:
        self.sink.save_with_suffix(self.path, segment, a, b)

    def report(self, error: DeepEqualError, *, fatal: bool = False) -> None:
        """Emit a diagnostic. Never raises."""
        if self.settings.log_errors:
            logger.error(f"{error} (at {self.path or '<root>'})")
        if self._on_error is not None:
            self._on_error(str(error), fatal)

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def run(self, a: Any, b: Any) -> list[str]:
        """Compare two top-level values and return the diff lines."""
        try:
            self.equals(a, b, 0)
        except RecursionError:
            depth = len(self.path)
            self.path.clear()
            self.guard.clear()
            self.report(RecursionLimitError(depth), fatal=True)
        return self.sink.diffs

    def equals(self, a: Any, b: Any, level: int) -> None:
        """Compare ``a`` and ``b`` at the current path, recursing as needed."""
        if self.sink.full:
            return
        if self.settings.max_depth > 0 and level > self.settings.max_depth:
            self.report(MaxRecursionError(self.settings.max_depth))
            return

        # Attribute present on only one record instance
        if a is INVALID or b is INVALID:
            if a is INVALID and b is not INVALID:
                self.save(INVALID_VALUE, short_type_name(type(b)))
            elif b is INVALID and a is not INVALID:
                self.save(short_type_name(type(a)), INVALID_VALUE)
            return

        if a is None or b is None:
            if a is not b:
                self._compare_nil(a, b, level)
            return

        a_type = type(a)
        b_type = type(b)
        if a_type is not b_type:
            self.report(TypeMismatchError(a_type, b_type))
            self.save(*render_type_mismatch(a_type, b_type))
            return

        a_message = capabilities.error_message(a)
        if a_message is not None:
            b_message = capabilities.error_message(b)
            if a_message != b_message:
                self.save(a_message, b_message)
            return

        precision = self.settings.time_precision
        if precision:
            a = capabilities.truncate(a, precision)
            b = capabilities.truncate(b, precision)

        equal_method = capabilities.find_equal(a)
        if equal_method is not None:
            try:
                result = capabilities.call_equal(equal_method, b)
            except RecursionError:
                raise
            except Exception as e:
                self.report(EqualMethodError(a_type, e))
                result = None
            if result is not None:
                if not result:
                    self.save(a, b)
                return

        kind = kind_of(a)
        if kind not in CYCLIC_KINDS:
            self._dispatch(kind, a, b, level)
            return

        if not self.guard.enter(a, b):
            return
        try:
            self._dispatch(kind, a, b, level)
        finally:
            self.guard.leave(a, b)

    def _dispatch(self, kind: Kind, a: Any, b: Any, level: int) -> None:
        if kind is Kind.RECORD:
            walkers.walk_record(self, a, b, level)
        elif kind is Kind.MAPPING:
            walkers.walk_mapping(self, a, b, level)
        elif kind is Kind.ARRAY:
            walkers.walk_array(self, a, b, level)
        elif kind is Kind.SEQUENCE:
            walkers.walk_sequence(self, a, b, level)
        elif kind is Kind.SET:
            walkers.walk_set(self, a, b, level)
        elif kind is Kind.FLOAT:
            scalars.compare_float(self, a, b)
        elif kind is Kind.COMPLEX:
            scalars.compare_complex(self, a, b)
        elif kind in (Kind.BOOL, Kind.INT, Kind.STRING):
            scalars.compare_direct(self, a, b)
        elif kind is Kind.VALUE:
            scalars.compare_value(self, a, b)
        elif kind in (Kind.ENUM, Kind.TYPE):
            scalars.compare_identity(self, a, b)
        elif kind is Kind.FUNC:
            scalars.compare_functions(self, a, b)
        else:
            self.report(KindNotHandledError(type(a)))

    def _compare_nil(self, a: Any, b: Any, level: int) -> None:
        """Exactly one side is None; the other side's kind decides the rendering."""
        other = b if a is None else a
        kind = kind_of(other)

        if kind is Kind.FUNC:
            scalars.compare_nil_function(self, a, b)
            return

        if kind is Kind.SEQUENCE:
            if self.settings.nil_slices_are_empty and len(other) == 0:
                return
            self._save_against(a, b, NIL_SLICE, other)
            return

        if kind is Kind.MAPPING:
            if self.settings.nil_maps_are_empty and len(other) == 0:
                return
            self._save_against(a, b, NIL_MAP, other)
            return

        if level == 0 and not self.path:
            self._save_against(a, b, UNTYPED_NIL, other)
        else:
            self._save_against(a, b, NIL_POINTER, short_type_name(type(other)))

    def _save_against(self, a: Any, b: Any, nil_rendering: str, other_rendering: Any) -> None:
        if a is None:
            self.save(nil_rendering, other_rendering)
        else:
            self.save(other_rendering, nil_rendering)


def equal(a: Any, b: Any) -> list[str]:
    """Compare two values and describe every difference.

    Recurses into records, mappings, tuples, lists and sets up to
    max_depth levels (if greater than zero) and returns at most max_diff
    diff lines. Exceptions compare by message; a type with a suitable
    ``equal(other)`` method decides its own equality.

    Args:
        a: First value.
        b: Second value.

    Returns:
        Diff lines such as ``"Name: foo != bar"``; empty when the values
        are structurally equal.

    Example:
        >>> equal({"foo": 1, "bar": 2}, {"bar": 2})
        ['map[foo]: 1 != <does not have key>']
    """
    return Comparison(get_settings().snapshot()).run(a, b)


def compare(
    a: Any,
    b: Any,
    *,
    diff_filter: Callable[[Any, Any, str], bool] | None = None,
    match_keys: Callable[[Any], Sequence[str] | None] | Mapping[Any, Sequence[str]] | None = None,
    on_error: Callable[[str, bool], None] | None = None,
) -> list[str]:
    """Compare two values with caller-supplied hooks.

    Args:
        a: First value.
        b: Second value.
        diff_filter: Called as ``diff_filter(a, b, text)`` for each diff with
            the raw values (or sentinels) and the formatted line. Return
            False to drop the diff.
        match_keys: For lists of mappings (e.g. parsed JSON), the fields
            identifying an element, looked up by the mapping key the list
            sits under. A callable or a plain mapping. Lists with identity
            fields are compared by identity instead of position.
        on_error: Called as ``on_error(message, fatal)`` for each diagnostic.

    Returns:
        Diff lines; empty when the values are structurally equal.

    Example:
        >>> before = {"services": [{"name": "cron"}, {"name": "web", "port": 80}]}
        >>> after = {"services": [{"name": "web", "port": 8080}, {"name": "cron"}]}
        >>> compare(before, after, match_keys={"services": ["name"]})
        ['map[services].slice[1].map[port]: 80 != 8080']
    """
    if isinstance(match_keys, Mapping):
        match_keys = match_keys.get
    comparison = Comparison(
        get_settings().snapshot(),
        diff_filter=diff_filter,
        match_keys=match_keys,
        on_error=on_error,
    )
    return comparison.run(a, b)
