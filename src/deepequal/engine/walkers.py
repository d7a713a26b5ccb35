"""Container walkers.

Each walker pushes a path segment for a child, recurses through
``Comparison.equals`` one level deeper, pops the segment, and stops early
once the diff cap is reached. Children are visited in a stable order:
record fields in declaration order, tuples and lists by position, mappings
in first-side order followed by second-side-only keys.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from itertools import zip_longest
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from deepequal.core.exceptions import KeyMatchError
from deepequal.core.types import DOES_NOT_HAVE_KEY, IGNORE_TAG, INVALID, NO_VALUE
from deepequal.engine.kinds import is_named_tuple, slot_names
from deepequal.engine.rendering import render_value

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence, Set

    from deepequal.engine.dispatch import Comparison


# =============================================================================
# Records
# =============================================================================


def _is_ignore_marker(marker: Any) -> bool:
    return isinstance(marker, Mapping) and marker.get(IGNORE_TAG) == "-"


def record_fields(a: Any, b: Any) -> Iterator[tuple[str, bool]]:
    """Yield ``(name, ignored)`` for the fields of two same-typed records.

    Dataclass and pydantic fields come in declaration order. Plain objects
    yield their slots, then the first instance's attributes, then
    attributes only the second instance has.
    """
    cls = type(a)
    if dataclasses.is_dataclass(a):
        for f in dataclasses.fields(a):
            yield f.name, _is_ignore_marker(f.metadata)
        return
    if isinstance(a, BaseModel):
        for name, info in cls.model_fields.items():
            yield name, _is_ignore_marker(info.json_schema_extra)
        return
    if is_named_tuple(a):
        for name in cls._fields:
            yield name, False
        return

    ignored = frozenset(getattr(cls, "__deep_ignore__", ()))
    seen: set[str] = set()
    for name in slot_names(cls):
        seen.add(name)
        yield name, name in ignored
    for instance in (a, b):
        for name in getattr(instance, "__dict__", {}):
            if name not in seen:
                seen.add(name)
                yield name, name in ignored


def walk_record(c: Comparison, a: Any, b: Any, level: int) -> None:
    """Compare two records field by field.

    Private fields (leading underscore) are skipped unless
    compare_unexported_fields is set. Fields marked with ``IGNORE`` are
    always skipped.
    """
    for name, ignored in record_fields(a, b):
        if ignored:
            continue
        if name.startswith("_") and not c.settings.compare_unexported_fields:
            continue

        c.path.push(name)
        c.equals(getattr(a, name, INVALID), getattr(b, name, INVALID), level + 1)
        c.path.pop()

        if c.sink.full:
            break


# =============================================================================
# Mappings and sets
# =============================================================================


def walk_mapping(c: Comparison, a: Mapping[Any, Any], b: Mapping[Any, Any], level: int) -> None:
    """Compare two mappings key by key."""
    if a is b:
        return

    for key, a_value in a.items():
        segment = f"map[{render_value(key)}]"
        if key in b:
            c.path.push(segment, key=key)
            c.equals(a_value, b[key], level + 1)
            c.path.pop()
        else:
            c.save_with_suffix(segment, a_value, DOES_NOT_HAVE_KEY)

        if c.sink.full:
            return

    for key, b_value in b.items():
        if key in a:
            continue
        c.save_with_suffix(f"map[{render_value(key)}]", DOES_NOT_HAVE_KEY, b_value)
        if c.sink.full:
            return


def walk_set(c: Comparison, a: Set[Any], b: Set[Any], level: int) -> None:
    """Report members present on one side only."""
    if a is b:
        return

    for member in a:
        if member not in b:
            c.save_with_suffix(f"set[{render_value(member)}]", member, DOES_NOT_HAVE_KEY)
            if c.sink.full:
                return

    for member in b:
        if member not in a:
            c.save_with_suffix(f"set[{render_value(member)}]", DOES_NOT_HAVE_KEY, member)
            if c.sink.full:
                return


# =============================================================================
# Positional sequences
# =============================================================================


def walk_positions(
    c: Comparison,
    a: Sequence[Any],
    b: Sequence[Any],
    level: int,
    label: str,
) -> None:
    """Compare two sequences position by position.

    Positions past the end of the shorter side are reported against
    ``<no value>``.

    Args:
        c: Comparison context.
        a: First sequence.
        b: Second sequence.
        level: Current depth.
        label: Segment label, ``array`` or ``slice``.
    """
    shared = min(len(a), len(b))
    for i in range(shared):
        c.path.push(f"{label}[{i}]")
        c.equals(a[i], b[i], level + 1)
        c.path.pop()
        if c.sink.full:
            return

    for i in range(shared, max(len(a), len(b))):
        if i < len(a):
            c.save_with_suffix(f"{label}[{i}]", a[i], NO_VALUE)
        else:
            c.save_with_suffix(f"{label}[{i}]", NO_VALUE, b[i])
        if c.sink.full:
            return


def walk_array(c: Comparison, a: Sequence[Any], b: Sequence[Any], level: int) -> None:
    """Compare two tuples (fixed arrays)."""
    walk_positions(c, a, b, level, "array")


def walk_sequence(c: Comparison, a: Sequence[Any], b: Sequence[Any], level: int) -> None:
    """Compare two lists.

    When the comparison has a ``match_keys`` hook that returns identity
    fields for the mapping key this list sits under, elements are matched
    by identity instead of position.
    """
    if a is b:
        return

    if c.match_keys is not None:
        fields = c.match_keys(c.path.nearest_key())
        if fields:
            walk_keyed(c, a, b, level, fields)
            return

    walk_positions(c, a, b, level, "slice")


def _identity(element: Any, fields: Sequence[str]) -> tuple[str, ...]:
    return tuple(
        render_value(element[name]) if name in element else "" for name in fields
    )


def walk_keyed(
    c: Comparison,
    a: Sequence[Any],
    b: Sequence[Any],
    level: int,
    fields: Sequence[str],
) -> None:
    """Compare two lists of mappings, pairing elements by identity fields.

    An element's identity is the tuple of its values for ``fields``. Paired
    elements are compared under the first side's index; unpaired ones are
    reported against ``<no value>``. Elements sharing an identity pair up
    in order of appearance, so a duplicate on one side only shows up as an
    unpaired element.

    A non-mapping element makes the list impossible to match; a fatal
    KeyMatchError is reported and the list is not compared further.
    """
    groups: dict[tuple[str, ...], tuple[list[int], list[int]]] = {}

    for side, elements in ((0, a), (1, b)):
        for i, element in enumerate(elements):
            if not isinstance(element, Mapping):
                c.report(KeyMatchError(str(c.path), i, type(element)), fatal=True)
                return
            groups.setdefault(_identity(element, fields), ([], []))[side].append(i)

    for lefts, rights in groups.values():
        for left, right in zip_longest(lefts, rights):
            if left is not None and right is not None:
                c.path.push(f"slice[{left}]")
                c.equals(a[left], b[right], level + 1)
                c.path.pop()
            elif left is not None:
                c.save_with_suffix(f"slice[{left}]", a[left], NO_VALUE)
            else:
                c.save_with_suffix(f"slice[{right}]", NO_VALUE, b[right])

            if c.sink.full:
                return
