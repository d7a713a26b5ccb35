"""Unit tests for the path stack, diff sink and cycle guard."""

from __future__ import annotations

from typing import Any

from deepequal.core.types import DOES_NOT_HAVE_KEY
from deepequal.engine.context import CycleGuard, DiffSink, PathStack

# =============================================================================
# PathStack
# =============================================================================


class TestPathStack:
    """Tests for PathStack."""

    def test_push_and_pop(self) -> None:
        """Segments are removed in LIFO order."""
        path = PathStack()
        path.push("map[foo]", key="foo")
        path.push("S")
        assert path.segments == ["map[foo]", "S"]

        path.pop()
        assert path.segments == ["map[foo]"]
        path.pop()
        assert len(path) == 0

    def test_clear(self) -> None:
        """clear() empties segments and keys."""
        path = PathStack()
        path.push("map[foo]", key="foo")
        path.push("S")
        path.clear()

        assert len(path) == 0
        assert path.nearest_key() is None

    def test_pop_on_empty_is_noop(self) -> None:
        """Popping an empty path does nothing."""
        path = PathStack()
        path.pop()
        assert len(path) == 0

    def test_str_joins_with_dots(self) -> None:
        """str() joins segments with dots."""
        path = PathStack()
        for segment in ("map[foo]", "S", "slice[2]"):
            path.push(segment)
        assert str(path) == "map[foo].S.slice[2]"

    def test_nearest_key_is_innermost(self) -> None:
        """nearest_key returns the most recently pushed mapping key."""
        path = PathStack()
        assert path.nearest_key() is None

        path.push("map[outer]", key="outer")
        path.push("Items")
        path.push("map[inner]", key="inner")
        path.push("slice[0]")
        assert path.nearest_key() == "inner"

        path.pop()
        path.pop()
        assert path.nearest_key() == "outer"

    def test_format_empty_path(self) -> None:
        """Without segments the line has no prefix."""
        assert PathStack().format("foo", "bar") == "foo != bar"

    def test_format_with_suffix_does_not_mutate(self) -> None:
        """A suffix appears in the line but is not pushed."""
        path = PathStack()
        path.push("Tags")
        line = path.format(1, DOES_NOT_HAVE_KEY, suffix="map[a]")

        assert line == "Tags.map[a]: 1 != <does not have key>"
        assert path.segments == ["Tags"]


# =============================================================================
# DiffSink
# =============================================================================


class TestDiffSink:
    """Tests for DiffSink."""

    def test_save_formats_with_path(self) -> None:
        """save() prefixes the current path."""
        sink = DiffSink(max_diff=10)
        path = PathStack()
        path.push("Name")

        sink.save(path, "foo", "bar")

        assert sink.diffs == ["Name: foo != bar"]

    def test_save_with_suffix(self) -> None:
        """save_with_suffix() adds one segment for this line only."""
        sink = DiffSink(max_diff=10)
        path = PathStack()

        sink.save_with_suffix(path, "slice[2]", 3, "<no value>")

        assert sink.diffs == ["slice[2]: 3 != <no value>"]
        assert len(path) == 0

    def test_cap_is_enforced(self) -> None:
        """No more than max_diff lines are kept."""
        sink = DiffSink(max_diff=2)
        path = PathStack()
        for i in range(5):
            sink.save(path, i, i + 1)

        assert len(sink) == 2
        assert sink.full

    def test_filter_can_drop_diffs(self) -> None:
        """A filter returning False drops the diff and sees raw values."""
        seen: list[tuple[Any, Any, str]] = []

        def keep_strings(a: Any, b: Any, text: str) -> bool:
            seen.append((a, b, text))
            return isinstance(a, str)

        sink = DiffSink(max_diff=10, diff_filter=keep_strings)
        path = PathStack()
        sink.save(path, 1, 2)
        sink.save(path, "x", "y")

        assert sink.diffs == ["x != y"]
        assert seen == [(1, 2, "1 != 2"), ("x", "y", "x != y")]


# =============================================================================
# CycleGuard
# =============================================================================


class TestCycleGuard:
    """Tests for CycleGuard."""

    def test_enter_detects_active_pair(self) -> None:
        """A pair already on the active path cannot be entered again."""
        guard = CycleGuard()
        a: list[int] = []
        b: list[int] = []

        assert guard.enter(a, b) is True
        assert guard.enter(a, b) is False
        assert len(guard) == 1

    def test_leave_allows_reentry(self) -> None:
        """A pair that has been left can be compared again."""
        guard = CycleGuard()
        a: list[int] = []
        b: list[int] = []

        guard.enter(a, b)
        guard.leave(a, b)

        assert len(guard) == 0
        assert guard.enter(a, b) is True

    def test_pairs_are_ordered(self) -> None:
        """(a, b) and (b, a) are distinct pairs."""
        guard = CycleGuard()
        a: list[int] = []
        b: list[int] = []

        guard.enter(a, b)
        assert guard.enter(b, a) is True

    def test_same_object_with_different_partner(self) -> None:
        """One side alone does not mark a pair as active."""
        guard = CycleGuard()
        a: list[int] = []
        first: list[int] = []
        second: list[int] = []

        guard.enter(a, first)
        assert guard.enter(a, second) is True

    def test_clear(self) -> None:
        """clear() forgets every active pair."""
        guard = CycleGuard()
        guard.enter([], [])
        guard.clear()
        assert len(guard) == 0
