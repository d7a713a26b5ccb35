"""Per-comparison bookkeeping: path stack, diff sink and cycle guard."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from deepequal.engine.rendering import format_diff

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


class PathStack:
    """Breadcrumb of segments locating the current position in the value tree.

    Each segment may carry the raw mapping key it was formatted from, so
    walkers can find the key a nested list lives under.

    Example:
        >>> path = PathStack()
        >>> path.push("map[foo]", key="foo")
        >>> path.push("Name")
        >>> str(path)
        'map[foo].Name'
    """

    def __init__(self) -> None:
        """Initialize an empty path."""
        self._segments: list[str] = []
        self._keys: list[Any] = []

    def push(self, segment: str, key: Any = None) -> None:
        """Append a segment, optionally remembering the mapping key behind it."""
        self._segments.append(segment)
        self._keys.append(key)

    def pop(self) -> None:
        """Remove the last segment. No-op on an empty path."""
        if self._segments:
            self._segments.pop()
            self._keys.pop()

    def clear(self) -> None:
        """Drop every segment, e.g. after an aborted walk."""
        self._segments.clear()
        self._keys.clear()

    def nearest_key(self) -> Any:
        """Return the innermost mapping key on the path, or None."""
        for key in reversed(self._keys):
            if key is not None:
                return key
        return None

    @property
    def segments(self) -> list[str]:
        """Copy of the current segments."""
        return list(self._segments)

    def format(self, a: Any, b: Any, suffix: str | None = None) -> str:
        """Format a diff line at this path, optionally with one extra segment."""
        if suffix is None:
            return format_diff(self._segments, a, b)
        return format_diff([*self._segments, suffix], a, b)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __str__(self) -> str:
        return ".".join(self._segments)


class DiffSink:
    """Accumulates diff lines up to a hard cap.

    Attributes:
        diffs: Diff lines saved so far, in emission order.
        max_diff: Cap on the number of saved lines.
    """

    def __init__(
        self,
        max_diff: int,
        diff_filter: Callable[[Any, Any, str], bool] | None = None,
    ) -> None:
        """Initialize the sink.

        Args:
            max_diff: Maximum number of diffs to keep.
            diff_filter: Optional hook deciding whether each diff is kept.
        """
        self.diffs: list[str] = []
        self.max_diff = max_diff
        self._diff_filter = diff_filter

    @property
    def full(self) -> bool:
        """True once max_diff lines have been saved."""
        return len(self.diffs) >= self.max_diff

    def save(self, path: PathStack, a: Any, b: Any) -> None:
        """Save ``path: a != b``."""
        self._append(a, b, path.format(a, b))

    def save_with_suffix(self, path: PathStack, segment: str, a: Any, b: Any) -> None:
        """Save a diff one segment below ``path`` without pushing the segment."""
        self._append(a, b, path.format(a, b, suffix=segment))

    def _append(self, a: Any, b: Any, text: str) -> None:
        if self.full:
            return
        if self._diff_filter is not None and not self._diff_filter(a, b, text):
            return
        self.diffs.append(text)

    def __len__(self) -> int:
        return len(self.diffs)


class CycleGuard:
    """Tracks the (a, b) object pairs on the active comparison path.

    Keys on the pair of identities: isomorphic cyclic graphs built from
    different objects still terminate. Only ancestors of the current node
    are tracked, so a pair shared by two sibling branches is compared in
    both. Objects on the active path stay referenced by the caller's
    frames, so their ids cannot be reused while tracked.

    Example:
        >>> guard = CycleGuard()
        >>> node = {}
        >>> guard.enter(node, node)
        True
        >>> guard.enter(node, node)
        False
        >>> guard.leave(node, node)
    """

    def __init__(self) -> None:
        """Initialize an empty guard."""
        self._active: set[tuple[int, int]] = set()

    def enter(self, a: Any, b: Any) -> bool:
        """Mark the pair as being compared.

        Returns:
            False if the pair is already on the active path (a cycle).
        """
        pair = (id(a), id(b))
        if pair in self._active:
            return False
        self._active.add(pair)
        return True

    def leave(self, a: Any, b: Any) -> None:
        """Unmark a pair once its comparison is done."""
        self._active.discard((id(a), id(b)))

    def clear(self) -> None:
        self._active.clear()

    def __len__(self) -> int:
        return len(self._active)
