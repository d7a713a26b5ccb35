"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from deepequal.core.exceptions import (
    ConfigurationError,
    DeepEqualError,
    EqualMethodError,
    KeyMatchError,
    KindNotHandledError,
    MaxRecursionError,
    RecursionLimitError,
    TypeMismatchError,
)


class TestHierarchy:
    """All library errors share one base class."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("bad"),
            MaxRecursionError(3),
            TypeMismatchError(int, str),
            KindNotHandledError(object),
            KeyMatchError("map[items]", 0, int),
            RecursionLimitError(10),
            EqualMethodError(int, ValueError()),
        ],
    )
    def test_is_deepequal_error(self, error: DeepEqualError) -> None:
        """Every error can be caught as DeepEqualError."""
        assert isinstance(error, DeepEqualError)


class TestMessages:
    """Diagnostic messages and attributes."""

    def test_max_recursion(self) -> None:
        """MaxRecursionError names the limit."""
        error = MaxRecursionError(4)
        assert str(error) == "recursed to max_depth (4)"
        assert error.max_depth == 4

    def test_type_mismatch(self) -> None:
        """TypeMismatchError names both types."""
        error = TypeMismatchError(int, float)
        assert str(error) == "variables are different types: int != float"
        assert error.a_type is int
        assert error.b_type is float

    def test_kind_not_handled(self) -> None:
        """KindNotHandledError names the type."""
        assert str(KindNotHandledError(object)) == "cannot compare kind: object"

    def test_key_match_with_path(self) -> None:
        """KeyMatchError locates the element below the list path."""
        error = KeyMatchError("map[items]", 2, str)
        assert str(error) == "cannot match map[items].slice[2] by key: expected a mapping, got str"
        assert error.index == 2

    def test_key_match_at_root(self) -> None:
        """A top-level list has no path prefix."""
        assert str(KeyMatchError("", 0, int)).startswith("cannot match slice[0] by key")

    def test_recursion_limit(self) -> None:
        """RecursionLimitError names the depth reached."""
        error = RecursionLimitError(812)
        assert str(error) == "recursion limit reached at depth 812; remaining values were not compared"
        assert error.depth == 812

    def test_equal_method(self) -> None:
        """EqualMethodError names the type and the original error."""
        cause = ValueError("boom")
        error = EqualMethodError(dict, cause)
        assert str(error) == "dict.equal raised ValueError: boom"
        assert error.error is cause
