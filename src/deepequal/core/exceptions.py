"""Custom exceptions for deepequal.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from DeepEqualError for easy catching.

Most of these are diagnostics: the engine creates them to describe an
abnormal condition in the comparison process, logs them and forwards them
to the caller's error sink, but never raises them out of ``equal()``.
"""

from __future__ import annotations


class DeepEqualError(Exception):
    """Base exception for all deepequal errors.

    Example:
        >>> try:
        ...     # deepequal operations
        ...     pass
        ... except DeepEqualError as e:
        ...     print(f"deepequal error: {e}")
    """


class ConfigurationError(DeepEqualError):
    """Raised when a settings override is invalid.

    Example:
        >>> raise ConfigurationError("max_diff: Input should be greater than or equal to 1")
    """


class MaxRecursionError(DeepEqualError):
    """Diagnostic reported when max_depth is reached."""

    def __init__(self, max_depth: int) -> None:
        """Initialize MaxRecursionError.

        Args:
            max_depth: The configured depth limit that was exceeded.
        """
        self.max_depth = max_depth
        super().__init__(f"recursed to max_depth ({max_depth})")


class TypeMismatchError(DeepEqualError):
    """Diagnostic reported when the two values have different types."""

    def __init__(self, a_type: type, b_type: type) -> None:
        """Initialize TypeMismatchError.

        Args:
            a_type: Runtime type of the first value.
            b_type: Runtime type of the second value.
        """
        self.a_type = a_type
        self.b_type = b_type
        super().__init__(
            f"variables are different types: {a_type.__qualname__} != {b_type.__qualname__}"
        )


class KindNotHandledError(DeepEqualError):
    """Diagnostic reported when no comparison strategy exists for a value."""

    def __init__(self, value_type: type) -> None:
        """Initialize KindNotHandledError.

        Args:
            value_type: Runtime type of the values that could not be compared.
        """
        self.value_type = value_type
        super().__init__(f"cannot compare kind: {value_type.__qualname__}")


class KeyMatchError(DeepEqualError):
    """Diagnostic reported when keyed list matching meets a non-mapping element.

    This is fatal for the list being matched: its remaining elements are
    not compared.
    """

    def __init__(self, path: str, index: int, value_type: type) -> None:
        """Initialize KeyMatchError.

        Args:
            path: Formatted path of the list being matched.
            index: Position of the offending element.
            value_type: Runtime type of the offending element.
        """
        self.path = path
        self.index = index
        self.value_type = value_type
        location = f"{path}.slice[{index}]" if path else f"slice[{index}]"
        super().__init__(
            f"cannot match {location} by key: expected a mapping, got {value_type.__qualname__}"
        )


class RecursionLimitError(DeepEqualError):
    """Diagnostic reported when a value nests deeper than the interpreter allows.

    Fatal for the comparison: diffs found before the limit was reached are
    returned, the rest of the values is not compared. Setting max_depth
    below the nesting depth avoids it.
    """

    def __init__(self, depth: int) -> None:
        """Initialize RecursionLimitError.

        Args:
            depth: Path depth at which the interpreter recursion limit was hit.
        """
        self.depth = depth
        super().__init__(
            f"recursion limit reached at depth {depth}; remaining values were not compared"
        )


class EqualMethodError(DeepEqualError):
    """Diagnostic reported when a user-defined ``equal`` method raises.

    The values are then compared structurally.
    """

    def __init__(self, value_type: type, error: Exception) -> None:
        """Initialize EqualMethodError.

        Args:
            value_type: Type whose ``equal`` method raised.
            error: The exception it raised.
        """
        self.value_type = value_type
        self.error = error
        super().__init__(
            f"{value_type.__qualname__}.equal raised {type(error).__name__}: {error}"
        )
