"""Scalar comparators.

Floats are compared first by value, so +0.0 and -0.0 are equal without
further work, then by their fixed-decimal renderings. NaN renders as
``nan`` on both sides and therefore compares equal, as do matching
infinities.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from deepequal.core.types import NIL_FUNC, NON_NIL_FUNC

if TYPE_CHECKING:
    from deepequal.engine.dispatch import Comparison


def compare_direct(c: Comparison, a: Any, b: Any) -> None:
    """Bool, int and str: plain equality."""
    if a != b:
        c.save(a, b)


def compare_value(c: Comparison, a: Any, b: Any) -> None:
    """Opaque leaf values (bytes, Decimal, datetime, ...): plain equality.

    Decimal NaNs never equal anything and signaling NaNs raise on
    comparison, so NaNs compare by their renderings like float NaN.
    """
    if a is b:
        return
    if isinstance(a, Decimal) and (a.is_nan() or b.is_nan()):
        if str(a) != str(b):
            c.save(a, b)
        return
    if a != b:
        c.save(a, b)


def compare_identity(c: Comparison, a: Any, b: Any) -> None:
    """Enum members and classes: the same object or a diff."""
    if a is not b:
        c.save(a, b)


def floats_equal(a: float, b: float, float_format: str) -> bool:
    """Compare two floats at the precision encoded in ``float_format``."""
    if a == b:
        return True
    return float_format.format(a) == float_format.format(b)


def compare_float(c: Comparison, a: float, b: float) -> None:
    if not floats_equal(a, b, c.float_format):
        c.save(a, b)


def compare_complex(c: Comparison, a: complex, b: complex) -> None:
    if a == b:
        return
    if not (
        floats_equal(a.real, b.real, c.float_format)
        and floats_equal(a.imag, b.imag, c.float_format)
    ):
        c.save(a, b)


def compare_functions(c: Comparison, a: Any, b: Any) -> None:
    """Functions are equal unless compare_functions is set.

    When it is set, two functions are always reported: the engine cannot
    tell whether they behave the same.
    """
    if not c.settings.compare_functions:
        return
    c.save(NON_NIL_FUNC, NON_NIL_FUNC)


def compare_nil_function(c: Comparison, a: Any, b: Any) -> None:
    """One side is None, the other a function."""
    if not c.settings.compare_functions:
        return
    c.save(
        NIL_FUNC if a is None else NON_NIL_FUNC,
        NIL_FUNC if b is None else NON_NIL_FUNC,
    )
