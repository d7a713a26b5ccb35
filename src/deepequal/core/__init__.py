"""Core module for deepequal.

This module contains the value kinds, sentinels, exceptions, and
configuration used throughout the library.
"""

from __future__ import annotations

from deepequal.core.config import Settings, configure, get_settings, settings
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
from deepequal.core.types import (
    DOES_NOT_HAVE_KEY,
    IGNORE,
    INVALID,
    INVALID_VALUE,
    NIL_FUNC,
    NIL_MAP,
    NIL_POINTER,
    NIL_SLICE,
    NO_VALUE,
    NON_NIL_FUNC,
    UNTYPED_NIL,
    Kind,
)

__all__ = [
    "DOES_NOT_HAVE_KEY",
    "IGNORE",
    "INVALID",
    "INVALID_VALUE",
    "NIL_FUNC",
    "NIL_MAP",
    "NIL_POINTER",
    "NIL_SLICE",
    "NON_NIL_FUNC",
    "NO_VALUE",
    "UNTYPED_NIL",
    "ConfigurationError",
    "DeepEqualError",
    "EqualMethodError",
    "KeyMatchError",
    "Kind",
    "KindNotHandledError",
    "MaxRecursionError",
    "RecursionLimitError",
    "Settings",
    "TypeMismatchError",
    "configure",
    "get_settings",
    "settings",
]
