"""deepequal: structural differences between Python values for tests."""

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
    INVALID_VALUE,
    NIL_FUNC,
    NIL_MAP,
    NIL_POINTER,
    NIL_SLICE,
    NO_VALUE,
    NON_NIL_FUNC,
    UNTYPED_NIL,
)
from deepequal.engine.dispatch import compare, equal

__version__ = "0.1.0"
__all__ = [
    # Comparison
    "compare",
    "equal",
    # Configuration
    "Settings",
    "configure",
    "get_settings",
    "settings",
    # Field marker
    "IGNORE",
    # Sentinels
    "DOES_NOT_HAVE_KEY",
    "INVALID_VALUE",
    "NIL_FUNC",
    "NIL_MAP",
    "NIL_POINTER",
    "NIL_SLICE",
    "NON_NIL_FUNC",
    "NO_VALUE",
    "UNTYPED_NIL",
    # Errors
    "ConfigurationError",
    "DeepEqualError",
    "EqualMethodError",
    "KeyMatchError",
    "KindNotHandledError",
    "MaxRecursionError",
    "RecursionLimitError",
    "TypeMismatchError",
    # Version
    "__version__",
]
