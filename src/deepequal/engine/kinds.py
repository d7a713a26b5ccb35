"""Classification of runtime values into comparison kinds."""

from __future__ import annotations

import dataclasses
import functools
import inspect
import uuid
from collections.abc import Mapping, MutableSequence, Sequence, Set
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath
from types import ModuleType
from typing import Any

from pydantic import BaseModel

from deepequal.core.types import Kind

# Leaf types compared with == and rendered with str()
VALUE_TYPES: tuple[type, ...] = (
    bytes,
    bytearray,
    memoryview,
    Decimal,
    Fraction,
    date,  # includes datetime
    time,
    timedelta,
    uuid.UUID,
    PurePath,
    range,
)


def is_named_tuple(value: Any) -> bool:
    """Check whether a value is a ``collections.namedtuple`` instance."""
    return isinstance(value, tuple) and isinstance(getattr(type(value), "_fields", None), tuple)


def is_function(value: Any) -> bool:
    """Check whether a value is a function, method, builtin or partial."""
    return inspect.isroutine(value) or isinstance(value, functools.partial)


def kind_of(value: Any) -> Kind:
    """Classify a value.

    Order matters: bool before int, enums before their mixin types, named
    tuples before tuples, and mappings/sequences before generic objects
    (their subclasses usually have a ``__dict__`` too).

    Args:
        value: Any Python value.

    Returns:
        The Kind the dispatcher uses to pick a comparison strategy.
    """
    if value is None:
        return Kind.NIL
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, Enum):
        return Kind.ENUM
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, complex):
        return Kind.COMPLEX
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, VALUE_TYPES):
        return Kind.VALUE
    if isinstance(value, type):
        return Kind.TYPE
    if is_function(value):
        return Kind.FUNC
    if isinstance(value, BaseModel) or is_named_tuple(value):
        return Kind.RECORD
    if dataclasses.is_dataclass(value):
        return Kind.RECORD
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, MutableSequence):
        return Kind.SEQUENCE
    if isinstance(value, Sequence):
        return Kind.ARRAY
    if isinstance(value, Set):
        return Kind.SET
    if isinstance(value, ModuleType):
        return Kind.UNHANDLED
    if hasattr(value, "__dict__") or _slot_names(type(value)):
        return Kind.RECORD
    return Kind.UNHANDLED


@functools.lru_cache(maxsize=256)
def _slot_names(cls: type) -> tuple[str, ...]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in names:
                continue
            names.append(name)
    return tuple(names)


def slot_names(cls: type) -> tuple[str, ...]:
    """Return the ``__slots__`` declared across a class hierarchy, base first."""
    return _slot_names(cls)
