"""Core type definitions for deepequal.

This module defines the value kinds the engine dispatches on, the sentinel
renderings that appear in diffs, and the marker used to ignore record
fields.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final


class Kind(str, Enum):
    """Fundamental runtime shape of a value, independent of its declared type.

    Attributes:
        NIL: None.
        BOOL: bool.
        INT: int and subclasses that are not enums.
        FLOAT: float.
        COMPLEX: complex.
        STRING: str.
        VALUE: Opaque values compared with ``==`` (bytes, Decimal, datetime, ...).
        ENUM: Enum members.
        TYPE: Classes.
        FUNC: Functions, methods and partials.
        RECORD: Dataclasses, pydantic models, named tuples and plain objects.
        MAPPING: dict and other mappings.
        ARRAY: tuple and other immutable sequences.
        SEQUENCE: list and other mutable sequences.
        SET: set and frozenset.
        UNHANDLED: Anything the engine has no strategy for.
    """

    NIL = "nil"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    VALUE = "value"
    ENUM = "enum"
    TYPE = "type"
    FUNC = "func"
    RECORD = "record"
    MAPPING = "mapping"
    ARRAY = "array"
    SEQUENCE = "sequence"
    SET = "set"
    UNHANDLED = "unhandled"


# Mutable kinds that can close a reference cycle. Tuples and sets only
# reach themselves through one of these.
CYCLIC_KINDS: Final = frozenset({
    Kind.RECORD,
    Kind.MAPPING,
    Kind.SEQUENCE,
})

# Sentinel renderings, matched verbatim by downstream tests
UNTYPED_NIL: Final = "<untyped nil>"
INVALID_VALUE: Final = "<invalid value>"
NIL_POINTER: Final = "<nil pointer>"
NIL_MAP: Final = "<nil map>"
NIL_SLICE: Final = "<nil slice>"
NO_VALUE: Final = "<no value>"
DOES_NOT_HAVE_KEY: Final = "<does not have key>"
NON_NIL_FUNC: Final = "<non-nil func>"
NIL_FUNC: Final = "<nil func>"

# Field marker: dataclasses.field(metadata=IGNORE) or Field(json_schema_extra=IGNORE)
IGNORE_TAG: Final = "deep"
IGNORE: Final = MappingProxyType({IGNORE_TAG: "-"})


class _Invalid:
    """Stand-in for an attribute that one record instance lacks."""

    _instance: _Invalid | None = None

    def __new__(cls) -> _Invalid:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return INVALID_VALUE

    def __bool__(self) -> bool:
        return False


INVALID: Final = _Invalid()
