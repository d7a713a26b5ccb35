"""Unit tests for value kind classification."""

from __future__ import annotations

import functools
import uuid
from collections import OrderedDict, deque, namedtuple
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum, IntEnum
from pathlib import PurePosixPath
from typing import Any

import pytest
from pydantic import BaseModel

from deepequal.core.types import Kind
from deepequal.engine.kinds import is_named_tuple, kind_of, slot_names

Pair = namedtuple("Pair", "left right")


class Color(Enum):
    RED = 1


class Level(IntEnum):
    LOW = 1


@dataclass
class Point:
    x: int
    y: int


class Model(BaseModel):
    name: str


class Plain:
    def __init__(self) -> None:
        self.value = 1


class Slotted:
    __slots__ = ("a", "b")


class SlottedChild(Slotted):
    __slots__ = ("c",)


def function() -> None:
    pass


class TestKindOf:
    """Tests for kind_of."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, Kind.NIL),
            (True, Kind.BOOL),
            (1, Kind.INT),
            (1.5, Kind.FLOAT),
            (1 + 2j, Kind.COMPLEX),
            ("text", Kind.STRING),
            (b"raw", Kind.VALUE),
            (Decimal("1.0"), Kind.VALUE),
            (datetime(2024, 1, 1), Kind.VALUE),
            (date(2024, 1, 1), Kind.VALUE),
            (timedelta(seconds=1), Kind.VALUE),
            (uuid.UUID(int=0), Kind.VALUE),
            (PurePosixPath("/tmp"), Kind.VALUE),
            (Color.RED, Kind.ENUM),
            (Level.LOW, Kind.ENUM),
            (int, Kind.TYPE),
            (function, Kind.FUNC),
            (len, Kind.FUNC),
            (functools.partial(function), Kind.FUNC),
            (Point(1, 2), Kind.RECORD),
            (Model(name="a"), Kind.RECORD),
            (Pair(1, 2), Kind.RECORD),
            (Plain(), Kind.RECORD),
            (Slotted(), Kind.RECORD),
            ({"a": 1}, Kind.MAPPING),
            (OrderedDict(a=1), Kind.MAPPING),
            ((1, 2), Kind.ARRAY),
            ([1, 2], Kind.SEQUENCE),
            (deque([1]), Kind.SEQUENCE),
            ({1, 2}, Kind.SET),
            (frozenset({1}), Kind.SET),
            (object(), Kind.UNHANDLED),
            (iter([1]), Kind.UNHANDLED),
        ],
    )
    def test_classification(self, value: Any, expected: Kind) -> None:
        """Each value lands in the expected kind."""
        assert kind_of(value) is expected

    def test_bound_method_is_function(self) -> None:
        """Bound methods are functions, not records."""
        assert kind_of(Plain().__init__) is Kind.FUNC


class TestHelpers:
    """Tests for is_named_tuple and slot_names."""

    def test_is_named_tuple(self) -> None:
        """Only namedtuple instances qualify."""
        assert is_named_tuple(Pair(1, 2))
        assert not is_named_tuple((1, 2))

    def test_slot_names_follow_hierarchy(self) -> None:
        """Base class slots come first."""
        assert slot_names(SlottedChild) == ("a", "b", "c")
