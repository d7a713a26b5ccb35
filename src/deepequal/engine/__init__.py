"""Comparison engine for deepequal.

This module contains the type-dispatch core, the container walkers,
scalar comparators, capability probes, and per-comparison bookkeeping.
"""

from __future__ import annotations

from deepequal.engine.context import CycleGuard, DiffSink, PathStack
from deepequal.engine.dispatch import Comparison, compare, equal
from deepequal.engine.kinds import kind_of

__all__ = [
    "Comparison",
    "CycleGuard",
    "DiffSink",
    "PathStack",
    "compare",
    "equal",
    "kind_of",
]
