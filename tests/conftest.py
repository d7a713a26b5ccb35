"""Shared fixtures for the deepequal test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from deepequal.core.config import Settings, settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def default_settings() -> Iterator[Settings]:
    """Run every test against default settings and restore them afterwards."""
    for name, info in Settings.model_fields.items():
        setattr(settings, name, info.get_default(call_default_factory=True))
    yield settings
    for name, info in Settings.model_fields.items():
        setattr(settings, name, info.get_default(call_default_factory=True))
