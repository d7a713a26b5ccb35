"""Configuration management for deepequal.

This module provides the process-wide comparison settings using
pydantic-settings for environment variable management and validation.

Every call to ``equal()`` takes a snapshot of the settings at entry, so
changes made while a comparison is running do not affect it.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self

from deepequal.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator


class Settings(BaseSettings):
    """Comparison policies loaded from environment variables.

    All settings can be configured via environment variables with
    the DEEPEQUAL_ prefix, or changed at runtime on the shared
    ``settings`` instance.

    Attributes:
        float_precision: Decimal places used to compare floats.
        time_precision: Granularity timestamps and durations are truncated to
            before comparison. Zero disables truncation.
        max_diff: Maximum number of differences to return.
        max_depth: Maximum levels to recurse into. Zero means unlimited.
        log_errors: Log internal diagnostics to the deepequal logger.
        compare_unexported_fields: Compare record fields whose names start
            with an underscore.
        compare_functions: Report function values as unequal unless both
            are None.
        nil_slices_are_empty: Treat None as equal to an empty list.
        nil_maps_are_empty: Treat None as equal to an empty mapping.

    Example:
        >>> # Set via environment variables:
        >>> # export DEEPEQUAL_MAX_DIFF=50
        >>> # export DEEPEQUAL_TIME_PRECISION=00:00:00.001
        >>>
        >>> settings = Settings()
        >>> print(settings.max_diff)
        50

    Environment Variables:
        DEEPEQUAL_FLOAT_PRECISION: Float decimal places (default: 10)
        DEEPEQUAL_TIME_PRECISION: HH:MM:SS.ffffff or ISO 8601 duration (default: 0)
        DEEPEQUAL_MAX_DIFF: Difference cap (default: 10)
        DEEPEQUAL_MAX_DEPTH: Recursion cap (default: 0, unlimited)
        DEEPEQUAL_LOG_ERRORS: Log diagnostics (default: false)
        DEEPEQUAL_COMPARE_UNEXPORTED_FIELDS: (default: false)
        DEEPEQUAL_COMPARE_FUNCTIONS: (default: false)
        DEEPEQUAL_NIL_SLICES_ARE_EMPTY: (default: false)
        DEEPEQUAL_NIL_MAPS_ARE_EMPTY: (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEPEQUAL_",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    float_precision: int = Field(
        default=10,
        ge=0,
        description="Decimal places used to compare floats",
    )
    time_precision: timedelta = Field(
        default=timedelta(0),
        description="Truncation granularity for datetime and timedelta values",
    )
    max_diff: int = Field(
        default=10,
        ge=1,
        description="Maximum number of differences to return",
    )
    max_depth: int = Field(
        default=0,
        ge=0,
        description="Maximum recursion depth, 0 for unlimited",
    )
    log_errors: bool = Field(
        default=False,
        description="Log internal diagnostics",
    )
    compare_unexported_fields: bool = Field(
        default=False,
        description="Compare record fields whose names start with an underscore",
    )
    compare_functions: bool = Field(
        default=False,
        description="Report function values as unequal",
    )
    nil_slices_are_empty: bool = Field(
        default=False,
        description="Treat None as equal to an empty list",
    )
    nil_maps_are_empty: bool = Field(
        default=False,
        description="Treat None as equal to an empty mapping",
    )

    @field_validator("time_precision")
    @classmethod
    def validate_time_precision(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("time_precision must not be negative")
        return value

    @property
    def float_format(self) -> str:
        """Format string rendering a float with float_precision decimals."""
        return f"{{:.{self.float_precision}f}}"

    def snapshot(self) -> Self:
        """Return an independent copy used for the duration of one comparison."""
        return self.model_copy()


settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings


@contextmanager
def configure(**overrides: Any) -> Iterator[Settings]:
    """Temporarily override process-wide settings.

    Previous values are restored on exit, including when the block raises.

    Args:
        **overrides: Setting names and their temporary values.

    Yields:
        The process-wide settings instance with overrides applied.

    Raises:
        ConfigurationError: If a name is unknown or a value fails validation.

    Example:
        >>> with configure(float_precision=6):
        ...     equal(1.1234561, 1.1234562)
        []
    """
    unknown = sorted(name for name in overrides if name not in Settings.model_fields)
    if unknown:
        raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")

    previous = {name: getattr(settings, name) for name in overrides}
    try:
        for name, value in overrides.items():
            setattr(settings, name, value)
    except ValidationError as e:
        _restore(previous)
        raise ConfigurationError(str(e)) from e

    try:
        yield settings
    finally:
        _restore(previous)


def _restore(values: dict[str, Any]) -> None:
    for name, value in values.items():
        setattr(settings, name, value)
