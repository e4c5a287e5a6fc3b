"""Environment-based settings for deprecation reporting.

Uses pydantic-settings; every value can be set through an environment
variable with the DEPRECATION_ prefix or from a .env file.

Example:
    >>> # DEPRECATION_WARNING_MODE=fail
    >>> # DEPRECATION_STACK_TRACE_LIMIT=5
    >>> settings = get_settings()
    >>> settings.warning_mode
    <WarningMode.FAIL: 'fail'>
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "DeprecationSettings",
    "WarningMode",
    "get_settings",
    "reset_settings",
]


class WarningMode(Enum):
    """How reported deprecations surface to the user."""

    ALL = "all"  # Log every usage
    NONE = "none"  # Emit progress events only
    FAIL = "fail"  # Emit, then raise DeprecatedFeatureUsedError


class DeprecationSettings(BaseSettings):
    """Settings controlling how deprecated usages are reported."""

    warning_mode: WarningMode = Field(default=WarningMode.ALL, description="all, none or fail")
    capture_stack_trace: bool = Field(default=True, description="Capture the call site of each usage")
    stack_trace_limit: Optional[int] = Field(default=None, ge=1, description="Keep only the innermost N frames")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format: 'json' or 'console'")

    model_config = SettingsConfigDict(
        env_prefix="DEPRECATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("warning_mode", mode="before")
    @classmethod
    def normalize_warning_mode(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level is a known value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate format is a known value."""
        valid_formats = ["json", "console"]
        if v.lower() not in valid_formats:
            raise ValueError(f"log_format must be one of: {valid_formats}")
        return v.lower()


@lru_cache(maxsize=1)
def get_settings() -> DeprecationSettings:
    """Return the process-wide settings, read once from the environment."""
    return DeprecationSettings()


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
