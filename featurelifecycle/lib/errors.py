"""Structured exception hierarchy for deprecation reporting.

Provides specific exception types for the few ways reporting can fail,
with context suitable for structured logging.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from featurelifecycle.lib.usage import DeprecatedUsageProgressDetails

__all__ = [
    "DeprecationReportingError",
    "InvalidUsageDetailsError",
    "DeprecatedFeatureUsedError",
]


class DeprecationReportingError(Exception):
    """Base exception for all deprecation reporting errors."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        self.suggestion = suggestion

        parts = [message]

        if details:
            parts.append("\nDetails:")
            parts.extend(f"  {k}: {v}" for k, v in details.items())

        if suggestion:
            parts.append(f"\nSuggestion: {suggestion}")

        super().__init__("\n".join(parts) if len(parts) > 1 else message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class InvalidUsageDetailsError(DeprecationReportingError):
    """A usage record was constructed with an invalid field.

    Text fields must be given explicitly; an absent value is represented
    by an empty string, never by None. The stack trace must be a sequence
    of frames, not a string.
    """

    def __init__(self, field: str, *, reason: str = "must not be None", **kwargs: Any) -> None:
        self.field = field
        details = dict(kwargs.pop("details", None) or {})
        details["field"] = field
        kwargs.setdefault(
            "suggestion",
            "Pass an empty string (or an empty sequence for stack_trace) instead",
        )
        super().__init__(
            f"Deprecated usage field '{field}' {reason}",
            details=details,
            **kwargs,
        )


class DeprecatedFeatureUsedError(DeprecationReportingError):
    """Raised in 'fail' warning mode once a deprecated usage has been reported."""

    def __init__(self, usage: "DeprecatedUsageProgressDetails", **kwargs: Any) -> None:
        self.usage = usage
        details = dict(kwargs.pop("details", None) or {})
        if usage.location is not None:
            details["location"] = str(usage.location)
        kwargs.setdefault(
            "suggestion",
            "Set DEPRECATION_WARNING_MODE=all to report deprecations without failing",
        )
        super().__init__(usage.format(), details=details, **kwargs)
