"""Deprecated feature usage records.

A DeprecatedUsageProgressDetails describes one detected use of a
deprecated feature. It is produced by a reporter, wrapped in a progress
notification and read by listeners (consoles, IDEs, CI dashboards) that
render or group the warning.

The record is an immutable value: all four fields are supplied at
construction and none can be reassigned. The stack trace is copied into
a tuple, so later changes to the caller's list are not seen by the
record.

Example:
    >>> usage = DeprecatedUsageProgressDetails(
    ...     "Method foo() is deprecated.",
    ...     "This method will be removed in the next major version.",
    ...     "Use bar() instead.",
    ...     [],
    ... )
    >>> usage.format()
    'Method foo() is deprecated. This method will be removed in the next major version. Use bar() instead.'
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Protocol, Sequence, Tuple, runtime_checkable

from featurelifecycle.lib.errors import InvalidUsageDetailsError
from featurelifecycle.lib.stack import StackFrame

__all__ = [
    "DeprecatedUsageDetails",
    "DeprecatedUsageProgressDetails",
]


@runtime_checkable
class DeprecatedUsageDetails(Protocol):
    """Capability shared by every deprecated usage payload."""

    @property
    def message(self) -> str: ...

    @property
    def stack_trace(self) -> Sequence[Any]: ...


def _normalize_frame(frame: Any) -> Any:
    if isinstance(frame, traceback.FrameSummary):
        return StackFrame.from_frame_summary(frame)
    return frame


def _frame_to_dict(frame: Any) -> Any:
    if hasattr(frame, "to_dict"):
        return frame.to_dict()
    return str(frame)


@dataclass(frozen=True)
class DeprecatedUsageProgressDetails:
    """Progress details for a single deprecated feature usage.

    ``traceback.FrameSummary`` entries are stored as StackFrame, so
    ``to_dict()``/``from_dict()`` round-trip exactly for both. Other
    frame descriptors are kept as given and serialize as ``str(frame)``.

    Attributes:
        message: What deprecated behavior was used
        details: Why it is deprecated (what will change, and when)
        advice: How to stop using it; may be empty
        stack_trace: Call frames at the point of use, outermost first
    """

    message: str
    details: str
    advice: str
    stack_trace: Tuple[Any, ...]

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) is None:
                raise InvalidUsageDetailsError(f.name)
        if isinstance(self.stack_trace, (str, bytes)):
            raise InvalidUsageDetailsError(
                "stack_trace", reason="must be a sequence of frames, not text"
            )
        # Frozen: bypass __setattr__ to store the defensive copy
        object.__setattr__(
            self,
            "stack_trace",
            tuple(_normalize_frame(frame) for frame in self.stack_trace),
        )

    @property
    def warning(self) -> str:
        """Alias for ``details`` used by older listeners."""
        return self.details

    @property
    def location(self) -> Optional[Any]:
        """Innermost frame (the call site), or None without a stack trace."""
        return self.stack_trace[-1] if self.stack_trace else None

    def format(self) -> str:
        """Render message, details and advice as a single line."""
        parts = (str(part).strip() for part in (self.message, self.details, self.advice))
        return " ".join(part for part in parts if part)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable dictionary."""
        return {
            "message": self.message,
            "details": self.details,
            "advice": self.advice,
            "stack_trace": [_frame_to_dict(frame) for frame in self.stack_trace],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeprecatedUsageProgressDetails":
        """Rebuild a record from ``to_dict()`` output."""
        frames = [
            StackFrame.from_dict(frame) if isinstance(frame, dict) else frame
            for frame in data.get("stack_trace", [])
        ]
        return cls(
            message=data["message"],
            details=data.get("details", data.get("warning", "")),
            advice=data.get("advice", ""),
            stack_trace=tuple(frames),
        )
