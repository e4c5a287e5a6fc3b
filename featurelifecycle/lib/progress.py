"""Progress notification envelope.

Listeners receive every reported event wrapped in a ProgressNotification
carrying the kind of event and its details payload. The envelope only
references the payload; it never copies or alters it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Protocol

__all__ = [
    "ProgressKind",
    "ProgressNotification",
    "ProgressListener",
    "RecordingProgressListener",
]


class ProgressKind(Enum):
    """Kinds of progress details carried by notifications."""

    DEPRECATED_USAGE = "deprecated_usage"


@dataclass(frozen=True)
class ProgressNotification:
    """A single progress event delivered to listeners."""

    kind: ProgressKind
    details: Any
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def deprecated_usage(cls, details: Any) -> "ProgressNotification":
        return cls(kind=ProgressKind.DEPRECATED_USAGE, details=details)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable dictionary."""
        payload = self.details.to_dict() if hasattr(self.details, "to_dict") else self.details
        return {
            "kind": self.kind.value,
            "timestamp": self.timestamp.isoformat(),
            "details": payload,
        }


class ProgressListener(Protocol):
    """Receives progress notifications."""

    def progress(self, notification: ProgressNotification) -> None: ...


class RecordingProgressListener:
    """Listener that keeps every notification it receives, in order."""

    def __init__(self) -> None:
        self.notifications: List[ProgressNotification] = []

    def progress(self, notification: ProgressNotification) -> None:
        self.notifications.append(notification)

    def details_of(self, kind: ProgressKind) -> List[Any]:
        """Payloads of all received notifications of the given kind."""
        return [n.details for n in self.notifications if n.kind is kind]

    def clear(self) -> None:
        self.notifications.clear()
