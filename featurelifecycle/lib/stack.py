"""Call-frame descriptors and call-site capture.

A deprecated usage is reported together with the call path that led to
it. Frames are ordered the way Python prints tracebacks: outermost first,
innermost (the call site) last.

Usage:
    from featurelifecycle.lib.stack import capture_stack_trace

    frames = capture_stack_trace(limit=10)
    print(frames[-1])  # File "app/build.py", line 42, in configure
"""

from __future__ import annotations

import inspect
import linecache
import os
import traceback
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

__all__ = [
    "PACKAGE_DIR",
    "StackFrame",
    "capture_stack_trace",
]

# Frames under this directory belong to the reporting machinery itself
PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@dataclass(frozen=True)
class StackFrame:
    """One entry of a captured call stack."""

    filename: str
    lineno: int
    function: str
    module: Optional[str] = None
    line: Optional[str] = None

    @classmethod
    def from_frame_summary(cls, summary: traceback.FrameSummary) -> "StackFrame":
        """Build a frame from a ``traceback.FrameSummary``."""
        return cls(
            filename=summary.filename,
            lineno=summary.lineno or 0,
            function=summary.name,
            line=summary.line or None,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StackFrame":
        return cls(
            filename=data["filename"],
            lineno=int(data["lineno"]),
            function=data["function"],
            module=data.get("module"),
            line=data.get("line"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable dictionary."""
        return asdict(self)

    def __str__(self) -> str:
        return f'File "{self.filename}", line {self.lineno}, in {self.function}'


def _normalize(path: str) -> str:
    return os.path.normcase(os.path.abspath(path))


def _is_excluded(filename: str, prefixes: Tuple[str, ...]) -> bool:
    normalized = _normalize(filename)
    return any(
        normalized == prefix or normalized.startswith(prefix + os.sep)
        for prefix in prefixes
    )


def capture_stack_trace(
    limit: Optional[int] = None,
    exclude_prefixes: Optional[Iterable[str]] = None,
) -> Tuple[StackFrame, ...]:
    """Capture the current call stack as a tuple of StackFrame.

    Innermost frames located under any of ``exclude_prefixes`` (by default
    this package) are dropped, so the last frame returned is the code that
    used the deprecated feature rather than the reporter.

    Args:
        limit: Keep only the innermost ``limit`` frames
        exclude_prefixes: Directories whose innermost frames are stripped

    Returns:
        Frames ordered outermost first, innermost last
    """
    if exclude_prefixes is None:
        prefixes: Tuple[str, ...] = (_normalize(PACKAGE_DIR),)
    else:
        prefixes = tuple(_normalize(p) for p in exclude_prefixes)

    innermost_first: List[StackFrame] = []
    for frame, lineno in traceback.walk_stack(inspect.currentframe()):
        filename = frame.f_code.co_filename
        lineno = lineno or 0
        innermost_first.append(
            StackFrame(
                filename=filename,
                lineno=lineno,
                function=frame.f_code.co_name,
                module=frame.f_globals.get("__name__"),
                line=linecache.getline(filename, lineno).strip() or None,
            )
        )

    start = 0
    while start < len(innermost_first) and _is_excluded(
        innermost_first[start].filename, prefixes
    ):
        start += 1
    frames = innermost_first[start:]

    if limit is not None:
        frames = frames[:max(limit, 0)]

    frames.reverse()
    return tuple(frames)
