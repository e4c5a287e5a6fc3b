"""Reporting of deprecated feature usages.

The reporter is the producer side of the deprecation channel: code that
detects a deprecated usage calls ``report()``, which builds one
DeprecatedUsageProgressDetails, logs it and hands it to the progress
listener.

Example:
    listener = RecordingProgressListener()
    reporter = DeprecatedUsageReporter(listener)

    def foo():
        reporter.report(
            "Method foo() is deprecated.",
            details="This method will be removed in the next major version.",
            advice="Use bar() instead.",
        )
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from featurelifecycle.lib.errors import DeprecatedFeatureUsedError
from featurelifecycle.lib.observability import get_structlog_logger
from featurelifecycle.lib.progress import ProgressListener, ProgressNotification
from featurelifecycle.lib.settings import DeprecationSettings, WarningMode, get_settings
from featurelifecycle.lib.stack import capture_stack_trace
from featurelifecycle.lib.usage import DeprecatedUsageProgressDetails

logger = get_structlog_logger(__name__)

__all__ = ["DeprecatedUsageReporter"]


class DeprecatedUsageReporter:
    """Builds and emits one usage record per reported deprecated usage."""

    def __init__(
        self,
        listener: Optional[ProgressListener] = None,
        settings: Optional[DeprecationSettings] = None,
    ) -> None:
        self.listener = listener
        self.settings = settings or get_settings()

    def report(
        self,
        message: str,
        *,
        details: str = "",
        advice: str = "",
        stack_trace: Optional[Sequence[Any]] = None,
    ) -> DeprecatedUsageProgressDetails:
        """Report a deprecated usage.

        Args:
            message: What deprecated behavior was used
            details: Why it is deprecated
            advice: How to migrate away from it
            stack_trace: Frames to attach; captured from the caller when None

        Returns:
            The emitted usage record

        Raises:
            DeprecatedFeatureUsedError: In 'fail' warning mode, after emitting
        """
        if stack_trace is None:
            if self.settings.capture_stack_trace:
                stack_trace = capture_stack_trace(limit=self.settings.stack_trace_limit)
            else:
                stack_trace = ()

        usage = DeprecatedUsageProgressDetails(message, details, advice, stack_trace)
        mode = self.settings.warning_mode

        if mode is not WarningMode.NONE:
            logger.warning(
                "deprecated_feature_used",
                message=usage.message,
                details=usage.details,
                advice=usage.advice,
                location=str(usage.location) if usage.location is not None else None,
            )

        if self.listener is not None:
            self.listener.progress(ProgressNotification.deprecated_usage(usage))

        if mode is WarningMode.FAIL:
            raise DeprecatedFeatureUsedError(usage)

        return usage
