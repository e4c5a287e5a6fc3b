"""Deprecation reporting library modules.

This package contains the usage record, its progress envelope and the
reporter that produces them.
"""

from featurelifecycle.lib.errors import (
    DeprecatedFeatureUsedError,
    DeprecationReportingError,
    InvalidUsageDetailsError,
)
from featurelifecycle.lib.observability import (
    get_structlog_logger,
    setup_from_settings,
    setup_structlog,
)
from featurelifecycle.lib.progress import (
    ProgressKind,
    ProgressListener,
    ProgressNotification,
    RecordingProgressListener,
)
from featurelifecycle.lib.reporter import DeprecatedUsageReporter
from featurelifecycle.lib.settings import (
    DeprecationSettings,
    WarningMode,
    get_settings,
    reset_settings,
)
from featurelifecycle.lib.stack import StackFrame, capture_stack_trace
from featurelifecycle.lib.usage import (
    DeprecatedUsageDetails,
    DeprecatedUsageProgressDetails,
)

__all__ = [
    # Usage records
    "DeprecatedUsageDetails",
    "DeprecatedUsageProgressDetails",
    # Stack traces
    "StackFrame",
    "capture_stack_trace",
    # Progress
    "ProgressKind",
    "ProgressListener",
    "ProgressNotification",
    "RecordingProgressListener",
    # Reporting
    "DeprecatedUsageReporter",
    # Settings
    "DeprecationSettings",
    "WarningMode",
    "get_settings",
    "reset_settings",
    # Errors
    "DeprecationReportingError",
    "InvalidUsageDetailsError",
    "DeprecatedFeatureUsedError",
    # Logging
    "get_structlog_logger",
    "setup_structlog",
    "setup_from_settings",
]
