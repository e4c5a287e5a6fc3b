"""Deprecated feature usage reporting.

Produces immutable usage records for every detected use of a deprecated
feature and delivers them to progress listeners.

Usage:
    from featurelifecycle import DeprecatedUsageReporter, RecordingProgressListener

    listener = RecordingProgressListener()
    DeprecatedUsageReporter(listener).report("foo() is deprecated", advice="Use bar()")
"""

from featurelifecycle.lib.progress import ProgressNotification, RecordingProgressListener
from featurelifecycle.lib.reporter import DeprecatedUsageReporter
from featurelifecycle.lib.stack import StackFrame
from featurelifecycle.lib.usage import DeprecatedUsageDetails, DeprecatedUsageProgressDetails

__version__ = "1.0.0"

__all__ = [
    "DeprecatedUsageDetails",
    "DeprecatedUsageProgressDetails",
    "DeprecatedUsageReporter",
    "ProgressNotification",
    "RecordingProgressListener",
    "StackFrame",
]
