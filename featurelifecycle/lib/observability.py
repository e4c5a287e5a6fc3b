"""Structured logging for deprecation reporting.

Log events go through structlog and are rendered by the stdlib logging
handlers, so records from plain ``logging`` loggers and structlog loggers
share the same output (console or JSON, optional file).

Usage:
    from featurelifecycle.lib.observability import get_structlog_logger, setup_structlog

    setup_structlog(json_format=True)
    logger = get_structlog_logger(__name__)
    logger.warning("deprecated_feature_used", message="foo() is deprecated")
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional, TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from featurelifecycle.lib.settings import DeprecationSettings

__all__ = [
    "get_structlog_logger",
    "setup_structlog",
    "setup_from_settings",
]


def get_structlog_logger(name: str) -> Any:
    """Return a structlog logger for the given module name."""
    return structlog.get_logger(name)


def setup_structlog(
    verbose: bool = False,
    json_format: bool = False,
    log_file: Optional[str] = None,
    level: Optional[int] = None,
) -> None:
    """Configure structlog and the root logger.

    Args:
        verbose: Log at DEBUG instead of INFO
        json_format: Render JSON lines instead of console output
        log_file: Optional path of a file that receives the same output
        level: Explicit logging level, overriding ``verbose``
    """
    if level is None:
        level = logging.DEBUG if verbose else logging.INFO

    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if json_format:
        render_chain: List[Any] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        render_chain = [structlog.dev.ConsoleRenderer(colors=False)]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *render_chain,
        ],
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def setup_from_settings(settings: "DeprecationSettings") -> None:
    """Configure logging from DeprecationSettings."""
    setup_structlog(
        json_format=settings.log_format == "json",
        level=logging.getLevelName(settings.log_level),
    )
