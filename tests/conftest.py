"""Pytest configuration and fixtures."""

import logging
import os

import pytest
import structlog

from featurelifecycle.lib.settings import reset_settings


@pytest.fixture(autouse=True)
def isolated_reporting_state(monkeypatch):
    """Keep settings, structlog and root logging from leaking between tests."""
    for name in list(os.environ):
        if name.startswith("DEPRECATION_"):
            monkeypatch.delenv(name)
    reset_settings()

    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level

    yield

    reset_settings()
    structlog.reset_defaults()

    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
