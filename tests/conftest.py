"""Pytest configuration and fixtures for pkgverify tests."""

import logging
import os
import tempfile

import pytest

# Keep test runs out of the user's log directory. Must be set before any
# pkgverify module creates its logger.
os.environ.setdefault(
    "PKGVERIFY_LOG_DIR", tempfile.mkdtemp(prefix="pkgverify-test-logs-")
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all pkgverify loggers during tests.

    The root pkgverify logger is created with propagate=False; caplog
    only sees records that reach the root logger.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("pkgverify"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value
