"""Logging utilities for pkgverify.

Structured logging with a colored console handler and a rotating log
file, both driven by a QueueListener thread so coroutines never block on
handler I/O.

Architecture:
    Application -> QueueHandler -> Queue -> QueueListener Thread
                                                 |
                                       Console + File Handlers

Usage:
    >>> from pkgverify.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Fetched page %d", page)  # Use %-style formatting

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Handlers are only attached to the root 'pkgverify' logger
    4. Never use f-strings in log calls
"""

from pkgverify.exceptions import ConfigurationError
from pkgverify.logger.config import (
    update_logger_from_config as _update_config,
)
from pkgverify.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from pkgverify.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from pkgverify.logger.state import _state, get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config() -> None:
    """Update logger handler levels from the settings file."""
    _update_config(get_state())
