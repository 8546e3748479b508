"""Configuration loading and updating for logging system.

The logger is created before the settings file is read, so bootstrap
defaults come from here and the configured levels are applied later by
update_logger_from_config().
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from pkgverify.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV_VAR,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from pkgverify.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Environment Variable Override:
        PKGVERIFY_LOG_DIR: Overrides the log directory. The test suite sets
        it so test runs never write into the user's config directory.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / CONFIG_DIR_NAME
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(state: "_LoggerState") -> None:
    """Update logger handler levels from the settings file.

    Only handler levels change, handlers are never added or removed.

    Args:
        state: Logger state object (from logger.state module)

    """
    try:
        from pkgverify.config import ConfigManager  # noqa: PLC0415

        config = ConfigManager().load_global_config()

        console_level = getattr(
            logging, config["console_log_level"], logging.WARNING
        )
        file_level = getattr(logging, config["log_level"], logging.INFO)

        if state.queue_listener is not None:
            for handler in state.queue_listener.handlers:
                if isinstance(handler, RotatingFileHandler):
                    handler.setLevel(file_level)
                elif isinstance(handler, logging.StreamHandler):
                    handler.setLevel(console_level)

        state.config_applied = True

    except (ImportError, KeyError, AttributeError):
        # Config not importable yet, bootstrap defaults stay in effect
        pass
