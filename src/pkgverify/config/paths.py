"""Path constants for pkgverify configuration."""

from pathlib import Path

from pkgverify.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR
    LOGS_DIR = CONFIG_DIR / "logs"
    GLOBAL_CONFIG_FILE = CONFIG_DIR / CONFIG_FILE_NAME
