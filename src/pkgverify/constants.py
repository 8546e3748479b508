"""Centralized constants module for pkgverify.

This module serves as the single source of truth for all shared constants
across the pkgverify codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from pkgverify.constants import FLATHUB_COLLECTION_URL
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "pkgverify"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_NETWORK: Final[str] = "network"
SECTION_FLATHUB: Final[str] = "flathub"
SECTION_SNAP: Final[str] = "snap"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"

KEY_BULK_TIMEOUT_SECONDS: Final[str] = "bulk_timeout_seconds"
KEY_ITEM_TIMEOUT_SECONDS: Final[str] = "item_timeout_seconds"
KEY_MAX_CONNECTIONS: Final[str] = "max_connections"
KEY_COLLECTION_URL: Final[str] = "collection_url"
KEY_PER_PAGE: Final[str] = "per_page"
KEY_MAX_PAGES: Final[str] = "max_pages"
KEY_INFO_URL: Final[str] = "info_url"
KEY_DEVICE_SERIES: Final[str] = "device_series"
KEY_BATCH_SIZE: Final[str] = "batch_size"

# =============================================================================
# Verification Source Constants
# =============================================================================

# Flathub (source A): paginated bulk collection of verified apps
FLATHUB_COLLECTION_URL: Final[str] = (
    "https://flathub.org/api/v2/collection/verified"
)
FLATHUB_MAX_PER_PAGE: Final[int] = 250
FLATHUB_PER_PAGE: Final[int] = 250
FLATHUB_MAX_PAGES: Final[int] = 10
FLATHUB_TIMEOUT_SECONDS: Final[int] = 10

# Snapcraft (source B): per-snap publisher info
SNAP_INFO_URL: Final[str] = "https://api.snapcraft.io/v2/snaps/info"
SNAP_DEVICE_SERIES: Final[str] = "16"
SNAP_DEVICE_SERIES_HEADER: Final[str] = "Snap-Device-Series"
SNAP_TIMEOUT_SECONDS: Final[int] = 5
SNAP_BATCH_SIZE: Final[int] = 5
SNAP_VALIDATION_VERIFIED: Final[str] = "verified"

DEFAULT_MAX_CONNECTIONS: Final[int] = 10

JSON_ACCEPT_HEADER: Final[dict[str, str]] = {"Accept": "application/json"}

# =============================================================================
# Logging Constants
# =============================================================================

DEFAULT_BACKUP_COUNT: Final[int] = 3

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = DEFAULT_BACKUP_COUNT

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

LOG_DIR_ENV_VAR: Final[str] = "PKGVERIFY_LOG_DIR"
LOG_FILE_NAME: Final[str] = "pkgverify.log"
