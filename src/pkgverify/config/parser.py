"""INI parser utilities for pkgverify configuration.

Helpers for reading settings values that carry inline comments and for
writing a commented settings file.
"""

from datetime import UTC, datetime

from pkgverify.constants import (
    CONFIG_VERSION,
    ISO_DATETIME_FORMAT,
    SECTION_DEFAULT,
    SECTION_FLATHUB,
    SECTION_NETWORK,
    SECTION_SNAP,
)


def _strip_inline_comment(value: str) -> str:
    """Strip inline comments from configuration values.

    Args:
        value: Configuration value that may contain inline comment

    Returns:
        Value with inline comment removed (anything after '  #')

    """
    if "  #" in value:
        return value.split("  #")[0].strip()
    return value


class ConfigCommentManager:
    """Manages configuration file comments for user-friendly documentation."""

    @staticmethod
    def get_file_header() -> str:
        """Generate file header comment with description and timestamp."""
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# pkgverify Configuration
# Settings for Flathub and Snapcraft publisher verification lookups.
#
# Last updated: {timestamp}
# Configuration version: {CONFIG_VERSION}

"""

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Get comments for each configuration section."""
        return {
            SECTION_DEFAULT: """# ========================================
# MAIN CONFIGURATION
# ========================================
""",
            SECTION_NETWORK: """
# ========================================
# NETWORK CONFIGURATION
# ========================================
# Timeouts apply to each request on its own; a timed-out request is
# treated as "not verified" and processing continues.
""",
            SECTION_FLATHUB: """
# ========================================
# FLATHUB VERIFIED COLLECTION
# ========================================
""",
            SECTION_SNAP: """
# ========================================
# SNAPCRAFT PUBLISHER LOOKUP
# ========================================
""",
        }

    @staticmethod
    def get_key_comments() -> dict[str, dict[str, str]]:
        """Get inline comments for configuration keys."""
        return {
            SECTION_DEFAULT: {
                "config_version": "# DO NOT MODIFY - Config format version",
                "log_level": "# File log level: DEBUG, INFO, WARNING, ERROR",
                "console_log_level": "# Console log level",
            },
            SECTION_NETWORK: {
                "bulk_timeout_seconds": "# Timeout per collection page",
                "item_timeout_seconds": "# Timeout per snap lookup",
                "max_connections": "# Connection pool size",
            },
            SECTION_FLATHUB: {
                "collection_url": "# Verified collection endpoint",
                "per_page": "# Apps per page (max 250)",
                "max_pages": "# Hard ceiling on pages fetched",
            },
            SECTION_SNAP: {
                "info_url": "# Snap info endpoint",
                "device_series": "# Value of the Snap-Device-Series header",
                "batch_size": "# Concurrent lookups per batch",
            },
        }
