"""Global INI configuration manager for pkgverify.

Settings live in ~/.config/pkgverify/settings.conf. A missing file is
created from defaults; unreadable values fall back to their defaults.
"""

import configparser
import logging
from pathlib import Path

from pkgverify.config.parser import (
    ConfigCommentManager,
    _strip_inline_comment,
)
from pkgverify.config.paths import Paths
from pkgverify.constants import (
    CONFIG_FILE_NAME,
    CONFIG_VERSION,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_CONNECTIONS,
    FLATHUB_COLLECTION_URL,
    FLATHUB_MAX_PAGES,
    FLATHUB_MAX_PER_PAGE,
    FLATHUB_PER_PAGE,
    FLATHUB_TIMEOUT_SECONDS,
    KEY_BATCH_SIZE,
    KEY_BULK_TIMEOUT_SECONDS,
    KEY_COLLECTION_URL,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_DEVICE_SERIES,
    KEY_INFO_URL,
    KEY_ITEM_TIMEOUT_SECONDS,
    KEY_LOG_LEVEL,
    KEY_MAX_CONNECTIONS,
    KEY_MAX_PAGES,
    KEY_PER_PAGE,
    SECTION_DEFAULT,
    SECTION_FLATHUB,
    SECTION_NETWORK,
    SECTION_SNAP,
    SNAP_BATCH_SIZE,
    SNAP_DEVICE_SERIES,
    SNAP_INFO_URL,
    SNAP_TIMEOUT_SECONDS,
)
from pkgverify.domain.types import (
    FlathubConfig,
    GlobalConfig,
    NetworkConfig,
    SnapConfig,
)

logger = logging.getLogger(__name__)

RawConfigDict = dict[str, str | dict[str, str]]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigManager:
    """Manages the global INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.CONFIG_DIR)

        """
        self.config_dir = config_dir or Paths.CONFIG_DIR
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_global_config(self) -> RawConfigDict:
        """Get default global configuration values.

        Returns:
            Default configuration dictionary

        """
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_NETWORK: {
                KEY_BULK_TIMEOUT_SECONDS: str(FLATHUB_TIMEOUT_SECONDS),
                KEY_ITEM_TIMEOUT_SECONDS: str(SNAP_TIMEOUT_SECONDS),
                KEY_MAX_CONNECTIONS: str(DEFAULT_MAX_CONNECTIONS),
            },
            SECTION_FLATHUB: {
                KEY_COLLECTION_URL: FLATHUB_COLLECTION_URL,
                KEY_PER_PAGE: str(FLATHUB_PER_PAGE),
                KEY_MAX_PAGES: str(FLATHUB_MAX_PAGES),
            },
            SECTION_SNAP: {
                KEY_INFO_URL: SNAP_INFO_URL,
                KEY_DEVICE_SERIES: SNAP_DEVICE_SERIES,
                KEY_BATCH_SIZE: str(SNAP_BATCH_SIZE),
            },
        }

    def _create_config_from_defaults(
        self, defaults: RawConfigDict
    ) -> configparser.ConfigParser:
        """Create ConfigParser populated with the defaults dictionary."""
        config = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )

        flat_defaults = {
            key: str(value)
            for key, value in defaults.items()
            if not isinstance(value, dict)
        }
        config.read_dict({SECTION_DEFAULT: flat_defaults})

        for key, value in defaults.items():
            if isinstance(value, dict):
                config.add_section(key)
                for subkey, subvalue in value.items():
                    config.set(key, subkey, str(subvalue))

        return config

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from INI file.

        Returns:
            Loaded global configuration

        """
        defaults = self.get_default_global_config()
        config = self._create_config_from_defaults(defaults)

        if self.settings_file.exists():
            try:
                config.read(self.settings_file, encoding="utf-8")
            except configparser.Error as e:
                logger.warning(
                    "Invalid settings file %s, using defaults: %s",
                    self.settings_file,
                    e,
                )
                config = self._create_config_from_defaults(defaults)
        else:
            self.save_global_config(self._convert_to_global_config(config))

        return self._convert_to_global_config(config)

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file with comments.

        Args:
            config: Global configuration to save

        """
        comment_manager = ConfigCommentManager()
        section_comments = comment_manager.get_section_comments()
        key_comments = comment_manager.get_key_comments()

        sections: dict[str, dict[str, str]] = {
            SECTION_DEFAULT: {
                KEY_CONFIG_VERSION: config["config_version"],
                KEY_LOG_LEVEL: config["log_level"],
                KEY_CONSOLE_LOG_LEVEL: config["console_log_level"],
            },
            SECTION_NETWORK: {
                key: str(value) for key, value in config["network"].items()
            },
            SECTION_FLATHUB: {
                key: str(value) for key, value in config["flathub"].items()
            },
            SECTION_SNAP: {
                key: str(value) for key, value in config["snap"].items()
            },
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(comment_manager.get_file_header())
            for section, values in sections.items():
                f.write(section_comments[section])
                f.write(f"[{section}]\n")
                for key, value in values.items():
                    inline_comment = key_comments[section].get(key, "")
                    if inline_comment:
                        f.write(f"{key} = {value}  {inline_comment}\n")
                    else:
                        f.write(f"{key} = {value}\n")

    def _get_str(
        self, config: configparser.ConfigParser, section: str, key: str
    ) -> str:
        return _strip_inline_comment(config.get(section, key, raw=True))

    def _get_int(
        self,
        config: configparser.ConfigParser,
        section: str,
        key: str,
        default: int,
    ) -> int:
        """Read a positive integer, falling back to the default."""
        raw = self._get_str(config, section, key)
        try:
            value = int(raw)
        except ValueError:
            logger.warning(
                "Invalid integer for [%s] %s: %r, using %d",
                section,
                key,
                raw,
                default,
            )
            return default
        if value < 1:
            logger.warning(
                "Non-positive value for [%s] %s: %d, using %d",
                section,
                key,
                value,
                default,
            )
            return default
        return value

    def _get_level(
        self, config: configparser.ConfigParser, key: str, default: str
    ) -> str:
        level = self._get_str(config, SECTION_DEFAULT, key).upper()
        if level not in _LOG_LEVELS:
            logger.warning("Invalid %s %r, using %s", key, level, default)
            return default
        return level

    def _convert_to_global_config(
        self, config: configparser.ConfigParser
    ) -> GlobalConfig:
        """Convert configparser to typed GlobalConfig.

        Args:
            config: Configuration to convert

        Returns:
            Typed global configuration

        """
        network = NetworkConfig(
            bulk_timeout_seconds=self._get_int(
                config,
                SECTION_NETWORK,
                KEY_BULK_TIMEOUT_SECONDS,
                FLATHUB_TIMEOUT_SECONDS,
            ),
            item_timeout_seconds=self._get_int(
                config,
                SECTION_NETWORK,
                KEY_ITEM_TIMEOUT_SECONDS,
                SNAP_TIMEOUT_SECONDS,
            ),
            max_connections=self._get_int(
                config,
                SECTION_NETWORK,
                KEY_MAX_CONNECTIONS,
                DEFAULT_MAX_CONNECTIONS,
            ),
        )
        flathub = FlathubConfig(
            collection_url=self._get_str(
                config, SECTION_FLATHUB, KEY_COLLECTION_URL
            ),
            per_page=min(
                self._get_int(
                    config, SECTION_FLATHUB, KEY_PER_PAGE, FLATHUB_PER_PAGE
                ),
                FLATHUB_MAX_PER_PAGE,
            ),
            max_pages=self._get_int(
                config, SECTION_FLATHUB, KEY_MAX_PAGES, FLATHUB_MAX_PAGES
            ),
        )
        snap = SnapConfig(
            info_url=self._get_str(config, SECTION_SNAP, KEY_INFO_URL),
            device_series=self._get_str(
                config, SECTION_SNAP, KEY_DEVICE_SERIES
            ),
            batch_size=self._get_int(
                config, SECTION_SNAP, KEY_BATCH_SIZE, SNAP_BATCH_SIZE
            ),
        )

        return GlobalConfig(
            config_version=self._get_str(
                config, SECTION_DEFAULT, KEY_CONFIG_VERSION
            ),
            log_level=self._get_level(
                config, KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL
            ),
            console_log_level=self._get_level(
                config, KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
            ),
            network=network,
            flathub=flathub,
            snap=snap,
        )
