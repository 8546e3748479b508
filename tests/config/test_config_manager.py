"""Tests for ConfigManager INI settings handling."""

from pathlib import Path

import pytest

from pkgverify.config import ConfigManager
from pkgverify.constants import (
    CONFIG_VERSION,
    FLATHUB_COLLECTION_URL,
    SNAP_INFO_URL,
)


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    return ConfigManager(config_dir=tmp_path / "pkgverify")


def _write_settings(manager: ConfigManager, content: str) -> None:
    manager.config_dir.mkdir(parents=True, exist_ok=True)
    manager.settings_file.write_text(content, encoding="utf-8")


class TestDefaults:
    """Loading without a settings file."""

    def test_defaults(self, config_manager: ConfigManager) -> None:
        config = config_manager.load_global_config()

        assert config["config_version"] == CONFIG_VERSION
        assert config["log_level"] == "INFO"
        assert config["console_log_level"] == "WARNING"
        assert config["network"] == {
            "bulk_timeout_seconds": 10,
            "item_timeout_seconds": 5,
            "max_connections": 10,
        }
        assert config["flathub"] == {
            "collection_url": FLATHUB_COLLECTION_URL,
            "per_page": 250,
            "max_pages": 10,
        }
        assert config["snap"] == {
            "info_url": SNAP_INFO_URL,
            "device_series": "16",
            "batch_size": 5,
        }

    def test_missing_file_is_created(
        self, config_manager: ConfigManager
    ) -> None:
        config_manager.load_global_config()

        content = config_manager.settings_file.read_text(encoding="utf-8")
        assert "[network]" in content
        assert "[flathub]" in content
        assert "[snap]" in content
        assert "# Hard ceiling on pages fetched" in content

    def test_saved_file_round_trips(
        self, config_manager: ConfigManager
    ) -> None:
        first = config_manager.load_global_config()
        second = config_manager.load_global_config()

        assert first == second


class TestOverrides:
    """Loading a user-edited settings file."""

    def test_user_values_override_defaults(
        self, config_manager: ConfigManager
    ) -> None:
        _write_settings(
            config_manager,
            "[DEFAULT]\n"
            "console_log_level = debug\n"
            "[network]\n"
            "item_timeout_seconds = 3  # faster\n"
            "[snap]\n"
            "batch_size = 2\n",
        )

        config = config_manager.load_global_config()

        assert config["console_log_level"] == "DEBUG"
        assert config["network"]["item_timeout_seconds"] == 3
        assert config["network"]["bulk_timeout_seconds"] == 10
        assert config["snap"]["batch_size"] == 2

    def test_per_page_is_clamped(self, config_manager: ConfigManager) -> None:
        _write_settings(config_manager, "[flathub]\nper_page = 1000\n")

        config = config_manager.load_global_config()

        assert config["flathub"]["per_page"] == 250

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_invalid_integer_falls_back(
        self,
        config_manager: ConfigManager,
        raw: str,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        _write_settings(config_manager, f"[flathub]\nmax_pages = {raw}\n")

        with caplog.at_level("WARNING"):
            config = config_manager.load_global_config()

        assert config["flathub"]["max_pages"] == 10
        assert "max_pages" in caplog.text

    def test_invalid_log_level_falls_back(
        self, config_manager: ConfigManager
    ) -> None:
        _write_settings(config_manager, "[DEFAULT]\nlog_level = LOUD\n")

        config = config_manager.load_global_config()

        assert config["log_level"] == "INFO"

    def test_unparseable_file_uses_defaults(
        self, config_manager: ConfigManager
    ) -> None:
        _write_settings(config_manager, "this is not an ini file\n")

        config = config_manager.load_global_config()

        assert config["snap"]["batch_size"] == 5
