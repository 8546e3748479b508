"""Fixtures for CLI tests."""

from collections.abc import Generator
from pathlib import Path

import pytest
from aioresponses import aioresponses

from pkgverify.config import ConfigManager
from pkgverify.domain.types import GlobalConfig


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    return ConfigManager(config_dir=tmp_path / "config")


@pytest.fixture
def global_config(config_manager: ConfigManager) -> GlobalConfig:
    return config_manager.load_global_config()


@pytest.fixture
def mocked() -> Generator[aioresponses, None, None]:
    with aioresponses() as m:
        yield m
