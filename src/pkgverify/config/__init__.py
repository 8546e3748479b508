"""Configuration management for pkgverify."""

from pkgverify.config.config import ConfigManager
from pkgverify.config.paths import Paths

__all__ = ["ConfigManager", "Paths"]
