"""Tests for CLIParser."""

import pytest

from pkgverify.cli.parser import CLIParser
from pkgverify.domain.types import GlobalConfig


class TestCLIParser:
    """Test CLIParser argument handling."""

    def test_check_command(self, global_config: GlobalConfig) -> None:
        args = CLIParser(global_config).parse_args(
            ["check", "flatpak", "org.mozilla.firefox", "com.spotify.Client"]
        )

        assert args.command == "check"
        assert args.distro == "flatpak"
        assert args.packages == ["org.mozilla.firefox", "com.spotify.Client"]
        assert args.lookup is False

    def test_check_snap_with_lookup(
        self, global_config: GlobalConfig
    ) -> None:
        args = CLIParser(global_config).parse_args(
            ["check", "snap", "--lookup", "code --classic"]
        )

        assert args.distro == "snap"
        assert args.packages == ["code --classic"]
        assert args.lookup is True

    def test_check_rejects_unknown_distro(
        self, global_config: GlobalConfig
    ) -> None:
        with pytest.raises(SystemExit):
            CLIParser(global_config).parse_args(["check", "nix", "vim"])

    def test_check_requires_packages(
        self, global_config: GlobalConfig
    ) -> None:
        with pytest.raises(SystemExit):
            CLIParser(global_config).parse_args(["check", "snap"])

    def test_lookup_batch_size_defaults_to_config(
        self, global_config: GlobalConfig
    ) -> None:
        global_config["snap"]["batch_size"] = 3

        args = CLIParser(global_config).parse_args(["lookup", "vlc"])

        assert args.command == "lookup"
        assert args.batch_size == 3

    def test_lookup_batch_size_override(
        self, global_config: GlobalConfig
    ) -> None:
        args = CLIParser(global_config).parse_args(
            ["lookup", "--batch-size", "2", "vlc", "gimp"]
        )

        assert args.batch_size == 2
        assert args.packages == ["vlc", "gimp"]

    def test_no_command(self, global_config: GlobalConfig) -> None:
        args = CLIParser(global_config).parse_args([])

        assert args.command is None
        assert args.version is False
