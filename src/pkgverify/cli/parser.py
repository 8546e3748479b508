"""CLI argument parser for pkgverify."""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from pkgverify.domain.types import Distro, GlobalConfig


class CLIParser:
    """Command-line argument parser for pkgverify."""

    def __init__(self, global_config: GlobalConfig) -> None:
        """Initialize the CLI parser with global configuration.

        Args:
            global_config: Loaded global configuration, used for defaults

        """
        self.global_config = global_config

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (sys.argv[1:] if omitted)

        Returns:
            Parsed arguments namespace

        """
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="pkgverify",
            description="Check Flatpak and Snap packages for verified "
            "publishers",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Check Flathub verification
  %(prog)s check flatpak org.mozilla.firefox com.spotify.Client

  # Check snaps against the built-in table
  %(prog)s check snap firefox "code --classic"

  # Also query Snapcraft for snaps missing from the table
  %(prog)s check snap --lookup firefox some-snap

  # Query Snapcraft directly
  %(prog)s lookup firefox vlc
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show pkgverify version and exit",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_check_command(subparsers)
        self._add_lookup_command(subparsers)

    def _add_check_command(self, subparsers) -> None:
        """Add check command parser."""
        check_parser = subparsers.add_parser(
            "check",
            help="Check packages for a verified publisher",
        )
        check_parser.add_argument(
            "distro",
            choices=[distro.value for distro in Distro],
            help="Package source",
        )
        check_parser.add_argument(
            "packages",
            nargs="+",
            help="Package identifiers (Flatpak app IDs or snap names)",
        )
        check_parser.add_argument(
            "--lookup",
            action="store_true",
            help="Query Snapcraft for snaps not in the built-in table",
        )

    def _add_lookup_command(self, subparsers) -> None:
        """Add lookup command parser."""
        lookup_parser = subparsers.add_parser(
            "lookup",
            help="Query Snapcraft publisher validation for snaps",
        )
        lookup_parser.add_argument(
            "packages",
            nargs="+",
            help="Snap names",
        )
        lookup_parser.add_argument(
            "--batch-size",
            type=int,
            default=self.global_config["snap"]["batch_size"],
            help="Concurrent lookups per batch",
        )
