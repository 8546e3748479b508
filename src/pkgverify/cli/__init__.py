"""Command-line interface for pkgverify."""

from pkgverify.cli.parser import CLIParser
from pkgverify.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
