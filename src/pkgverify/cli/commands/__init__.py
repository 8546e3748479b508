"""Command handlers for the pkgverify CLI."""

from pkgverify.cli.commands.check import CheckHandler
from pkgverify.cli.commands.lookup import LookupHandler

__all__ = ["CheckHandler", "LookupHandler"]
