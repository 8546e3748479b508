"""Lookup command handler: query Snapcraft publisher validation."""

from argparse import Namespace

from pkgverify.cli.commands.base import BaseCommandHandler
from pkgverify.logger import get_logger

logger = get_logger(__name__)


class LookupHandler(BaseCommandHandler):
    """Handler for the lookup command."""

    async def execute(self, args: Namespace) -> int:
        async with self.open_client() as client:
            client.batch_size = max(1, args.batch_size)
            results = await client.fetch_many_per_item(args.packages)

        logger.debug("Looked up %d snaps", len(results))
        for package, verified in results.items():
            mark = "✅" if verified else "  "
            label = "verified" if verified else "not verified"
            print(f"{mark} {package}: {label}")

        return 0
