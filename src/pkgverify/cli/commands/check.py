"""Check command handler.

Starts a resolver and reports, per package, whether it comes from a
verified publisher.
"""

from argparse import Namespace

from pkgverify.cli.commands.base import BaseCommandHandler
from pkgverify.domain.types import Distro
from pkgverify.logger import get_logger

logger = get_logger(__name__)


class CheckHandler(BaseCommandHandler):
    """Handler for the check command."""

    async def execute(self, args: Namespace) -> int:
        distro = Distro(args.distro)

        async with self.open_resolver() as resolver:
            status = await resolver.start()
            if args.lookup and distro is Distro.SNAP:
                await resolver.enrich_snaps(args.packages)

            if status.has_error and distro is Distro.FLATPAK:
                print(
                    "⚠️  Flathub verification data is incomplete; "
                    "some packages may show as unverified"
                )

            for package in args.packages:
                source = resolver.get_verification_source(distro, package)
                if source is None:
                    print(f"   {package}: not verified")
                else:
                    print(f"✅ {package}: verified ({source})")

        return 0
