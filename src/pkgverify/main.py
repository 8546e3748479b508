"""Main CLI entry point for pkgverify."""

import sys

import uvloop

from pkgverify.cli import CLIRunner
from pkgverify.logger import get_logger

logger = get_logger(__name__)


async def async_main() -> int:
    """Run the CLI asynchronously.

    Returns:
        Process exit code

    """
    logger.debug("CLI started")
    runner = CLIRunner()
    try:
        return await runner.run()
    except Exception:
        logger.exception("CLI encountered an error")
        raise


def main() -> None:
    """Run the CLI application on the uvloop event loop."""
    try:
        sys.exit(uvloop.run(async_main()))
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
