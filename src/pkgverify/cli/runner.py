"""CLI runner for pkgverify.

Routes parsed arguments to the command handlers.
"""

from collections.abc import Sequence

from pkgverify import __version__
from pkgverify.cli.commands import CheckHandler, LookupHandler
from pkgverify.cli.commands.base import BaseCommandHandler
from pkgverify.cli.parser import CLIParser
from pkgverify.config import ConfigManager
from pkgverify.logger import get_logger, update_logger_from_config

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        """Initialize CLI runner with shared dependencies.

        Args:
            config_manager: Configuration manager (default location if
                omitted)

        """
        self.config_manager = config_manager or ConfigManager()
        self.global_config = self.config_manager.load_global_config()
        update_logger_from_config()

        self.command_handlers: dict[str, BaseCommandHandler] = {
            "check": CheckHandler(self.config_manager, self.global_config),
            "lookup": LookupHandler(self.config_manager, self.global_config),
        }

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and execute the selected command.

        Args:
            argv: Arguments to parse (sys.argv[1:] if omitted)

        Returns:
            Process exit code

        """
        args = CLIParser(self.global_config).parse_args(argv)

        if args.version:
            print(__version__)
            return 0

        if not args.command:
            print("❌ No command specified. Use --help.")
            return 1

        handler = self.command_handlers[args.command]
        logger.debug("Running command %s", args.command)
        return await handler.execute(args)
