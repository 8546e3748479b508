"""Base command handler for pkgverify CLI commands."""

from abc import ABC, abstractmethod
from argparse import Namespace
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from pkgverify.config import ConfigManager
from pkgverify.core.http_session import create_http_session
from pkgverify.core.verification import (
    VerificationClient,
    VerificationResolver,
)
from pkgverify.domain.types import GlobalConfig
from pkgverify.logger import get_logger

logger = get_logger(__name__)


class BaseCommandHandler(ABC):
    """Abstract base class for all command handlers.

    CLIRunner acts as the composition root and injects the configuration;
    handlers build the network stack per invocation.
    """

    def __init__(
        self, config_manager: ConfigManager, global_config: GlobalConfig
    ) -> None:
        """Initialize the command handler with shared dependencies.

        Args:
            config_manager: Configuration management instance
            global_config: Loaded global configuration

        """
        self.config_manager = config_manager
        self.global_config = global_config

    @asynccontextmanager
    async def open_client(self) -> AsyncIterator[VerificationClient]:
        """Yield a verification client bound to a fresh HTTP session."""
        async with create_http_session(self.global_config) as session:
            yield VerificationClient.from_config(session, self.global_config)

    @asynccontextmanager
    async def open_resolver(self) -> AsyncIterator[VerificationResolver]:
        """Yield a verification resolver bound to a fresh HTTP session."""
        async with self.open_client() as client:
            yield VerificationResolver(client)

    @abstractmethod
    async def execute(self, args: Namespace) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments

        Returns:
            Process exit code

        """
