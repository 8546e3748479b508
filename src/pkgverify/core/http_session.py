"""HTTP session utilities for pkgverify.

Creates the shared aiohttp session used by the verification client. Per
request timeouts are applied by the client itself; the session only
bounds the connection pool.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from pkgverify.constants import DEFAULT_MAX_CONNECTIONS, JSON_ACCEPT_HEADER
from pkgverify.domain.types import GlobalConfig


@asynccontextmanager
async def create_http_session(
    global_config: GlobalConfig | None = None,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        global_config: Global configuration dictionary

    Yields:
        Configured aiohttp.ClientSession

    """
    max_connections = DEFAULT_MAX_CONNECTIONS
    if global_config is not None:
        max_connections = global_config["network"]["max_connections"]

    connector = aiohttp.TCPConnector(limit=max_connections)

    async with aiohttp.ClientSession(
        connector=connector,
        headers=JSON_ACCEPT_HEADER,
    ) as session:
        yield session
