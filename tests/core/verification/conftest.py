"""Fixtures for verification tests.

HTTP traffic is mocked with aioresponses; the aiohttp session is real.
"""

from collections.abc import AsyncGenerator, Generator

import aiohttp
import pytest
import pytest_asyncio
from aioresponses import aioresponses

from pkgverify.core.verification import VerificationClient


@pytest_asyncio.fixture
async def session() -> AsyncGenerator[aiohttp.ClientSession, None]:
    async with aiohttp.ClientSession() as client_session:
        yield client_session


@pytest.fixture
def client(session: aiohttp.ClientSession) -> VerificationClient:
    return VerificationClient(session)


@pytest.fixture
def mocked() -> Generator[aioresponses, None, None]:
    with aioresponses() as m:
        yield m
