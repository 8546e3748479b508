"""Remote verification client for Flathub and Snapcraft.

Talks to the two verification sources and turns their responses into
plain facts:

- Flathub: paginated bulk collection of verified app IDs
- Snapcraft: per-snap publisher info, verified iff the publisher
  validation is "verified"

Failures never reach the caller. Transport errors, non-success statuses
and malformed payloads are logged as warnings and degrade to "not
verified". There is no retry; a failed page or item is final until the
cache is cleared.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp
import orjson

from pkgverify.constants import (
    FLATHUB_COLLECTION_URL,
    FLATHUB_MAX_PAGES,
    FLATHUB_MAX_PER_PAGE,
    FLATHUB_PER_PAGE,
    FLATHUB_TIMEOUT_SECONDS,
    JSON_ACCEPT_HEADER,
    SNAP_BATCH_SIZE,
    SNAP_DEVICE_SERIES,
    SNAP_DEVICE_SERIES_HEADER,
    SNAP_INFO_URL,
    SNAP_TIMEOUT_SECONDS,
    SNAP_VALIDATION_VERIFIED,
)
from pkgverify.core.verification.cache import VerificationCache
from pkgverify.exceptions import VerificationFetchError
from pkgverify.logger import get_logger

if TYPE_CHECKING:
    from pkgverify.domain.types import GlobalConfig

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s")


def canonical_identifier(package_id: str) -> str:
    """Strip install-mode qualifiers from a package identifier.

    Snap entries may carry a suffix such as "--classic"; the canonical
    identifier is everything before the first whitespace character.

    Args:
        package_id: Identifier as written in a package list

    Returns:
        Canonical identifier used as cache and lookup key

    """
    return _WHITESPACE.split(package_id, maxsplit=1)[0]


def _verified_app_ids(hits: Any) -> set[str]:
    """Collect app IDs of hits flagged as verified.

    Hits missing either field are skipped rather than rejected.
    """
    if not isinstance(hits, list):
        return set()
    return {
        hit["app_id"]
        for hit in hits
        if isinstance(hit, dict)
        and hit.get("verification_verified")
        and isinstance(hit.get("app_id"), str)
        and hit["app_id"]
    }


def _snap_publisher(data: Any) -> dict[str, Any] | None:
    """Extract snap.publisher from a snap info payload.

    Returns None when the payload does not have that shape.
    """
    if not isinstance(data, dict):
        return None
    snap = data.get("snap")
    if not isinstance(snap, dict):
        return None
    publisher = snap.get("publisher")
    if not isinstance(publisher, dict):
        return None
    return publisher


class VerificationClient:
    """Fetches publisher verification data from the remote sources.

    The client owns the verification cache: fetch operations write to it
    and every fetch consults it first.

    Usage:
        async with create_http_session(global_config) as session:
            client = VerificationClient.from_config(session, global_config)
            verified = await client.fetch_bulk_verified_set()
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        cache: VerificationCache | None = None,
        *,
        collection_url: str = FLATHUB_COLLECTION_URL,
        per_page: int = FLATHUB_PER_PAGE,
        max_pages: int = FLATHUB_MAX_PAGES,
        bulk_timeout_seconds: float = FLATHUB_TIMEOUT_SECONDS,
        info_url: str = SNAP_INFO_URL,
        device_series: str = SNAP_DEVICE_SERIES,
        item_timeout_seconds: float = SNAP_TIMEOUT_SECONDS,
        batch_size: int = SNAP_BATCH_SIZE,
    ) -> None:
        """Initialize the verification client.

        Args:
            session: aiohttp session for making requests
            cache: Cache to read and populate (a fresh one if omitted)
            collection_url: Flathub verified collection endpoint
            per_page: Apps requested per page, capped at 250
            max_pages: Hard ceiling on pages fetched
            bulk_timeout_seconds: Timeout for each collection page
            info_url: Snapcraft snap info endpoint
            device_series: Value of the Snap-Device-Series header
            item_timeout_seconds: Timeout for each snap lookup
            batch_size: Concurrent snap lookups per batch

        """
        self.session = session
        self.cache = cache if cache is not None else VerificationCache()
        self.collection_url = collection_url
        self.per_page = max(1, min(per_page, FLATHUB_MAX_PER_PAGE))
        self.max_pages = max(1, max_pages)
        self.bulk_timeout_seconds = bulk_timeout_seconds
        self.info_url = info_url.rstrip("/")
        self.device_series = device_series
        self.item_timeout_seconds = item_timeout_seconds
        self.batch_size = max(1, batch_size)
        self.bulk_fetch_failed = False
        self._bulk_lock = asyncio.Lock()

    @classmethod
    def from_config(
        cls,
        session: aiohttp.ClientSession,
        global_config: GlobalConfig,
        cache: VerificationCache | None = None,
    ) -> VerificationClient:
        """Create a client from loaded settings.

        Args:
            session: aiohttp session for making requests
            global_config: Loaded global configuration
            cache: Optional shared cache

        Returns:
            Configured client

        """
        network = global_config["network"]
        flathub = global_config["flathub"]
        snap = global_config["snap"]
        return cls(
            session,
            cache,
            collection_url=flathub["collection_url"],
            per_page=flathub["per_page"],
            max_pages=flathub["max_pages"],
            bulk_timeout_seconds=network["bulk_timeout_seconds"],
            info_url=snap["info_url"],
            device_series=snap["device_series"],
            item_timeout_seconds=network["item_timeout_seconds"],
            batch_size=snap["batch_size"],
        )

    async def _get_json(
        self,
        url: str,
        *,
        timeout_seconds: float,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET a JSON document.

        Args:
            url: URL to fetch
            timeout_seconds: Total timeout for this request only
            params: Optional query parameters
            headers: Extra headers on top of Accept: application/json

        Returns:
            Decoded JSON payload

        Raises:
            VerificationFetchError: On transport failure, timeout,
                non-success status or undecodable body

        """
        request_headers = {**JSON_ACCEPT_HEADER, **(headers or {})}
        timeout = aiohttp.ClientTimeout(total=timeout_seconds)

        try:
            async with self.session.get(
                url, params=params, headers=request_headers, timeout=timeout
            ) as response:
                if not 200 <= response.status < 300:  # noqa: PLR2004
                    raise VerificationFetchError(
                        f"HTTP {response.status}",
                        target=url,
                        status=response.status,
                    )
                body = await response.read()
        except TimeoutError as e:
            msg = f"Timed out after {timeout_seconds}s"
            raise VerificationFetchError(msg, target=url) from e
        except aiohttp.ClientError as e:
            raise VerificationFetchError(
                str(e) or type(e).__name__, target=url
            ) from e

        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise VerificationFetchError(
                f"Invalid JSON: {e}", target=url
            ) from e

    async def fetch_bulk_verified_set(self) -> frozenset[str]:
        """Fetch all verified Flatpak app IDs from Flathub.

        Single-flight: once the set is populated it is returned without
        I/O, and concurrent callers wait for the one in-flight traversal.
        Pages are requested until the server reports no more pages or the
        page ceiling is reached. Any failure stops pagination and keeps
        whatever was accumulated.

        Returns:
            Verified app IDs (possibly empty)

        """
        populated = self.cache.bulk_verified
        if populated is not None:
            return populated

        async with self._bulk_lock:
            populated = self.cache.bulk_verified
            if populated is not None:
                return populated

            verified = await self._traverse_collection()
            return self.cache.store_bulk(verified)

    async def _traverse_collection(self) -> set[str]:
        """Walk the paginated collection, accumulating verified IDs."""
        verified: set[str] = set()

        for page in range(1, self.max_pages + 1):
            try:
                data = await self._get_json(
                    self.collection_url,
                    timeout_seconds=self.bulk_timeout_seconds,
                    params={"page": str(page), "per_page": str(self.per_page)},
                )
            except VerificationFetchError as e:
                logger.warning(
                    "Flathub verification fetch stopped at page %d: %s",
                    page,
                    e,
                )
                self.bulk_fetch_failed = True
                break

            if not isinstance(data, dict):
                logger.warning(
                    "Unexpected Flathub payload on page %d: %s",
                    page,
                    type(data).__name__,
                )
                self.bulk_fetch_failed = True
                break

            hits = data.get("hits")
            if hits is not None and not isinstance(hits, list):
                logger.warning(
                    "Unexpected Flathub hits on page %d: %s",
                    page,
                    type(hits).__name__,
                )
                self.bulk_fetch_failed = True
                break

            verified.update(_verified_app_ids(hits))

            total_pages = data.get("totalPages")
            if not isinstance(total_pages, int) or page >= total_pages:
                break
            if page == self.max_pages:
                logger.warning(
                    "Flathub reports %d pages, stopping after %d",
                    total_pages,
                    self.max_pages,
                )

        logger.debug("Collected %d verified Flathub apps", len(verified))
        return verified

    async def fetch_per_item_verification(self, package_id: str) -> bool:
        """Fetch verification status for a single snap.

        Args:
            package_id: Snap name, optionally with a qualifier such as
                "code --classic"

        Returns:
            True if the publisher validation is "verified"

        """
        name = canonical_identifier(package_id)
        cached = self.cache.get_per_item(name)
        if cached is not None:
            return cached
        if not name:
            return False

        url = f"{self.info_url}/{quote(name, safe='')}"
        try:
            data = await self._get_json(
                url,
                timeout_seconds=self.item_timeout_seconds,
                headers={SNAP_DEVICE_SERIES_HEADER: self.device_series},
            )
        except VerificationFetchError as e:
            logger.warning(
                "Failed to fetch Snap verification for %s: %s", name, e
            )
            verified = False
        else:
            publisher = _snap_publisher(data)
            if publisher is None:
                logger.warning(
                    "Unexpected Snap info payload for %s: %s",
                    name,
                    type(data).__name__,
                )
                verified = False
            else:
                validation = publisher.get("validation")
                if validation is None:
                    logger.debug("No publisher validation for snap %s", name)
                verified = validation == SNAP_VALIDATION_VERIFIED

        self.cache.store_per_item(name, verified)
        return verified

    async def fetch_many_per_item(
        self, package_ids: Iterable[str]
    ) -> dict[str, bool]:
        """Fetch verification status for many snaps.

        Identifiers are reduced to distinct canonical names, which are
        split into batches; batches run one after another while lookups
        inside a batch run concurrently, so at most batch_size requests
        are outstanding.

        Args:
            package_ids: Snap identifiers, duplicates allowed

        Returns:
            Mapping of every distinct input identifier to its status

        """
        unique_ids = list(dict.fromkeys(package_ids))
        names = list(dict.fromkeys(map(canonical_identifier, unique_ids)))
        verdicts: dict[str, bool] = {}

        for start in range(0, len(names), self.batch_size):
            batch = names[start : start + self.batch_size]
            verdicts.update(await self._fetch_batch(batch))

        return {
            pkg: verdicts[canonical_identifier(pkg)] for pkg in unique_ids
        }

    async def _fetch_batch(self, batch: list[str]) -> dict[str, bool]:
        verdicts = await asyncio.gather(
            *(self.fetch_per_item_verification(pkg) for pkg in batch)
        )
        return dict(zip(batch, verdicts, strict=True))

    def reset(self) -> None:
        """Clear cached results and the bulk failure flag."""
        self.cache.clear()
        self.bulk_fetch_failed = False
