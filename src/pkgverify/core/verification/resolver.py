"""Verification resolver: the query interface used by presentation code.

Composes the static trust table, the verification cache and the remote
client into two synchronous queries and a loading/error status:

    resolver = VerificationResolver(client)
    status = await resolver.start()
    resolver.is_verified("flatpak", "org.mozilla.firefox")
    resolver.get_verification_source("snap", "code --classic")

The resolver loads exactly once: IDLE -> LOADING -> READY | DEGRADED.
Queries never block and answer False/None until the relevant source has
loaded.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass

from pkgverify.core.verification.cache import VerificationCache
from pkgverify.core.verification.client import (
    VerificationClient,
    canonical_identifier,
)
from pkgverify.core.verification.trust_table import StaticTrustTable
from pkgverify.domain.types import Distro, ResolverState, VerificationSource
from pkgverify.exceptions import InvalidStateTransitionError
from pkgverify.logger import get_logger

logger = get_logger(__name__)

_ALLOWED_TRANSITIONS: dict[ResolverState, frozenset[ResolverState]] = {
    ResolverState.IDLE: frozenset({ResolverState.LOADING}),
    ResolverState.LOADING: frozenset(
        {ResolverState.READY, ResolverState.DEGRADED}
    ),
    ResolverState.READY: frozenset(),
    ResolverState.DEGRADED: frozenset(),
}


@dataclass(frozen=True)
class VerificationStatus:
    """Loading/error status exposed to consumers."""

    is_loading: bool
    has_error: bool


class VerificationResolver:
    """Answers "is this package from a verified publisher?".

    Attributes:
        client: Remote client; its cache backs the queries
        trust_table: Static snap allowlist
        flathub_loaded: Flathub data has settled (success or failure)
        snap_loaded: Snap data is available
        has_error: The Flathub fetch failed at least partially

    """

    def __init__(
        self,
        client: VerificationClient,
        trust_table: StaticTrustTable | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            client: Verification client, constructed once per process
            trust_table: Snap allowlist (the built-in table if omitted)

        """
        self.client = client
        self.trust_table = (
            trust_table if trust_table is not None else StaticTrustTable()
        )
        self.flathub_loaded = False
        self.snap_loaded = False
        self.has_error = False
        self._state = ResolverState.IDLE
        self._load_task: asyncio.Task[VerificationStatus] | None = None

    @property
    def state(self) -> ResolverState:
        return self._state

    @property
    def cache(self) -> VerificationCache:
        return self.client.cache

    @property
    def is_loading(self) -> bool:
        """True until both sources have settled."""
        return not (self.flathub_loaded and self.snap_loaded)

    @property
    def status(self) -> VerificationStatus:
        return VerificationStatus(
            is_loading=self.is_loading, has_error=self.has_error
        )

    def _transition(self, target: ResolverState) -> None:
        """Move to a new state.

        Raises:
            InvalidStateTransitionError: If the move is not allowed

        """
        if target not in _ALLOWED_TRANSITIONS[self._state]:
            raise InvalidStateTransitionError(
                f"{self._state} -> {target}", target=target.value
            )
        logger.debug("Resolver state %s -> %s", self._state, target)
        self._state = target

    async def start(self) -> VerificationStatus:
        """Load verification data once.

        The first call starts the load task. Concurrent and later calls
        await the same task, so the load never runs twice. Cancelling a
        caller does not cancel the shared load.

        Returns:
            Status after loading settled

        """
        if self._load_task is None:
            self._transition(ResolverState.LOADING)
            self._load_task = asyncio.create_task(self._load())
        return await asyncio.shield(self._load_task)

    async def _load(self) -> VerificationStatus:
        try:
            verified = await self.client.fetch_bulk_verified_set()
            has_error = self.client.bulk_fetch_failed
        except Exception:
            logger.exception("Unexpected error loading verification data")
            verified = frozenset()
            has_error = True

        self.flathub_loaded = True
        # Snap trust comes from the static table, nothing to fetch
        self.snap_loaded = True
        self.has_error = has_error

        if has_error:
            self._transition(ResolverState.DEGRADED)
            logger.warning(
                "Flathub verification data incomplete, %d apps known",
                len(verified),
            )
        else:
            self._transition(ResolverState.READY)
            logger.info("Loaded %d verified Flathub apps", len(verified))

        return self.status

    async def enrich_snaps(
        self, package_ids: Iterable[str]
    ) -> dict[str, bool]:
        """Look up snaps remotely to extend the static table.

        Best effort: results land in the cache and are used by later
        queries; failures simply leave the table answer in place.
        """
        return await self.client.fetch_many_per_item(package_ids)

    def _is_snap_verified(self, package_id: str) -> bool:
        name = canonical_identifier(package_id)
        if self.trust_table.contains(name):
            return True
        return self.cache.get_per_item(name) is True

    def get_verification_source(
        self, distro: Distro | str, package_id: str
    ) -> VerificationSource | None:
        """Get the verification source for badge styling.

        Args:
            distro: "flatpak" or "snap"; other values answer None
            package_id: Package identifier

        Returns:
            Source tag if the package is verified, otherwise None

        """
        try:
            distro = Distro(distro)
        except ValueError:
            return None

        if distro is Distro.FLATPAK:
            if self.flathub_loaded and self.cache.is_bulk_verified(
                package_id
            ):
                return VerificationSource.FLATHUB
            return None

        if self.snap_loaded and self._is_snap_verified(package_id):
            return VerificationSource.SNAP
        return None

    def is_verified(self, distro: Distro | str, package_id: str) -> bool:
        """Check if a package comes from a verified publisher."""
        return self.get_verification_source(distro, package_id) is not None

    def reset(self) -> None:
        """Drop cached data and return to IDLE for a fresh load.

        Raises:
            InvalidStateTransitionError: If a load is in progress

        """
        if self._state is ResolverState.LOADING:
            raise InvalidStateTransitionError(
                "cannot reset while loading", target=self._state.value
            )
        self.client.reset()
        self.flathub_loaded = False
        self.snap_loaded = False
        self.has_error = False
        self._load_task = None
        self._state = ResolverState.IDLE
