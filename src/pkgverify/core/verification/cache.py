"""In-memory verification cache.

Process-lifetime memoization of verification results:

- the Flathub bulk verified set, unpopulated until the first bulk fetch
  settles and immutable afterwards
- per-snap results keyed by canonical identifier

Nothing is persisted. clear() is the only way to drop entries.
"""

from __future__ import annotations

from collections.abc import Iterable

from pkgverify.logger import get_logger

logger = get_logger(__name__)


class VerificationCache:
    """Memoization store for both verification sources.

    Writes come only from the verification client; reads are plain
    dictionary and set lookups and never block.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._bulk_verified: frozenset[str] | None = None
        self._per_item: dict[str, bool] = {}

    @property
    def bulk_verified(self) -> frozenset[str] | None:
        """Bulk verified set, or None while unpopulated."""
        return self._bulk_verified

    @property
    def is_bulk_populated(self) -> bool:
        return self._bulk_verified is not None

    def store_bulk(self, identifiers: Iterable[str]) -> frozenset[str]:
        """Populate the bulk verified set.

        The first write wins; later writes return the existing set
        unchanged.

        Args:
            identifiers: Verified identifiers collected by a bulk fetch

        Returns:
            The populated set

        """
        if self._bulk_verified is None:
            self._bulk_verified = frozenset(identifiers)
            logger.debug(
                "Stored %d bulk verified identifiers",
                len(self._bulk_verified),
            )
        return self._bulk_verified

    def is_bulk_verified(self, identifier: str) -> bool:
        """Check the bulk set; an unpopulated set answers False."""
        if self._bulk_verified is None:
            return False
        return identifier in self._bulk_verified

    def get_per_item(self, identifier: str) -> bool | None:
        """Get a cached per-item result, None if never fetched."""
        return self._per_item.get(identifier)

    def store_per_item(self, identifier: str, verified: bool) -> None:  # noqa: FBT001
        self._per_item[identifier] = verified

    def per_item_snapshot(self) -> dict[str, bool]:
        """Return a copy of the per-item results."""
        return dict(self._per_item)

    def clear(self) -> None:
        """Drop every cached result."""
        self._bulk_verified = None
        self._per_item.clear()
        logger.debug("Verification cache cleared")
