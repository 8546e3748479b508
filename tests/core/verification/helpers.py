"""Payload and URL builders for verification tests."""

import re
from typing import Any

from aioresponses import aioresponses

from pkgverify.constants import FLATHUB_COLLECTION_URL, SNAP_INFO_URL

FLATHUB_PAGE_PATTERN = re.compile(
    r"^https://flathub\.org/api/v2/collection/verified\?.*$"
)


def flathub_page_url(page: int, per_page: int = 250) -> str:
    """Build the collection URL for a page."""
    return f"{FLATHUB_COLLECTION_URL}?page={page}&per_page={per_page}"


def snap_info_url(name: str) -> str:
    return f"{SNAP_INFO_URL}/{name}"


def flathub_page(
    verified: list[str],
    unverified: list[str] | None = None,
    total_pages: int = 1,
) -> dict[str, Any]:
    """Build a Flathub collection page payload."""
    hits = [
        {"app_id": app_id, "verification_verified": True}
        for app_id in verified
    ]
    hits += [
        {"app_id": app_id, "verification_verified": False}
        for app_id in unverified or []
    ]
    return {"hits": hits, "totalHits": len(hits), "totalPages": total_pages}


def snap_info(validation: str | None) -> dict[str, Any]:
    """Build a snap info payload with the given publisher validation."""
    publisher: dict[str, Any] = {"username": "someone"}
    if validation is not None:
        publisher["validation"] = validation
    return {"snap": {"publisher": publisher}}


def request_count(mocked: aioresponses) -> int:
    """Total number of requests seen by an aioresponses mock."""
    return sum(len(calls) for calls in mocked.requests.values())
