"""Domain types for verification lookups and configuration.

Pure types with no IO: the enums used by the query interface, the
TypedDicts describing the remote payloads, and the typed settings.
"""

from enum import StrEnum
from typing import TypedDict


class Distro(StrEnum):
    """Package source a query is made against."""

    FLATPAK = "flatpak"
    SNAP = "snap"


class VerificationSource(StrEnum):
    """Attribution tag for a verified package, used for badge styling."""

    FLATHUB = "flathub"
    SNAP = "snap"


class ResolverState(StrEnum):
    """Lifecycle of a verification resolver.

    IDLE -> LOADING -> READY | DEGRADED
    """

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    DEGRADED = "degraded"


# Remote payloads. Every field is optional on the wire; absence means
# "not verified" for that hit.


class FlathubHit(TypedDict, total=False):
    """Single app entry in a Flathub verified collection page."""

    app_id: str
    verification_verified: bool
    verification_method: str
    verification_website: str


class FlathubCollectionPage(TypedDict, total=False):
    """Page returned by the Flathub verified collection endpoint."""

    hits: list[FlathubHit]
    totalHits: int  # noqa: N815
    totalPages: int  # noqa: N815


class SnapPublisher(TypedDict, total=False):
    """Publisher block of a snap info response."""

    validation: str  # "verified" | "unproven" | "starred"
    username: str


class SnapDetails(TypedDict, total=False):
    """Snap block of a snap info response."""

    publisher: SnapPublisher


class SnapInfoResponse(TypedDict, total=False):
    """Response of the Snapcraft snap info endpoint."""

    snap: SnapDetails


# Settings


class NetworkConfig(TypedDict):
    """Network configuration."""

    bulk_timeout_seconds: int
    item_timeout_seconds: int
    max_connections: int


class FlathubConfig(TypedDict):
    """Flathub collection endpoint configuration."""

    collection_url: str
    per_page: int
    max_pages: int


class SnapConfig(TypedDict):
    """Snapcraft info endpoint configuration."""

    info_url: str
    device_series: str
    batch_size: int


class GlobalConfig(TypedDict):
    """Global configuration."""

    config_version: str
    log_level: str
    console_log_level: str
    network: NetworkConfig
    flathub: FlathubConfig
    snap: SnapConfig
