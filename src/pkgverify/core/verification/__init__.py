"""Publisher verification for Flatpak and Snap packages."""

from pkgverify.core.verification.cache import VerificationCache
from pkgverify.core.verification.client import (
    VerificationClient,
    canonical_identifier,
)
from pkgverify.core.verification.resolver import (
    VerificationResolver,
    VerificationStatus,
)
from pkgverify.core.verification.trust_table import (
    KNOWN_VERIFIED_SNAP_PACKAGES,
    StaticTrustTable,
    matches_table,
)

__all__ = [
    "KNOWN_VERIFIED_SNAP_PACKAGES",
    "StaticTrustTable",
    "VerificationCache",
    "VerificationClient",
    "VerificationResolver",
    "VerificationStatus",
    "canonical_identifier",
    "matches_table",
]
