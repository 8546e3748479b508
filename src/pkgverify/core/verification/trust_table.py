"""Static allowlist of snaps published by verified publishers.

The Snapcraft API does not serve browser clients, so trust for snaps comes
from this compiled-in table rather than a bulk fetch. The table was built
from publisher info lookups; to check an entry:

    curl -s "https://api.snapcraft.io/v2/snaps/info/<name>" \\
        -H "Snap-Device-Series: 16" | jq '.snap.publisher'

and look for "validation": "verified".
"""

from collections.abc import Iterable
from typing import Final


def matches_table(identifier: str, entries: frozenset[str]) -> bool:
    """Check an identifier against a table by equality or containment.

    An identifier matches when it equals an entry or contains an entry as a
    substring, which covers namespaced identifiers such as
    "jetbrains.idea-ultimate". This is an over-approximation: "golang-go"
    matches an entry "go".

    Args:
        identifier: Package identifier to check
        entries: Table entries

    Returns:
        True if the identifier matches any entry

    """
    if identifier in entries:
        return True
    return any(entry in identifier for entry in entries)


KNOWN_VERIFIED_SNAP_PACKAGES: Final[frozenset[str]] = frozenset(
    {
        # Mozilla
        "firefox",
        "thunderbird",
        # Canonical
        "chromium",
        "vlc",
        # Brave Software
        "brave",
        # Spotify
        "spotify",
        # Microsoft (VS Code)
        "code",
        # JetBrains
        "intellij-idea-community",
        "intellij-idea-ultimate",
        "pycharm-community",
        "pycharm-professional",
        "slack",
        "discord",
        "signal-desktop",
        "telegram-desktop",
        "zoom-client",
        "obsidian",
        "bitwarden",
        "blender",
        "gimp",
        "inkscape",
        "krita",
        "libreoffice",
        "obs-studio",
        "node",
        "go",
        "rustup",
        "ruby",
        "cmake",
        "docker",
        "kubectl",
        "steam",
        "retroarch",
        "vivaldi",
    }
)


class StaticTrustTable:
    """Immutable set of identifiers known to come from verified publishers."""

    def __init__(
        self, entries: Iterable[str] = KNOWN_VERIFIED_SNAP_PACKAGES
    ) -> None:
        self._entries = frozenset(entries)

    @property
    def entries(self) -> frozenset[str]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def contains(self, identifier: str) -> bool:
        """Check whether an identifier is covered by the table."""
        if not identifier:
            return False
        return matches_table(identifier, self._entries)
