"""Nix unfree package detection.

Packages in this table need `allowUnfree = true` in a Nix configuration.
Matching uses the same equality-or-containment rule as the snap trust
table, so nested attributes like "jetbrains.idea-ultimate" are caught.
"""

from typing import Final

from pkgverify.core.verification.trust_table import matches_table

KNOWN_UNFREE_PACKAGES: Final[frozenset[str]] = frozenset(
    {
        "discord",
        "slack",
        "zoom-us",
        "teams",
        "skypeforlinux",
        "google-chrome",
        "vivaldi",
        "opera",
        "spotify",
        "steam",
        "heroic",
        "vscode",
        "sublime4",
        "jetbrains.idea-ultimate",
        "jetbrains.webstorm",
        "jetbrains.pycharm-professional",
        "nvidia-x11",
        "dropbox",
        "1password",
        "masterpdfeditor",
    }
)


def is_unfree_package(package: str) -> bool:
    """Check whether a Nix package needs allowUnfree.

    Args:
        package: Nix attribute name, any case

    Returns:
        True if the package is known to be unfree

    """
    clean = package.strip().lower()
    if not clean:
        return False
    return matches_table(clean, KNOWN_UNFREE_PACKAGES)


def find_unfree_packages(packages: list[str]) -> list[str]:
    """Return the unfree packages of a selection, in input order."""
    return [pkg for pkg in packages if is_unfree_package(pkg)]
