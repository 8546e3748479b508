"""Top-level package for pkgverify.

Publisher verification lookups for Flatpak and Snap packages.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pkgverify")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
