"""Core verification services for pkgverify."""
