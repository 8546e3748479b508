"""Domain types for pkgverify."""
