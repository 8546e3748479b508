"""Tests for VerificationCache."""

from pkgverify.core.verification.cache import VerificationCache


class TestBulkSet:
    """Tests for the bulk verified set."""

    def test_starts_unpopulated(self) -> None:
        cache = VerificationCache()

        assert cache.bulk_verified is None
        assert cache.is_bulk_populated is False
        assert cache.is_bulk_verified("org.mozilla.firefox") is False

    def test_store_bulk_populates(self) -> None:
        cache = VerificationCache()

        stored = cache.store_bulk(["org.mozilla.firefox"])

        assert stored == frozenset({"org.mozilla.firefox"})
        assert cache.is_bulk_populated is True
        assert cache.is_bulk_verified("org.mozilla.firefox") is True
        assert cache.is_bulk_verified("org.gnome.Maps") is False

    def test_empty_set_counts_as_populated(self) -> None:
        """A failed fetch leaves an empty but populated set."""
        cache = VerificationCache()

        cache.store_bulk([])

        assert cache.is_bulk_populated is True
        assert cache.bulk_verified == frozenset()

    def test_first_write_wins(self) -> None:
        cache = VerificationCache()
        first = cache.store_bulk(["a.b.C"])

        second = cache.store_bulk(["x.y.Z"])

        assert second is first
        assert cache.is_bulk_verified("x.y.Z") is False


class TestPerItem:
    """Tests for per-item results."""

    def test_missing_entry_is_none(self) -> None:
        assert VerificationCache().get_per_item("firefox") is None

    def test_store_and_overwrite(self) -> None:
        cache = VerificationCache()

        cache.store_per_item("firefox", False)
        cache.store_per_item("firefox", True)

        assert cache.get_per_item("firefox") is True

    def test_snapshot_is_a_copy(self) -> None:
        cache = VerificationCache()
        cache.store_per_item("vlc", True)

        snapshot = cache.per_item_snapshot()
        snapshot["vlc"] = False

        assert cache.get_per_item("vlc") is True


class TestClear:
    def test_clear_drops_everything(self) -> None:
        cache = VerificationCache()
        cache.store_bulk(["org.mozilla.firefox"])
        cache.store_per_item("vlc", True)

        cache.clear()

        assert cache.is_bulk_populated is False
        assert cache.get_per_item("vlc") is None

    def test_bulk_can_be_repopulated_after_clear(self) -> None:
        cache = VerificationCache()
        cache.store_bulk(["old.App"])
        cache.clear()

        cache.store_bulk(["new.App"])

        assert cache.is_bulk_verified("new.App") is True
        assert cache.is_bulk_verified("old.App") is False
