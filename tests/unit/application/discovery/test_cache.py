"""Tests for discovery/cache.py."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from localekeys.application.discovery.cache import DiscoveryCache


class TestDiscoveryCache:
    """Tests for DiscoveryCache."""

    def test_lookup_unknown_is_empty(self) -> None:
        """Never-scanned class yields empty tuple."""
        cache = DiscoveryCache()

        assert cache.lookup("myapp.Unknown") == ()
        assert "myapp.Unknown" not in cache

    def test_store_and_lookup(self) -> None:
        """Stored names come back in order."""
        cache = DiscoveryCache()

        cache.store("myapp.Model", ["a", "b"])

        assert cache.lookup("myapp.Model") == ("a", "b")
        assert "myapp.Model" in cache
        assert len(cache) == 1

    def test_store_overwrites(self) -> None:
        """Re-store replaces, never merges."""
        cache = DiscoveryCache()
        cache.store("myapp.Model", ["a", "b"])

        cache.store("myapp.Model", ["c"])

        assert cache.lookup("myapp.Model") == ("c",)

    def test_clear(self) -> None:
        """clear() removes every entry."""
        cache = DiscoveryCache()
        cache.store("myapp.A", ["a"])
        cache.store("myapp.B", ["b"])

        cache.clear()

        assert len(cache) == 0

    def test_snapshot_is_read_only_copy(self) -> None:
        """Snapshot does not follow later writes and cannot be mutated."""
        cache = DiscoveryCache()
        cache.store("myapp.A", ["a"])

        snapshot = cache.snapshot()
        cache.store("myapp.B", ["b"])

        assert dict(snapshot) == {"myapp.A": ("a",)}
        with pytest.raises(TypeError):
            snapshot["myapp.C"] = ("c",)  # type: ignore[index]

    def test_empty_type_name_raises(self) -> None:
        """Empty type name is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            DiscoveryCache().store("", ["a"])

    def test_concurrent_stores(self) -> None:
        """Concurrent writers to distinct keys all land."""
        cache = DiscoveryCache()

        def worker(i: int) -> None:
            for j in range(50):
                cache.store(f"myapp.T{i}", [f"m{j}"])

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(worker, range(16)))

        assert len(cache) == 16
        assert all(cache.lookup(f"myapp.T{i}") == ("m49",) for i in range(16))
