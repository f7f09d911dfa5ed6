"""Tests for domain/model/configuration.py."""

import pytest

from localekeys.domain.model.configuration import DiscoveryConfig


class TestDiscoveryConfig:
    """Tests for DiscoveryConfig."""

    def test_defaults(self) -> None:
        """Default config scans everything sequentially, unbounded."""
        config = DiscoveryConfig()

        assert config.packages == ()
        assert config.module_filter is None
        assert config.max_depth is None
        assert not config.is_concurrent

    def test_string_packages_raises(self) -> None:
        """A bare string is not a package tuple."""
        with pytest.raises(TypeError, match="packages"):
            DiscoveryConfig(packages="myapp")  # type: ignore[arg-type]

    def test_empty_package_raises(self) -> None:
        """Empty package names are rejected."""
        with pytest.raises(ValueError, match="empty names"):
            DiscoveryConfig(packages=("myapp", ""))

    @pytest.mark.parametrize("depth", [0, -1])
    def test_max_depth_below_one_raises(self, depth: int) -> None:
        """max_depth must be >= 1."""
        with pytest.raises(ValueError, match="max_depth"):
            DiscoveryConfig(max_depth=depth)

    def test_max_workers_below_one_raises(self) -> None:
        """max_workers must be >= 1."""
        with pytest.raises(ValueError, match="max_workers"):
            DiscoveryConfig(max_workers=0)

    @pytest.mark.parametrize(("workers", "expected"), [(None, False), (1, False), (4, True)])
    def test_is_concurrent(self, workers: int | None, expected: bool) -> None:
        """Only more than one worker runs in parallel."""
        assert DiscoveryConfig(max_workers=workers).is_concurrent is expected
