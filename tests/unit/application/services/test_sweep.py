"""Tests for services/sweep.py."""

import logging

import pytest

from localekeys.application.discovery.cache import DiscoveryCache
from localekeys.application.services.sweep import ScanRoots, discover_all, find_scan_roots
from localekeys.domain.model.configuration import DiscoveryConfig
from localekeys.infrastructure.filters.module import include_packages
from localekeys.infrastructure.reflection import type_full_name
from tests import samples


@pytest.fixture
def samples_config() -> DiscoveryConfig:
    """Sweep restricted to tests/samples.py."""
    return DiscoveryConfig(module_filter=include_packages(samples.__name__))


class TestScanRoots:
    """Tests for ScanRoots."""

    def test_count(self) -> None:
        """Count sums containers and models."""
        roots = ScanRoots(resources=(int,), models=(str, bytes))

        assert roots.count == 3


class TestFindScanRoots:
    """Tests for find_scan_roots function."""

    def test_finds_containers_and_models(self, samples_config: DiscoveryConfig) -> None:
        """Both markers are collected separately."""
        roots = find_scan_roots(samples_config)

        assert set(roots.resources) == {samples.CommonResources, samples.ErrorResources, samples.UiResources}
        assert samples.CustomerModel in roots.models
        assert samples.AuditInfo not in roots.models
        assert samples.ButtonTexts not in roots.resources

    def test_sorted_by_full_name(self, samples_config: DiscoveryConfig) -> None:
        """Roots are ordered for stable output."""
        roots = find_scan_roots(samples_config)

        names = [type_full_name(cls) for cls in roots.models]
        assert names == sorted(names)

    def test_imports_configured_packages(self) -> None:
        """Configured packages are imported before scanning."""
        config = DiscoveryConfig(packages=("json",), module_filter=include_packages("json"))

        roots = find_scan_roots(config)

        assert roots.count == 0


class TestDiscoverAll:
    """Tests for discover_all function."""

    def test_containers_before_models(
        self,
        samples_config: DiscoveryConfig,
        localekeys_cache: DiscoveryCache,
    ) -> None:
        """Container resources come first."""
        result = discover_all(samples_config, cache=localekeys_cache)

        containers = (samples.CommonResources, samples.ErrorResources, samples.UiResources, samples.ButtonTexts)
        kinds = [r.declaring_type in containers for r in result]
        first_model = kinds.index(False)
        assert all(kinds[:first_model])
        assert not any(kinds[first_model:])

    def test_models_use_model_mode(
        self,
        samples_config: DiscoveryConfig,
        localekeys_cache: DiscoveryCache,
    ) -> None:
        """Model roots do not descend into plain domain types."""
        prefix = type_full_name(samples.CustomerModel)

        keys = {r.key for r in discover_all(samples_config, cache=localekeys_cache)}

        assert f"{prefix}.address.street" in keys
        assert not any(k.startswith(f"{prefix}.audit") for k in keys)
        assert "Errors.NotFound" in keys

    def test_concurrent_matches_sequential(
        self,
        samples_config: DiscoveryConfig,
        localekeys_cache: DiscoveryCache,
    ) -> None:
        """Thread pool output equals sequential output, order included."""
        concurrent = DiscoveryConfig(module_filter=samples_config.module_filter, max_workers=4)

        sequential_result = discover_all(samples_config, cache=localekeys_cache)
        concurrent_result = discover_all(concurrent, cache=localekeys_cache)

        assert [(r.key, r.value) for r in concurrent_result] == [(r.key, r.value) for r in sequential_result]

    def test_max_depth_applied(self, localekeys_cache: DiscoveryCache) -> None:
        """max_depth limits nesting below each root."""
        config = DiscoveryConfig(module_filter=include_packages(samples.__name__), max_depth=1)
        prefix = type_full_name(samples.OrderModel)

        keys = {r.key for r in discover_all(config, cache=localekeys_cache)}

        assert f"{prefix}.lines.product" in keys

    def test_fills_cache(self, samples_config: DiscoveryConfig, localekeys_cache: DiscoveryCache) -> None:
        """Every visited class is cached."""
        discover_all(samples_config, cache=localekeys_cache)

        assert type_full_name(samples.ButtonTexts) in localekeys_cache
        assert localekeys_cache.lookup(type_full_name(samples.AddressModel)) == ("street", "city", "city")

    def test_logs_summary(
        self,
        samples_config: DiscoveryConfig,
        localekeys_cache: DiscoveryCache,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Sweep logs one INFO summary."""
        with caplog.at_level(logging.INFO, logger="localekeys.application.services.sweep"):
            discover_all(samples_config, cache=localekeys_cache)

        assert "3 containers" in caplog.text
