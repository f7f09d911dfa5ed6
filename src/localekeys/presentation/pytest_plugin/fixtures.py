"""pytest fixtures for localization resource tests.

User overrides localekeys_config in their conftest.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from localekeys.application.discovery.cache import DiscoveryCache, default_cache
from localekeys.domain.model.configuration import DiscoveryConfig
from localekeys.presentation.api.catalog import ResourceCatalog

if TYPE_CHECKING:
    from collections.abc import Iterator


def _get_ini_lines(config: pytest.Config, name: str) -> tuple[str, ...]:
    """Get linelist ini value, empty entries dropped."""
    return tuple(line.strip() for line in config.getini(name) if line.strip())


def _get_ini_int(config: pytest.Config, name: str) -> int | None:
    """Get int ini value, None if not set."""
    value = config.getini(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise pytest.UsageError(f"{name} must be an integer, got {value!r}") from e


@pytest.fixture(scope="session")
def localekeys_config(request: pytest.FixtureRequest) -> DiscoveryConfig:
    """Discovery configuration from pytest ini options.

    Reads localekeys_packages and localekeys_max_depth.
    User overrides this fixture in conftest.py for custom filters.

    Returns:
        DiscoveryConfig
    """
    return DiscoveryConfig(
        packages=_get_ini_lines(request.config, "localekeys_packages"),
        max_depth=_get_ini_int(request.config, "localekeys_max_depth"),
    )


@pytest.fixture
def localekeys_cache() -> Iterator[DiscoveryCache]:
    """Fresh discovery cache isolated to one test.

    Also clears the shared default cache afterwards, so entries written
    by discovery calls without an explicit cache do not leak.

    Yields:
        Empty DiscoveryCache
    """
    cache = DiscoveryCache()
    yield cache
    cache.clear()
    default_cache.clear()


@pytest.fixture(scope="session")
def localekeys_catalog(localekeys_config: DiscoveryConfig) -> ResourceCatalog:
    """Catalog of every resource container and model in configured packages.

    Discovery runs once per session with a private cache.

    Returns:
        ResourceCatalog
    """
    return ResourceCatalog.from_config(localekeys_config, cache=DiscoveryCache())
