"""Shared pytest configuration."""

import pytest

from localekeys import DiscoveryConfig
from localekeys.infrastructure.filters.module import include_packages

pytest_plugins = ["localekeys.presentation.pytest_plugin", "pytester"]


@pytest.fixture(scope="session")
def localekeys_config() -> DiscoveryConfig:
    """Sweep only the valid sample classes."""
    return DiscoveryConfig(module_filter=include_packages("tests.samples"))
