"""pytest plugin for localekeys.

Provides fixtures for localization tests:
    localekeys_config: Discovery configuration (override in conftest.py)
    localekeys_cache: Fresh, isolated discovery cache
    localekeys_catalog: Session-wide catalog of discovered resources

Enable in conftest.py:
    pytest_plugins = ["localekeys.presentation.pytest_plugin"]

Configuration (pytest.ini or pyproject.toml):
    localekeys_packages: Packages imported before scanning (one per line)
    localekeys_max_depth: Max recursion depth into nested members
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from localekeys.presentation.pytest_plugin.fixtures import (
    localekeys_cache,
    localekeys_catalog,
    localekeys_config,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "localekeys_cache",
    "localekeys_catalog",
    "localekeys_config",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "localekeys_packages",
        type="linelist",
        help="packages imported before scanning for localizable classes",
        default=[],
    )
    parser.addini(
        "localekeys_max_depth",
        type="string",
        help="max recursion depth into nested members",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "localization: mark test as localization resource test",
    )
