"""Module name filters.

Filter modules by dotted name. A package name also matches its
submodules; glob patterns use fnmatch.
"""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import ModuleType

    from localekeys.infrastructure.filters.types import ModuleFilter


def include_packages(*packages: str) -> ModuleFilter:
    """Create filter that includes packages and their submodules.

    Args:
        *packages: Package names (e.g., "myapp", "myapp.views").

    Returns:
        Filter that returns True for the packages and everything below.
    """

    def _filter(module: ModuleType) -> bool:
        return any(_in_package(module.__name__, p) for p in packages)

    return _filter


def exclude_packages(*packages: str) -> ModuleFilter:
    """Create filter that excludes packages and their submodules.

    Args:
        *packages: Package names to exclude (e.g., "tests").

    Returns:
        Filter that returns False for the packages and everything below.
    """

    def _filter(module: ModuleType) -> bool:
        return not any(_in_package(module.__name__, p) for p in packages)

    return _filter


def include_modules(*patterns: str) -> ModuleFilter:
    """Create filter that includes modules matching any glob pattern.

    Args:
        *patterns: Glob patterns (e.g., "myapp.*.resources").

    Returns:
        Filter that returns True for modules matching any pattern.
    """

    def _filter(module: ModuleType) -> bool:
        return any(fnmatch.fnmatchcase(module.__name__, p) for p in patterns)

    return _filter


def _in_package(name: str, package: str) -> bool:
    return name == package or name.startswith(f"{package}.")
