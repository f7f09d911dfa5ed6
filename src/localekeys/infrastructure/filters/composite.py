"""Module filter combinators.

Example:
    all_of(include_packages("myapp"), negate(include_modules("*.tests.*")))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import ModuleType

    from localekeys.infrastructure.filters.types import ModuleFilter


def all_of(*filters: ModuleFilter) -> ModuleFilter:
    """Scan a module only if every filter accepts it.

    Args:
        *filters: Module filters, evaluated left to right (short-circuit).

    Returns:
        Combined filter. No filters = accept every module.
    """

    def _accepts(module: ModuleType) -> bool:
        return all(flt(module) for flt in filters)

    return _accepts


def any_of(*filters: ModuleFilter) -> ModuleFilter:
    """Scan a module if at least one filter accepts it.

    Args:
        *filters: Module filters, evaluated left to right (short-circuit).

    Returns:
        Combined filter. No filters = reject every module.
    """

    def _accepts(module: ModuleType) -> bool:
        return any(flt(module) for flt in filters)

    return _accepts


def negate(flt: ModuleFilter) -> ModuleFilter:
    """Scan exactly the modules flt rejects."""

    def _accepts(module: ModuleType) -> bool:
        return not flt(module)

    return _accepts
