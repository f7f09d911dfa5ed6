"""Infrastructure layer: stateless module filter functions.

Filters are pure functions: ModuleFilter = Callable[[ModuleType], bool]
True = scan module, False = skip module.

Usage:
    from localekeys.infrastructure.filters import all_of, exclude_packages, include_packages

    flt = all_of(include_packages("myapp"), exclude_packages("myapp.tests"))
"""

from localekeys.infrastructure.filters.composite import all_of, any_of, negate
from localekeys.infrastructure.filters.module import (
    exclude_packages,
    include_modules,
    include_packages,
)
from localekeys.infrastructure.filters.types import ModuleFilter

__all__ = [
    "ModuleFilter",
    "all_of",
    "any_of",
    "exclude_packages",
    "include_modules",
    "include_packages",
    "negate",
]
