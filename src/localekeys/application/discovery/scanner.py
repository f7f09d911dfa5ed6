"""Type scanning over loaded modules.

Finds scan roots: classes marked LocalizedResource / LocalizedModel,
or subclasses of a marker base class. One pass over modules evaluates
every predicate. A module that fails to enumerate contributes nothing.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import sys
from typing import TYPE_CHECKING

from localekeys.domain.predicates.type_predicates import has_annotation, is_child_of
from localekeys.infrastructure.reflection import iter_module_types

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import ModuleType

    from localekeys.domain.predicates.base import TypePredicate
    from localekeys.infrastructure.filters.types import ModuleFilter

logger = logging.getLogger(__name__)


def scan_types(
    *predicates: TypePredicate,
    modules: Iterable[ModuleType] | None = None,
    module_filter: ModuleFilter | None = None,
) -> tuple[frozenset[type], ...]:
    """Select classes matching each predicate in one pass.

    Args:
        *predicates: Class predicates (at least one)
        modules: Modules to scan. None = all loaded modules.
        module_filter: Extra module selection. None = no filtering.

    Returns:
        One frozenset per predicate, in predicate order

    Raises:
        ValueError: If no predicates given
    """
    if not predicates:
        raise ValueError("at least one predicate required")

    found: list[set[type]] = [set() for _ in predicates]

    for module in loaded_modules(modules, module_filter):
        matches = _scan_module(module, predicates)
        for result, module_matches in zip(found, matches, strict=True):
            result.update(module_matches)

    return tuple(frozenset(result) for result in found)


def types_with_annotation(
    kind: type,
    *,
    modules: Iterable[ModuleType] | None = None,
    module_filter: ModuleFilter | None = None,
) -> frozenset[type]:
    """Select classes declaring a class-level rule of given kind.

    Example:
        >>> types_with_annotation(LocalizedModel, module_filter=include_packages("myapp"))
    """
    (result,) = scan_types(has_annotation(kind), modules=modules, module_filter=module_filter)
    return result


def types_child_of(
    base: type,
    *,
    modules: Iterable[ModuleType] | None = None,
    module_filter: ModuleFilter | None = None,
) -> frozenset[type]:
    """Select non-abstract strict subclasses of base."""
    (result,) = scan_types(is_child_of(base), modules=modules, module_filter=module_filter)
    return result


def loaded_modules(
    modules: Iterable[ModuleType] | None = None,
    module_filter: ModuleFilter | None = None,
) -> list[ModuleType]:
    """Get modules to scan.

    Args:
        modules: Explicit modules. None = snapshot of sys.modules.
        module_filter: Module selection. None = all.

    Returns:
        Modules passing the filter, in input order
    """
    candidates = list(sys.modules.values()) if modules is None else list(modules)
    selected: list[ModuleType] = []

    for module in candidates:
        if module is None:
            continue  # negative import cache entries
        try:
            if module_filter is not None and not module_filter(module):
                continue
        except Exception as e:
            logger.debug("module filter failed on %r: %s", module, e)
            continue
        selected.append(module)

    return selected


def import_package(package_name: str) -> list[ModuleType]:
    """Import a package and all its submodules.

    Makes the package's classes visible to scan_types. Submodules that
    fail to import are skipped with a warning.

    Args:
        package_name: Dotted package name

    Returns:
        Imported modules, package first

    Raises:
        ModuleNotFoundError: If the package itself cannot be found
    """
    package = importlib.import_module(package_name)
    imported = [package]

    search_path = getattr(package, "__path__", None)
    if search_path is None:
        return imported  # plain module, nothing below it

    def on_error(name: str) -> None:
        logger.warning("cannot import %s while walking %s", name, package_name)

    for info in pkgutil.walk_packages(search_path, prefix=f"{package_name}.", onerror=on_error):
        try:
            imported.append(importlib.import_module(info.name))
        except Exception as e:
            logger.warning("cannot import %s: %s: %s", info.name, type(e).__name__, e)

    return imported


def _scan_module(
    module: ModuleType,
    predicates: tuple[TypePredicate, ...],
) -> tuple[list[type], ...]:
    """Apply predicates to one module's classes. Empty on any failure."""
    try:
        types = list(iter_module_types(module))
        return tuple([t for t in types if predicate(t)] for predicate in predicates)
    except Exception as e:
        logger.debug("skipping module %s: %s: %s", getattr(module, "__name__", module), type(e).__name__, e)
        return tuple([] for _ in predicates)
