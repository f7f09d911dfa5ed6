"""Application-wide discovery sweep.

Imports configured packages, finds every resource container and
localizable model among loaded modules and discovers each of them.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localekeys.application.discovery.cache import DiscoveryCache, default_cache
from localekeys.application.discovery.engine import discover
from localekeys.application.discovery.scanner import import_package, scan_types
from localekeys.domain.model.annotations import LocalizedModel, LocalizedResource
from localekeys.domain.model.configuration import DiscoveryConfig
from localekeys.domain.predicates.type_predicates import has_annotation
from localekeys.infrastructure.reflection import type_full_name

if TYPE_CHECKING:
    from localekeys.domain.model.discovered_resource import DiscoveredResource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanRoots:
    """Classes where discovery starts.

    Attributes:
        resources: Resource containers (context-aware scanning)
        models: Localizable models (model scanning)
    """

    resources: tuple[type, ...]
    models: tuple[type, ...]

    @property
    def count(self) -> int:
        """Total number of roots."""
        return len(self.resources) + len(self.models)


def find_scan_roots(config: DiscoveryConfig | None = None) -> ScanRoots:
    """Import configured packages and select scan roots.

    Roots are ordered by class full name for stable output.

    Args:
        config: Discovery configuration. None = defaults.

    Returns:
        Resource containers and models found in loaded modules
    """
    config = config or DiscoveryConfig()

    for package in config.packages:
        import_package(package)

    resources, models = scan_types(
        has_annotation(LocalizedResource),
        has_annotation(LocalizedModel),
        module_filter=config.module_filter,
    )
    return ScanRoots(
        resources=tuple(sorted(resources, key=type_full_name)),
        models=tuple(sorted(models, key=type_full_name)),
    )


def discover_all(
    config: DiscoveryConfig | None = None,
    *,
    cache: DiscoveryCache | None = None,
) -> list[DiscoveredResource]:
    """Discover resources of every scan root.

    Resource containers come first, then models. With max_workers > 1
    roots are discovered in a thread pool; output order stays the same.

    Args:
        config: Discovery configuration. None = defaults.
        cache: Cache receiving member names. None = default_cache.

    Returns:
        Concatenated resources of all roots

    Raises:
        DuplicateResourceKeyError: If one root produces colliding keys
    """
    config = config or DiscoveryConfig()
    cache = cache if cache is not None else default_cache
    roots = find_scan_roots(config)

    jobs: list[tuple[type, bool]] = [(cls, True) for cls in roots.resources]
    jobs.extend((cls, False) for cls in roots.models)

    def run(job: tuple[type, bool]) -> list[DiscoveredResource]:
        cls, context_aware = job
        return discover(cls, context_aware=context_aware, cache=cache, max_depth=config.max_depth)

    if config.is_concurrent:
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            batches = list(executor.map(run, jobs))
    else:
        batches = [run(job) for job in jobs]

    results = [resource for batch in batches for resource in batch]
    logger.info(
        "discovered %d resources in %d containers and %d models",
        len(results),
        len(roots.resources),
        len(roots.models),
    )
    return results
