"""Resource catalog: read-only view over discovered resources.

Example:
    catalog = ResourceCatalog.from_config(DiscoveryConfig(packages=("myapp",)))
    catalog.get("myapp.resources.Common.Save").value
    catalog.with_prefix("Forms.Login").keys()
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Self

from localekeys.application.discovery.engine import check_duplicate_keys, discover
from localekeys.application.discovery.keys import KEY_SEPARATOR
from localekeys.application.services.sweep import discover_all

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from localekeys.application.discovery.cache import DiscoveryCache
    from localekeys.domain.model.configuration import DiscoveryConfig
    from localekeys.domain.model.discovered_resource import DiscoveredResource


class ResourceCatalog:
    """Authoritative set of translatable entries, indexed by key.

    Immutable after construction. Keys are unique: building a catalog
    from colliding resources raises DuplicateResourceKeyError.
    """

    __slots__ = ("_by_key",)

    def __init__(self, resources: Iterable[DiscoveredResource] = ()) -> None:
        """Initialize catalog.

        Args:
            resources: Discovered resources

        Raises:
            DuplicateResourceKeyError: If two resources share a key
        """
        items = tuple(resources)
        check_duplicate_keys(items)
        self._by_key = MappingProxyType({r.key: r for r in items})

    @classmethod
    def from_types(
        cls,
        *types: type,
        context_aware: bool = True,
        cache: DiscoveryCache | None = None,
    ) -> Self:
        """Build catalog by discovering given classes.

        Args:
            *types: Root classes
            context_aware: True = resource containers, False = models
            cache: Cache receiving member names. None = default cache.

        Returns:
            Catalog of all resources
        """
        resources: list[DiscoveredResource] = []
        for root in types:
            resources.extend(discover(root, context_aware=context_aware, cache=cache))
        return cls(resources)

    @classmethod
    def from_config(
        cls,
        config: DiscoveryConfig | None = None,
        *,
        cache: DiscoveryCache | None = None,
    ) -> Self:
        """Build catalog with an application-wide sweep."""
        return cls(discover_all(config, cache=cache))

    def get(self, key: str) -> DiscoveredResource | None:
        """Get resource by key, None if absent."""
        return self._by_key.get(key)

    def keys(self) -> tuple[str, ...]:
        """All keys in discovery order."""
        return tuple(self._by_key)

    def values(self) -> dict[str, str]:
        """Key → default value mapping."""
        return {key: resource.value for key, resource in self._by_key.items()}

    def with_prefix(self, prefix: str) -> ResourceCatalog:
        """Sub-catalog of keys equal to prefix or below it.

        Args:
            prefix: Key prefix (segment-aligned: "A.B" does not match "A.BC")

        Returns:
            New catalog
        """
        below = f"{prefix}{KEY_SEPARATOR}"
        return ResourceCatalog(r for key, r in self._by_key.items() if key == prefix or key.startswith(below))

    def for_type(self, cls: type) -> ResourceCatalog:
        """Sub-catalog of resources declared by a class."""
        return ResourceCatalog(r for r in self._by_key.values() if r.declaring_type is cls)

    def __contains__(self, key: object) -> bool:
        """Check if key is in catalog."""
        return key in self._by_key

    def __iter__(self) -> Iterator[DiscoveredResource]:
        """Iterate resources in discovery order."""
        return iter(self._by_key.values())

    def __len__(self) -> int:
        """Number of resources."""
        return len(self._by_key)

    def __repr__(self) -> str:
        """Format as ResourceCatalog(N resources)."""
        return f"ResourceCatalog({len(self._by_key)} resources)"
