"""Process-wide cache of discovered member names per class.

Every discovery call stores the member names it found under the
scanned class's full name. Callers ask "what did we find for T"
without scanning again.

Single-key dict operations are atomic (GIL or per-object locking on
free-threaded builds), so no global lock is taken. Last writer wins.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class DiscoveryCache:
    """Concurrent mapping: class full name → discovered member names.

    Entries are overwritten, never merged, on re-scan.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        """Initialize empty cache."""
        self._entries: dict[str, tuple[str, ...]] = {}

    def store(self, type_name: str, names: Iterable[str]) -> None:
        """Store member names for a class, replacing any previous entry.

        Args:
            type_name: Class full name (must not be empty)
            names: Member names in discovery order

        Raises:
            ValueError: If type_name is empty
        """
        if not type_name:
            raise ValueError("type_name must not be empty")
        self._entries[type_name] = tuple(names)

    def lookup(self, type_name: str) -> tuple[str, ...]:
        """Get member names discovered for a class.

        Args:
            type_name: Class full name

        Returns:
            Member names, empty if the class was never scanned
        """
        return self._entries.get(type_name, ())

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def snapshot(self) -> Mapping[str, tuple[str, ...]]:
        """Get read-only copy of all entries."""
        return MappingProxyType(dict(self._entries))

    def __contains__(self, type_name: object) -> bool:
        """Check if a class has been scanned."""
        return type_name in self._entries

    def __len__(self) -> int:
        """Number of scanned classes."""
        return len(self._entries)

    def __repr__(self) -> str:
        """Format as DiscoveryCache(N types)."""
        return f"DiscoveryCache({len(self._entries)} types)"


# Shared cache used when discovery is called without an explicit one
default_cache = DiscoveryCache()
