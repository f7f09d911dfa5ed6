"""Resource discovery exceptions."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from localekeys.domain.exceptions.base import LocaleKeysError

if TYPE_CHECKING:
    from collections.abc import Mapping


class DuplicateResourceKeyError(LocaleKeysError, ValueError):
    """Two or more resources resolved to the same key.

    Raised when one discovery pass produces colliding keys. This is a
    configuration mistake in the annotated classes and is never merged.

    Inherits ValueError for semantic correctness (invalid annotations).

    Attributes:
        keys: Colliding keys in first-seen order (must not be empty)
        members: Key → names of the members that produced it
    """

    def __init__(
        self,
        keys: tuple[str, ...],
        members: Mapping[str, tuple[str, ...]] | None = None,
    ) -> None:
        # FAIL-FIRST validation
        if not keys:
            raise ValueError("keys must not be empty")

        self.keys = keys
        self.members: Mapping[str, tuple[str, ...]] = MappingProxyType(dict(members or {}))
        super().__init__(f"Duplicate keys: [{', '.join(self._describe(k) for k in keys)}]")

    def _describe(self, key: str) -> str:
        names = self.members.get(key)
        if not names:
            return key
        return f"{key} ({', '.join(names)})"
