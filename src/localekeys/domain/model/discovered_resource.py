"""Discovered translatable resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from localekeys.domain.model.member import MemberInfo


@dataclass(frozen=True, slots=True)
class DiscoveredResource:
    """One translatable entry with its key and default value.

    Immutable value object with FAIL-FIRST validation.
    Produced fresh by every discovery call; has no persisted identity.

    Attributes:
        member: Originating member. None for class-level declarations.
        key: Composite resource key (must not be empty)
        value: Default (source language) text
        property_name: Short member identifier. None for class-level
            declarations and explicit key overrides.
        declaring_type: Class that owns the member
        return_type: Type the member evaluates to
        is_simple_type: Terminal type, no recursion needed
    """

    member: MemberInfo | None
    key: str
    value: str
    property_name: str | None
    declaring_type: type
    return_type: object
    is_simple_type: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.key:
            raise ValueError("key must not be empty")
        if self.value is None:
            raise TypeError("value must not be None")

    @property
    def is_class_level(self) -> bool:
        """Check if resource comes from a class-level declaration."""
        return self.member is None

    def __str__(self) -> str:
        """Format as key = "value"."""
        return f'{self.key} = "{self.value}"'
