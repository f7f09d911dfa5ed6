"""Structural member of a scanned class."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeVar

A = TypeVar("A")


class MemberKind(Enum):
    """How a member is declared on its class."""

    FIELD = auto()  # annotated attribute
    PROPERTY = auto()  # property / cached_property
    ATTRIBUTE = auto()  # plain class attribute with a value
    ENUM_MEMBER = auto()  # enumeration value


@dataclass(frozen=True, slots=True)
class MemberInfo:
    """Member found by runtime introspection.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        name: Member identifier (must not be empty)
        declaring_type: Class that owns the member
        return_type: Type the member evaluates to (class or typing form)
        kind: How the member is declared
        is_static: Value is readable from the class itself
        metadata: Rule objects attached to the member (Annotated extras)
    """

    name: str
    declaring_type: type
    return_type: object
    kind: MemberKind
    is_static: bool = False
    metadata: tuple[object, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not isinstance(self.declaring_type, type):
            raise TypeError(f"declaring_type must be a class, got {type(self.declaring_type).__name__}")

    def find(self, kind: type[A]) -> A | None:
        """Get first metadata item of given kind."""
        for item in self.metadata:
            if isinstance(item, kind):
                return item
        return None

    def find_all(self, kind: type[A]) -> tuple[A, ...]:
        """Get all metadata items of given kind, in declaration order."""
        return tuple(item for item in self.metadata if isinstance(item, kind))

    def has(self, kind: type) -> bool:
        """Check if member carries metadata of given kind."""
        return self.find(kind) is not None

    def __str__(self) -> str:
        """Format as Declaring.name."""
        return f"{self.declaring_type.__qualname__}.{self.name}"
