"""Validation rules attached to members.

Each rule contributes its own resource holding the failure message.
Rules are metadata only: localekeys does not validate values.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ValidationRule:
    """Base for validation rules.

    Attributes:
        error_message: Custom failure message. None = member name.
    """

    error_message: str | None = field(default=None, kw_only=True)

    @property
    def identifier(self) -> str:
        """Rule identifier used as the last key segment."""
        return type(self).__name__


@dataclass(frozen=True, slots=True)
class Required(ValidationRule):
    """Value must be present.

    Attributes:
        allow_empty_strings: Treat "" as present.
    """

    allow_empty_strings: bool = False


@dataclass(frozen=True, slots=True)
class StringLength(ValidationRule):
    """String length must be within [minimum, maximum]."""

    maximum: int
    minimum: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.maximum < 0:
            raise ValueError(f"maximum must be >= 0, got {self.maximum}")
        if self.minimum < 0:
            raise ValueError(f"minimum must be >= 0, got {self.minimum}")
        if self.minimum > self.maximum:
            raise ValueError(f"minimum must be <= maximum, got {self.minimum} > {self.maximum}")


@dataclass(frozen=True, slots=True)
class MinLength(ValidationRule):
    """Collection or string must have at least `length` items."""

    length: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.length < 0:
            raise ValueError(f"length must be >= 0, got {self.length}")


@dataclass(frozen=True, slots=True)
class MaxLength(ValidationRule):
    """Collection or string must have at most `length` items."""

    length: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.length < 0:
            raise ValueError(f"length must be >= 0, got {self.length}")


@dataclass(frozen=True, slots=True)
class Range(ValidationRule):
    """Value must be within [minimum, maximum]."""

    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.minimum > self.maximum:
            raise ValueError(f"minimum must be <= maximum, got {self.minimum} > {self.maximum}")


@dataclass(frozen=True, slots=True)
class RegularExpression(ValidationRule):
    """Value must match pattern."""

    pattern: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.pattern:
            raise ValueError("pattern must not be empty")


@dataclass(frozen=True, slots=True)
class EmailAddress(ValidationRule):
    """Value must be an email address."""


@dataclass(frozen=True, slots=True)
class Compare(ValidationRule):
    """Value must equal another member's value."""

    other: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.other:
            raise ValueError("other must not be empty")


@dataclass(frozen=True, slots=True)
class DataType(ValidationRule):
    """Value must be of a named data type (e.g. "EmailAddress", "Url").

    Identifier includes the data type so several DataType rules on
    one member produce distinct keys.
    """

    data_type: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.data_type:
            raise ValueError("data_type must not be empty")

    @property
    def identifier(self) -> str:
        """Rule identifier: DataType + data type name."""
        return f"DataType{self.data_type}"
