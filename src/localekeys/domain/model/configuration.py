"""Discovery configuration.

User-provided settings for application-wide discovery.
None = feature disabled, value = feature enabled with that config.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import ModuleType


@dataclass(frozen=True, slots=True)
class DiscoveryConfig:
    """Discovery configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        packages: Packages imported (with all submodules) before scanning.
        module_filter: Predicate selecting modules to scan. None = all loaded.
        max_depth: Max recursion depth into nested members. None = unbounded
            (cycles are still cut).
        max_workers: Threads used to discover roots. None = sequential.
    """

    packages: tuple[str, ...] = ()
    module_filter: Callable[[ModuleType], bool] | None = None
    max_depth: int | None = None
    max_workers: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if isinstance(self.packages, str):
            raise TypeError("packages must be a tuple of names, not str")

        if any(not package for package in self.packages):
            raise ValueError("packages must not contain empty names")

        # max_depth must be >= 1 if set
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

        # max_workers must be >= 1 if set
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    @property
    def is_concurrent(self) -> bool:
        """Check if roots are discovered in parallel."""
        return self.max_workers is not None and self.max_workers > 1
