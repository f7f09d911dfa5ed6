"""Predicate type aliases."""

from collections.abc import Callable
from typing import TypeAlias

# Selects candidate classes during type scanning
TypePredicate: TypeAlias = Callable[[type], bool]
