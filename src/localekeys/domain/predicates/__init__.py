"""Domain predicates."""

from localekeys.domain.predicates.base import TypePredicate
from localekeys.domain.predicates.type_predicates import (
    has_annotation,
    has_name_matching,
    is_child_of,
)

__all__ = [
    "TypePredicate",
    "has_annotation",
    "has_name_matching",
    "is_child_of",
]
