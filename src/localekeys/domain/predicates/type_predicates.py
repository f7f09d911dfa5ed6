"""Class predicates for type scanning."""

import inspect
from fnmatch import fnmatch

from localekeys.domain.model.annotations import find_class_annotation
from localekeys.domain.predicates.base import TypePredicate


def has_annotation(kind: type) -> TypePredicate:
    """Create predicate: class declares a rule of given kind.

    Only rules declared on the class itself count (not inherited).

    Args:
        kind: Rule class (e.g. LocalizedModel)

    Returns:
        Predicate function
    """

    def predicate(cls: type) -> bool:
        return find_class_annotation(cls, kind) is not None

    return predicate


def is_child_of(base: type) -> TypePredicate:
    """Create predicate: class is a non-abstract strict subclass of base.

    Args:
        base: Base class

    Returns:
        Predicate function
    """

    def predicate(cls: type) -> bool:
        return cls is not base and issubclass(cls, base) and not inspect.isabstract(cls)

    return predicate


def has_name_matching(pattern: str) -> TypePredicate:
    """Create predicate: class full name matches glob pattern.

    Args:
        pattern: fnmatch pattern (e.g. "myapp.*.ViewModels.*")

    Returns:
        Predicate function
    """

    def predicate(cls: type) -> bool:
        return fnmatch(f"{cls.__module__}.{cls.__qualname__}", pattern)

    return predicate
