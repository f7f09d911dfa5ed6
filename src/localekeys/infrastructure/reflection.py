"""Runtime introspection of classes and modules.

Turns live classes into MemberInfo values:
- FIELD: annotated attribute (metadata from typing.Annotated extras)
- PROPERTY: property / functools.cached_property (metadata from return annotation)
- ATTRIBUTE: plain public class attribute holding a value
- ENUM_MEMBER: enumeration value

Also enumerates the classes defined by a module.
"""

from __future__ import annotations

import enum
import functools
import inspect
import logging
import types
import typing
from typing import Annotated, Any, ClassVar, get_args, get_origin

from localekeys.domain.model.member import MemberInfo, MemberKind

if typing.TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_UNION_TYPES: tuple[object, ...] = (typing.Union, types.UnionType)


def type_full_name(cls: type) -> str:
    """Get fully qualified class name (module.QualName)."""
    module = cls.__module__
    if not module or module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def split_annotated(tp: object) -> tuple[object, tuple[object, ...]]:
    """Split Annotated[X, *meta] into (X, meta).

    ClassVar wrappers are removed as well. Non-annotated types
    return (tp, ()).
    """
    metadata: list[object] = []
    while True:
        origin = get_origin(tp)
        if origin is ClassVar:
            args = get_args(tp)
            tp = args[0] if args else Any
        elif origin is Annotated:
            metadata.extend(tp.__metadata__)
            tp = tp.__origin__
        else:
            return tp, tuple(metadata)


def resolve_class(tp: object) -> type | None:
    """Get the class a type hint stands for, if there is exactly one.

    Unwraps Annotated and Optional. Generic aliases (list[int]),
    multi-type unions and typing special forms return None.
    """
    tp, _ = split_annotated(tp)

    if get_origin(tp) in _UNION_TYPES:
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) != 1:
            return None
        return resolve_class(args[0])

    if isinstance(tp, type) and not isinstance(tp, types.GenericAlias):
        return tp

    return None


def is_enum_type(cls: object) -> bool:
    """Check if cls is an enumeration class."""
    return isinstance(cls, type) and issubclass(cls, enum.Enum)


def enum_members(cls: type[enum.Enum]) -> tuple[MemberInfo, ...]:
    """Get one member per enumeration name (aliases included)."""
    return tuple(
        MemberInfo(
            name=name,
            declaring_type=cls,
            return_type=type(member.value),
            kind=MemberKind.ENUM_MEMBER,
            is_static=True,
        )
        for name, member in cls.__members__.items()
    )


def collect_members(cls: type, *, declared_only: bool = False) -> tuple[MemberInfo, ...]:
    """Collect public structural members of a class.

    Walks the MRO base-first so members keep their first declaration
    position; a redefinition in a subclass replaces the inherited one.

    Args:
        cls: Class to inspect
        declared_only: Skip members inherited from base classes

    Returns:
        Members in declaration order
    """
    if declared_only:
        owners: list[type] = [cls]
    else:
        owners = [k for k in reversed(cls.__mro__) if k is not object]

    members: dict[str, MemberInfo] = {}
    for owner in owners:
        for member in _own_members(owner):
            members[member.name] = member

    return tuple(members.values())


def _own_members(owner: type) -> Iterator[MemberInfo]:
    """Yield members declared directly on owner."""
    hints = _type_hints(owner)
    namespace = vars(owner)
    seen: set[str] = set()

    # Annotated attributes first, in annotation order
    for name in _own_annotation_names(owner):
        if not _is_public(name) or name in seen:
            continue
        hint = hints.get(name, Any)
        if isinstance(namespace.get(name), (property, functools.cached_property)):
            continue  # reported with the namespace below
        seen.add(name)
        return_type, metadata = split_annotated(hint)
        is_class_var = get_origin(_strip_annotated(hint)) is ClassVar
        yield MemberInfo(
            name=name,
            declaring_type=owner,
            return_type=return_type,
            kind=MemberKind.ATTRIBUTE if is_class_var else MemberKind.FIELD,
            is_static=is_class_var,
            metadata=metadata,
        )

    for name, obj in namespace.items():
        if not _is_public(name) or name in seen:
            continue

        if isinstance(obj, property):
            getter = obj.fget
        elif isinstance(obj, functools.cached_property):
            getter = obj.func
        else:
            getter = None

        if getter is not None:
            return_type, metadata = split_annotated(_return_hint(getter))
            seen.add(name)
            yield MemberInfo(
                name=name,
                declaring_type=owner,
                return_type=return_type,
                kind=MemberKind.PROPERTY,
                metadata=metadata,
            )
            continue

        if _is_data_attribute(obj):
            seen.add(name)
            yield MemberInfo(
                name=name,
                declaring_type=owner,
                return_type=type(obj),
                kind=MemberKind.ATTRIBUTE,
                is_static=True,
            )


def iter_module_types(module: types.ModuleType) -> Iterator[type]:
    """Yield classes defined by module, nested classes included.

    Classes merely imported into the module are skipped.
    """
    module_name = module.__name__
    seen: set[int] = set()

    def walk(namespace: dict[str, object]) -> Iterator[type]:
        for obj in list(namespace.values()):
            if not isinstance(obj, type) or id(obj) in seen:
                continue
            if obj.__module__ != module_name:
                continue
            seen.add(id(obj))
            yield obj
            yield from walk(dict(vars(obj)))

    yield from walk(dict(vars(module)))


def _type_hints(owner: type) -> dict[str, Any]:
    """Resolve type hints with Annotated extras kept.

    Falls back to raw annotations when forward references cannot
    be resolved (e.g. classes defined inside functions).
    """
    try:
        return typing.get_type_hints(owner, include_extras=True)
    except Exception as e:
        logger.debug("cannot resolve type hints of %s: %s", type_full_name(owner), e)
        return dict(inspect.get_annotations(owner))


def _return_hint(getter: object) -> object:
    """Resolve return annotation of a property getter. Any if missing."""
    try:
        hints = typing.get_type_hints(getter, include_extras=True)
    except Exception as e:
        logger.debug("cannot resolve return hint of %r: %s", getter, e)
        hints = dict(getattr(getter, "__annotations__", {}) or {})
    return hints.get("return", Any)


def _own_annotation_names(owner: type) -> tuple[str, ...]:
    """Names annotated directly in owner's body."""
    try:
        return tuple(inspect.get_annotations(owner))
    except Exception as e:
        logger.debug("cannot read annotations of %s: %s", type_full_name(owner), e)
        return ()


def _strip_annotated(tp: object) -> object:
    while get_origin(tp) is Annotated:
        tp = tp.__origin__
    return tp


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_data_attribute(obj: object) -> bool:
    """Check if obj is a plain value (not a function, class or descriptor)."""
    if isinstance(obj, (type, staticmethod, classmethod, types.ModuleType)):
        return False
    if callable(obj):
        return False
    # Other descriptors (slots, custom) are not plain values
    return not hasattr(type(obj), "__get__")
