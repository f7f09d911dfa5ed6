"""Simple-type classification.

Simple (terminal) types are leaves of the discovery walk.
Everything else is complex: the engine may recurse into it.
Unknown typing forms are complex.
"""

from __future__ import annotations

import datetime
import decimal
import enum
import fractions
import types
import typing
import uuid
from typing import Any, Final, Literal, get_args, get_origin

from localekeys.infrastructure.reflection import split_annotated

# Terminal scalar types (subclasses included)
SIMPLE_TYPES: Final[tuple[type, ...]] = (
    str,
    int,  # bool is an int subclass
    float,
    complex,
    bytes,
    decimal.Decimal,
    fractions.Fraction,
    datetime.date,  # datetime.datetime is a date subclass
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
)

_UNION_TYPES: Final[tuple[object, ...]] = (typing.Union, types.UnionType)


def is_simple_type(tp: object) -> bool:
    """Check if a type hint denotes a terminal type.

    Simple:
    - Scalars in SIMPLE_TYPES and their subclasses
    - Enums whose values are all simple
    - Literal[...] of simple values
    - NewType over a simple type
    - Optional[X] / Annotated[X, ...] with simple X

    Args:
        tp: Class or typing form

    Returns:
        True if terminal, False if complex or unknown
    """
    tp, _ = split_annotated(tp)

    if tp is Any or tp is None or tp is type(None):
        return False

    # NewType("UserId", int)
    supertype = getattr(tp, "__supertype__", None)
    if supertype is not None:
        return is_simple_type(supertype)

    origin = get_origin(tp)
    if origin is Literal:
        return all(isinstance(value, SIMPLE_TYPES) or isinstance(value, enum.Enum) for value in get_args(tp))

    if origin in _UNION_TYPES:
        args = [a for a in get_args(tp) if a is not type(None)]
        return len(args) == 1 and is_simple_type(args[0])

    if origin is not None or not isinstance(tp, type):
        return False  # generic aliases, special forms, strings

    if issubclass(tp, enum.Enum):
        return _is_simple_enum(tp)

    return issubclass(tp, SIMPLE_TYPES)


def is_string_type(tp: object) -> bool:
    """Check if a type hint denotes str (Optional/Annotated unwrapped)."""
    tp, _ = split_annotated(tp)
    if get_origin(tp) in _UNION_TYPES:
        args = [a for a in get_args(tp) if a is not type(None)]
        return len(args) == 1 and is_string_type(args[0])
    return isinstance(tp, type) and issubclass(tp, str)


def _is_simple_enum(tp: type[enum.Enum]) -> bool:
    """Enum is simple when every member value is a simple scalar."""
    # Empty enums and plain Enum/Flag bases are terminal as well
    return all(isinstance(member.value, SIMPLE_TYPES) for member in tp.__members__.values())
