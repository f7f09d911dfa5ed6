"""Declarative scan rules attached to classes and members.

Class-level rules are applied with decorators and stored on the class itself:

    @localized_model(key_prefix="Forms.Login", only_included=True)
    @resource_key("Forms.Login.Title", "Sign in")
    class LoginViewModel:
        ...

Member-level rules travel as typing.Annotated metadata:

    user_name: Annotated[str, Display(name="User name"), Required()]

Rules are immutable value objects. The discovery engine only reads them.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar, overload

T = TypeVar("T", bound=type)
A = TypeVar("A")

# Attribute holding class-level rules in the class's own __dict__
CLASS_ANNOTATIONS_ATTR = "__localekeys_annotations__"


@dataclass(frozen=True, slots=True)
class LocalizedResource:
    """Marks a resource container (flat bag of translatable texts).

    Attributes:
        key_prefix: Explicit key prefix. None = class full name.
    """

    key_prefix: str | None = None


@dataclass(frozen=True, slots=True)
class LocalizedModel:
    """Marks a localizable model (view-model whose structure drives keys).

    Attributes:
        key_prefix: Explicit key prefix. None = caller prefix or class full name.
        only_included: Scan only members marked with Include.
        inherited: Scan members inherited from base classes.
    """

    key_prefix: str | None = None
    only_included: bool = False
    inherited: bool = True


@dataclass(frozen=True, slots=True)
class ResourceKey:
    """Explicit key (and optional value) for a class or member.

    On a member the key replaces the derived one. It is rooted at the
    class's explicit prefix only when one is declared.

    Attributes:
        key: Resource key fragment (must not be empty)
        value: Default text. None = resolved member value.
    """

    key: str
    value: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.key:
            raise ValueError("key must not be empty")


@dataclass(frozen=True, slots=True)
class Ignore:
    """Excludes a member from discovery."""


@dataclass(frozen=True, slots=True)
class Include:
    """Forces inclusion of a member.

    Required for members of models with only_included=True.
    Keeps a complex member's own resource in the result.
    """


@dataclass(frozen=True, slots=True)
class Display:
    """Display metadata for a member.

    Attributes:
        name: Display text, used as default value.
        description: Long description. Emits an extra "-Description" resource.
    """

    name: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class DisplayName:
    """Display name for a member.

    Attributes:
        display_name: Display text, used as default value.
    """

    display_name: str


def class_annotations(cls: type) -> tuple[object, ...]:
    """Get rules declared directly on cls (not inherited).

    Args:
        cls: Class to inspect

    Returns:
        Rules in declaration order (top decorator first)
    """
    return tuple(vars(cls).get(CLASS_ANNOTATIONS_ATTR, ()))


def find_class_annotation(cls: type, kind: type[A]) -> A | None:
    """Get first rule of given kind declared directly on cls."""
    for item in class_annotations(cls):
        if isinstance(item, kind):
            return item
    return None


def find_class_annotations(cls: type, kind: type[A]) -> tuple[A, ...]:
    """Get all rules of given kind declared directly on cls."""
    return tuple(item for item in class_annotations(cls) if isinstance(item, kind))


def annotate(*rules: object) -> Callable[[T], T]:
    """Class decorator attaching rules to a class.

    Stacked decorators keep top-to-bottom source order.

    Args:
        rules: Rule objects to attach

    Returns:
        Decorator returning the same class
    """

    def decorator(cls: T) -> T:
        if not isinstance(cls, type):
            raise TypeError(f"annotate() expects a class, got {type(cls).__name__}")
        # Decorators run bottom-up: prepend to keep source order
        setattr(cls, CLASS_ANNOTATIONS_ATTR, (*rules, *class_annotations(cls)))
        return cls

    return decorator


@overload
def localized_resource(cls: T, /) -> T: ...


@overload
def localized_resource(*, key_prefix: str | None = None) -> Callable[[T], T]: ...


def localized_resource(
    cls: T | None = None,
    /,
    *,
    key_prefix: str | None = None,
) -> T | Callable[[T], T]:
    """Mark class as resource container.

    Usable bare (@localized_resource) or with arguments.
    """
    decorator = annotate(LocalizedResource(key_prefix=key_prefix))
    if cls is not None:
        return decorator(cls)
    return decorator


@overload
def localized_model(cls: T, /) -> T: ...


@overload
def localized_model(
    *,
    key_prefix: str | None = None,
    only_included: bool = False,
    inherited: bool = True,
) -> Callable[[T], T]: ...


def localized_model(
    cls: T | None = None,
    /,
    *,
    key_prefix: str | None = None,
    only_included: bool = False,
    inherited: bool = True,
) -> T | Callable[[T], T]:
    """Mark class as localizable model.

    Usable bare (@localized_model) or with arguments.
    """
    decorator = annotate(
        LocalizedModel(
            key_prefix=key_prefix,
            only_included=only_included,
            inherited=inherited,
        )
    )
    if cls is not None:
        return decorator(cls)
    return decorator


def resource_key(key: str, value: str | None = None) -> Callable[[T], T]:
    """Declare a class-level resource (model scanning only)."""
    return annotate(ResourceKey(key=key, value=value))
