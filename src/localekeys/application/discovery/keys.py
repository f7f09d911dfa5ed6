"""Resource key composition.

Keys are dotted paths: <prefix>.<member>[.<nested member>...].
An empty separator joins an explicit key verbatim onto its prefix.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from localekeys.infrastructure.reflection import type_full_name

if TYPE_CHECKING:
    from localekeys.domain.model.validation import ValidationRule

# Separator between key segments
KEY_SEPARATOR: Final = "."

# Suffix of the resource holding a member's long description
DESCRIPTION_SUFFIX: Final = "-Description"


def build_resource_key(
    prefix: str | None,
    member_name_or_key: str,
    separator: str = KEY_SEPARATOR,
) -> str:
    """Compose resource key from prefix and member name.

    Pure and total: never raises.

    Args:
        prefix: Key prefix. Empty/None = fragment used as is.
        member_name_or_key: Member identifier or explicit key fragment
        separator: Joiner. "" = concatenate verbatim (explicit keys).

    Returns:
        Composite key

    Example:
        >>> build_resource_key("App.Login", "UserName")
        'App.Login.UserName'
        >>> build_resource_key(None, "Custom.Key", separator="")
        'Custom.Key'
    """
    if not prefix:
        return member_name_or_key
    return f"{prefix}{separator}{member_name_or_key}"


def build_description_key(member_key: str) -> str:
    """Key of the long-description resource for a member key."""
    return f"{member_key}{DESCRIPTION_SUFFIX}"


def build_validation_key(member_key: str, rule: ValidationRule) -> str:
    """Key of the failure-message resource of a validation rule."""
    return build_resource_key(member_key, rule.identifier)


def build_type_key(cls: type, member_name: str) -> str:
    """Key of a member of cls scanned with the default prefix.

    Example:
        >>> build_type_key(Resources, "Hello")
        'myapp.resources.Resources.Hello'
    """
    return build_resource_key(type_full_name(cls), member_name)


def last_segment(key: str) -> str:
    """Get last dotted segment of key."""
    return key.rsplit(KEY_SEPARATOR, 1)[-1]
