"""Default value resolution for discovered members.

Precedence, highest first:
1. Live str value of the member (class attribute read statically,
   instance members read from a fresh no-argument instance)
2. Display(name=...)
3. DisplayName(...)
4. Member name

Never raises: every failure falls through to the next source.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localekeys.application.discovery.classifier import is_string_type
from localekeys.domain.model.annotations import Display, DisplayName

if TYPE_CHECKING:
    from localekeys.domain.model.member import MemberInfo

logger = logging.getLogger(__name__)


def resolve_default_value(member: MemberInfo) -> str:
    """Resolve human-readable default text of a member.

    Args:
        member: Member to resolve

    Returns:
        Default text (never empty for a valid member)
    """
    live_value = read_string_value(member)
    if live_value is not None:
        return live_value

    display = member.find(Display)
    if display is not None and display.name:
        return display.name

    display_name = member.find(DisplayName)
    if display_name is not None and display_name.display_name:
        return display_name.display_name

    return member.name


def read_string_value(member: MemberInfo) -> str | None:
    """Read the live value of a str-typed member.

    Static members are read from the declaring class. Instance
    members are read from `declaring_type()`, so the class needs
    a no-argument constructor.

    Args:
        member: Member to read

    Returns:
        The value if it is a str, None otherwise or on any failure
    """
    if not is_string_type(member.return_type):
        return None

    try:
        if member.is_static:
            value = getattr(member.declaring_type, member.name)
        else:
            instance = member.declaring_type()
            value = getattr(instance, member.name)
    except Exception as e:
        logger.debug("cannot read value of %s: %s: %s", member, type(e).__name__, e)
        return None

    if isinstance(value, str):
        return value
    return None
