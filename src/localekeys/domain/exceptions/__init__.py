"""Domain exceptions."""

from localekeys.domain.exceptions.base import LocaleKeysError
from localekeys.domain.exceptions.discovery import DuplicateResourceKeyError

__all__ = [
    "LocaleKeysError",
    "DuplicateResourceKeyError",
]
