"""Public API for discovered resources.

Public exports:
    ResourceCatalog: Read-only, key-indexed view of discovered resources
"""

from localekeys.presentation.api.catalog import ResourceCatalog

__all__ = [
    "ResourceCatalog",
]
