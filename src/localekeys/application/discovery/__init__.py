"""Discovery layer for localizable resources.

Components, leaves first:
- keys: resource key composition
- classifier: simple (terminal) type classification
- values: default value resolution
- engine: recursive resource discovery
- scanner: scan roots among loaded modules
- cache: member names discovered per class
"""

from localekeys.application.discovery.cache import DiscoveryCache, default_cache
from localekeys.application.discovery.classifier import is_simple_type
from localekeys.application.discovery.engine import check_duplicate_keys, discover
from localekeys.application.discovery.keys import (
    build_resource_key,
    build_type_key,
    build_validation_key,
)
from localekeys.application.discovery.scanner import (
    import_package,
    scan_types,
    types_child_of,
    types_with_annotation,
)
from localekeys.application.discovery.values import resolve_default_value

__all__ = [
    # Keys
    "build_resource_key",
    "build_type_key",
    "build_validation_key",
    # Classification / values
    "is_simple_type",
    "resolve_default_value",
    # Engine
    "check_duplicate_keys",
    "discover",
    # Scanner
    "import_package",
    "scan_types",
    "types_child_of",
    "types_with_annotation",
    # Cache
    "DiscoveryCache",
    "default_cache",
]
