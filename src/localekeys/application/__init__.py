"""Application layer for resource discovery.

Components:
- discovery: key building, classification, engine, scanner, cache
- services: application-wide sweep
- reporters: output formatting (PlainText, JSON, rich Console)
"""

from localekeys.application.discovery import (
    DiscoveryCache,
    build_resource_key,
    default_cache,
    discover,
    is_simple_type,
    resolve_default_value,
    scan_types,
    types_child_of,
    types_with_annotation,
)
from localekeys.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from localekeys.application.services import discover_all, find_scan_roots

__all__ = [
    # Discovery
    "DiscoveryCache",
    "build_resource_key",
    "default_cache",
    "discover",
    "is_simple_type",
    "resolve_default_value",
    "scan_types",
    "types_child_of",
    "types_with_annotation",
    # Services
    "discover_all",
    "find_scan_roots",
    # Reporters
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
