"""localekeys - discovery of localizable resources and their keys."""

__version__ = "0.1.0"

from localekeys.application.discovery.cache import DiscoveryCache, default_cache
from localekeys.application.discovery.engine import discover
from localekeys.application.discovery.keys import build_resource_key
from localekeys.application.discovery.scanner import scan_types, types_child_of, types_with_annotation
from localekeys.application.services.sweep import discover_all
from localekeys.domain.exceptions import DuplicateResourceKeyError, LocaleKeysError
from localekeys.domain.model import (
    Compare,
    DataType,
    DiscoveredResource,
    DiscoveryConfig,
    Display,
    DisplayName,
    EmailAddress,
    Ignore,
    Include,
    LocalizedModel,
    LocalizedResource,
    MaxLength,
    MinLength,
    Range,
    RegularExpression,
    Required,
    ResourceKey,
    StringLength,
    ValidationRule,
    localized_model,
    localized_resource,
    resource_key,
)
from localekeys.presentation.api.catalog import ResourceCatalog

__all__ = [
    "__version__",
    # Discovery
    "DiscoveryCache",
    "build_resource_key",
    "default_cache",
    "discover",
    "discover_all",
    "scan_types",
    "types_child_of",
    "types_with_annotation",
    "ResourceCatalog",
    # Model
    "DiscoveredResource",
    "DiscoveryConfig",
    # Class-level rules
    "LocalizedModel",
    "LocalizedResource",
    "localized_model",
    "localized_resource",
    "resource_key",
    # Member-level rules
    "Display",
    "DisplayName",
    "Ignore",
    "Include",
    "ResourceKey",
    # Validation rules
    "ValidationRule",
    "Compare",
    "DataType",
    "EmailAddress",
    "MaxLength",
    "MinLength",
    "Range",
    "RegularExpression",
    "Required",
    "StringLength",
    # Errors
    "DuplicateResourceKeyError",
    "LocaleKeysError",
]
