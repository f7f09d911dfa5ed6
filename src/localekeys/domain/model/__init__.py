"""Domain model: resources, members, scan rules, configuration."""

from localekeys.domain.model.annotations import (
    Display,
    DisplayName,
    Ignore,
    Include,
    LocalizedModel,
    LocalizedResource,
    ResourceKey,
    annotate,
    class_annotations,
    find_class_annotation,
    find_class_annotations,
    localized_model,
    localized_resource,
    resource_key,
)
from localekeys.domain.model.configuration import DiscoveryConfig
from localekeys.domain.model.discovered_resource import DiscoveredResource
from localekeys.domain.model.member import MemberInfo, MemberKind
from localekeys.domain.model.validation import (
    Compare,
    DataType,
    EmailAddress,
    MaxLength,
    MinLength,
    Range,
    RegularExpression,
    Required,
    StringLength,
    ValidationRule,
)

__all__ = [
    # Resources
    "DiscoveredResource",
    "MemberInfo",
    "MemberKind",
    # Class-level rules
    "LocalizedModel",
    "LocalizedResource",
    "annotate",
    "class_annotations",
    "find_class_annotation",
    "find_class_annotations",
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
    # Configuration
    "DiscoveryConfig",
]
