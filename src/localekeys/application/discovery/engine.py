"""Resource discovery engine.

Walks a class's members, applies scan rules and emits a flat list of
DiscoveredResource values with composite keys.

Two scanning modes share the walk:
- context_aware=True: resource container. Prefix = explicit prefix,
  caller prefix or class full name. Every complex member is flattened.
- context_aware=False: model. Prefix = explicit prefix or caller prefix.
  Complex members are entered only when their class is a LocalizedModel,
  so the walk never wanders into unrelated domain types.

Algorithm per class:
1. Resolve key prefix
2. Class-level ResourceKey declarations (model mode)
3. Enum values, or public members filtered by Ignore/Include/inherited
4. Fail on duplicate keys
5. Keep simple, class-level and Include'd resources
6. Recurse into complex members (mode-gated), cutting cycles
7. Add one resource per validation rule
8. Store member names in the discovery cache
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localekeys.application.discovery.cache import DiscoveryCache, default_cache
from localekeys.application.discovery.classifier import is_simple_type
from localekeys.application.discovery.keys import (
    DESCRIPTION_SUFFIX,
    build_description_key,
    build_resource_key,
    build_validation_key,
    last_segment,
)
from localekeys.application.discovery.values import resolve_default_value
from localekeys.domain.exceptions import DuplicateResourceKeyError
from localekeys.domain.model.annotations import (
    Display,
    Ignore,
    Include,
    LocalizedModel,
    LocalizedResource,
    ResourceKey,
    find_class_annotation,
    find_class_annotations,
)
from localekeys.domain.model.discovered_resource import DiscoveredResource
from localekeys.domain.model.validation import ValidationRule
from localekeys.infrastructure.reflection import (
    collect_members,
    enum_members,
    is_enum_type,
    resolve_class,
    type_full_name,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from localekeys.domain.model.member import MemberInfo

logger = logging.getLogger(__name__)


def discover(
    cls: type,
    key_prefix: str | None = None,
    context_aware: bool = True,
    *,
    cache: DiscoveryCache | None = None,
    max_depth: int | None = None,
) -> list[DiscoveredResource]:
    """Discover all translatable resources of a class.

    Args:
        cls: Class to scan (resource container or model)
        key_prefix: Prefix for keys. None = derived from the class.
        context_aware: True = resource container, False = model
        cache: Cache receiving member names. None = default_cache.
        max_depth: Max nesting levels below cls. None = unbounded.

    Returns:
        Resources in declaration order, then recursion order

    Raises:
        TypeError: If cls is not a class
        ValueError: If max_depth is negative
        DuplicateResourceKeyError: If two resources share a key
    """
    if not isinstance(cls, type):
        raise TypeError(f"cls must be a class, got {type(cls).__name__}")
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    walk = _DiscoveryWalk(
        cache=cache if cache is not None else default_cache,
        context_aware=context_aware,
        max_depth=max_depth,
    )
    results = walk.visit(cls, key_prefix, chain=(), depth=0)

    # Keys are unique across the whole pass, not only per class
    check_duplicate_keys(results)
    return results


def check_duplicate_keys(resources: Iterable[DiscoveredResource]) -> None:
    """Fail if two resources share a key.

    Args:
        resources: Resources to check

    Raises:
        DuplicateResourceKeyError: Names colliding keys and their members
    """
    by_key: defaultdict[str, list[str]] = defaultdict(list)
    for resource in resources:
        by_key[resource.key].append(_origin_name(resource))

    duplicates = {key: tuple(names) for key, names in by_key.items() if len(names) > 1}
    if duplicates:
        raise DuplicateResourceKeyError(tuple(duplicates), duplicates)


@dataclass(frozen=True, slots=True)
class _MemberResources:
    """Resources produced by one member.

    Attributes:
        resources: All resources, in emission order
        anchors: Resources whose keys root validation messages
    """

    resources: tuple[DiscoveredResource, ...]
    anchors: tuple[DiscoveredResource, ...]


@dataclass(frozen=True, slots=True)
class _DiscoveryWalk:
    """One discovery pass: shared settings of a recursive walk."""

    cache: DiscoveryCache
    context_aware: bool
    max_depth: int | None

    def visit(
        self,
        cls: type,
        key_prefix: str | None,
        chain: tuple[type, ...],
        depth: int,
    ) -> list[DiscoveredResource]:
        """Discover resources of cls and of its nested members."""
        model = find_class_annotation(cls, LocalizedModel)
        prefix, prefix_specified = self._resolve_prefix(cls, key_prefix, model)

        resources: list[DiscoveredResource] = []
        anchors: list[DiscoveredResource] = []

        if not self.context_aware:
            resources.extend(_class_level_resources(cls, prefix))

        if is_enum_type(cls):
            resources.extend(_enum_resources(cls, prefix))
        else:
            for member in _scannable_members(cls, model):
                found = _discover_member(member, prefix, prefix_specified)
                resources.extend(found.resources)
                anchors.extend(found.anchors)

        check_duplicate_keys(resources)

        results = [r for r in resources if r.is_simple_type or r.member is None or r.member.has(Include)]

        chain = (*chain, cls)
        anchor_ids = {id(a) for a in anchors}
        for resource in resources:
            # Description resources share the member: only the primary one recurses
            if id(resource) not in anchor_ids:
                continue

            if not resource.is_simple_type:
                results.extend(self._recurse(resource, chain, depth))

            results.extend(_validation_resources(resource))

        self.cache.store(
            type_full_name(cls),
            (r.property_name for r in results if r.property_name),
        )
        return results

    def _resolve_prefix(
        self,
        cls: type,
        key_prefix: str | None,
        model: LocalizedModel | None,
    ) -> tuple[str, bool]:
        """Resolve key prefix and whether it was explicitly declared."""
        if self.context_aware:
            container = find_class_annotation(cls, LocalizedResource)
            if container is not None and container.key_prefix:
                return container.key_prefix, True
        elif model is not None and model.key_prefix:
            return model.key_prefix, True

        return key_prefix or type_full_name(cls), False

    def _recurse(
        self,
        resource: DiscoveredResource,
        chain: tuple[type, ...],
        depth: int,
    ) -> list[DiscoveredResource]:
        """Discover resources of a complex member's class, if allowed."""
        nested = resolve_class(resource.return_type)
        if nested is None:
            if resource.member is not None:
                logger.debug(
                    "skipping %s: %s is neither simple nor a single class",
                    resource.member,
                    resource.return_type,
                )
            return []

        # Models only descend into other models
        if not self.context_aware and find_class_annotation(nested, LocalizedModel) is None:
            return []

        if nested in chain:
            logger.debug(
                "cycle %s -> %s cut at %s",
                " -> ".join(c.__qualname__ for c in chain),
                nested.__qualname__,
                resource.key,
            )
            return []

        if self.max_depth is not None and depth >= self.max_depth:
            logger.debug("max depth %d reached at %s", self.max_depth, resource.key)
            return []

        return self.visit(nested, resource.key, chain, depth + 1)


def _scannable_members(cls: type, model: LocalizedModel | None) -> list[MemberInfo]:
    """Collect members, dropping Ignore'd and (only_included) non-Include'd."""
    declared_only = model is not None and not model.inherited
    only_included = model is not None and model.only_included

    return [
        member
        for member in collect_members(cls, declared_only=declared_only)
        if not member.has(Ignore) and (not only_included or member.has(Include))
    ]


def _class_level_resources(cls: type, prefix: str) -> list[DiscoveredResource]:
    """One resource per ResourceKey declared on the class itself."""
    return [
        DiscoveredResource(
            member=None,
            key=build_resource_key(prefix, declaration.key, separator=""),
            value=declaration.value or declaration.key,
            property_name=None,
            declaring_type=cls,
            return_type=str,
            is_simple_type=True,
        )
        for declaration in find_class_annotations(cls, ResourceKey)
    ]


def _enum_resources(cls: type, prefix: str) -> list[DiscoveredResource]:
    """One resource per enumeration name. Always terminal."""
    return [
        DiscoveredResource(
            member=member,
            key=build_resource_key(prefix, member.name),
            value=member.name,
            property_name=member.name,
            declaring_type=cls,
            return_type=member.return_type,
            is_simple_type=True,
        )
        for member in enum_members(cls)
    ]


def _discover_member(
    member: MemberInfo,
    prefix: str,
    prefix_specified: bool,
) -> _MemberResources:
    """Discover resources of one member.

    Without ResourceKey: primary resource (+ "-Description" resource).
    With ResourceKey(s): one flat resource per key, rooted at the
    class prefix only when that prefix was declared explicitly.
    """
    translation = resolve_default_value(member)
    overrides = member.find_all(ResourceKey)

    if not overrides:
        simple = is_simple_type(member.return_type)
        primary = DiscoveredResource(
            member=member,
            key=build_resource_key(prefix, member.name),
            value=translation,
            property_name=member.name,
            declaring_type=member.declaring_type,
            return_type=member.return_type,
            is_simple_type=simple,
        )

        display = member.find(Display)
        if display is None or not display.description:
            return _MemberResources(resources=(primary,), anchors=(primary,))

        description = DiscoveredResource(
            member=member,
            key=build_description_key(primary.key),
            value=display.description,
            property_name=f"{member.name}{DESCRIPTION_SUFFIX}",
            declaring_type=member.declaring_type,
            return_type=member.return_type,
            is_simple_type=simple,
        )
        return _MemberResources(resources=(primary, description), anchors=(primary,))

    explicit = tuple(
        DiscoveredResource(
            member=member,
            key=build_resource_key(
                prefix if prefix_specified else None,
                override.key,
                separator="",
            ),
            value=override.value or translation,
            property_name=None,
            declaring_type=member.declaring_type,
            return_type=member.return_type,
            is_simple_type=True,
        )
        for override in overrides
    )
    return _MemberResources(resources=explicit, anchors=explicit)


def _validation_resources(anchor: DiscoveredResource) -> list[DiscoveredResource]:
    """One resource per validation rule of the anchor's member."""
    member = anchor.member
    if member is None:
        return []

    bare_name = last_segment(anchor.key)
    return [
        DiscoveredResource(
            member=member,
            key=build_validation_key(anchor.key, rule),
            value=rule.error_message or bare_name,
            property_name=bare_name,
            declaring_type=anchor.declaring_type,
            return_type=anchor.return_type,
            is_simple_type=True,
        )
        for rule in member.find_all(ValidationRule)
    ]


def _origin_name(resource: DiscoveredResource) -> str:
    """Human-readable origin of a resource for error messages."""
    if resource.member is not None:
        return str(resource.member)
    return resource.declaring_type.__qualname__
