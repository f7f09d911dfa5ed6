"""Misconfigured localizable classes: discovery must reject them."""

from typing import Annotated

from localekeys import ResourceKey, localized_model


@localized_model
class DuplicateModel:
    first: Annotated[str, ResourceKey("Same.Key")]
    second: Annotated[str, ResourceKey("Same.Key")]


@localized_model
class InnerSharedKeyModel:
    label: Annotated[str, ResourceKey("Shared.Key")]


@localized_model
class OuterSharedKeyModel:
    label: Annotated[str, ResourceKey("Shared.Key")]
    inner: InnerSharedKeyModel
