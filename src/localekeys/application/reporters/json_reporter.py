"""JSON reporter for machine-readable output.

Stdlib-only reporter. Output feeds persistence layers and editors.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from localekeys.application.reporters._base import BaseReporter
from localekeys.infrastructure.reflection import type_full_name

if TYPE_CHECKING:
    from collections.abc import Sequence

    from localekeys.domain.model.discovered_resource import DiscoveredResource


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Shape: {"count": N, "resources": [{"key", "value", ...}, ...]}
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, resources: Sequence[DiscoveredResource]) -> None:
        """Report resources as JSON.

        Args:
            resources: Discovered resources
        """
        data = {
            "count": len(resources),
            "resources": [self._resource_to_dict(r) for r in resources],
        }
        json.dump(data, self._output, indent=self._indent, ensure_ascii=False)
        self._output.write("\n")

    def _resource_to_dict(self, resource: DiscoveredResource) -> dict[str, object]:
        """Convert DiscoveredResource to JSON-serializable dict."""
        return {
            "key": resource.key,
            "value": resource.value,
            "property_name": resource.property_name,
            "declaring_type": type_full_name(resource.declaring_type),
            "return_type": _type_name(resource.return_type),
            "is_simple_type": resource.is_simple_type,
        }


def _type_name(tp: object) -> str:
    """Readable name of a class or typing form."""
    if isinstance(tp, type):
        return type_full_name(tp)
    return repr(tp)
