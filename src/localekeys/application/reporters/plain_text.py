"""Plain text reporter using print().

Stdlib-only reporter: one `key = "value"` line per resource.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from localekeys.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from localekeys.domain.model.discovered_resource import DiscoveredResource


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None, *, sort_keys: bool = False) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            sort_keys: Order lines by key instead of discovery order
        """
        self._output = output if output is not None else sys.stdout
        self._sort_keys = sort_keys

    def report(self, resources: Sequence[DiscoveredResource]) -> None:
        """Report resources as plain text.

        Args:
            resources: Discovered resources
        """
        ordered = sorted(resources, key=lambda r: r.key) if self._sort_keys else resources
        for resource in ordered:
            print(str(resource), file=self._output)
        print(f"# {len(resources)} resources", file=self._output)
