"""Reporter contract.

A reporter renders the flat resource list produced by discovery.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from localekeys.domain.model.discovered_resource import DiscoveredResource


class BaseReporter(ABC):
    """Renders discovered resources somewhere.

    Built in: PlainTextReporter (key = "value" lines) and JSONReporter
    (export for persistence layers). ConsoleReporter returns a string
    instead and does not derive from this class.

    Example:
        class PoReporter(BaseReporter):
            def report(self, resources: Sequence[DiscoveredResource]) -> None:
                for r in resources:
                    print(f'msgctxt "{r.key}"\\nmsgid "{r.value}"\\n')
    """

    @abstractmethod
    def report(self, resources: Sequence[DiscoveredResource]) -> None:
        """Render resources.

        Args:
            resources: Output of discover() / discover_all(), in order
        """
