"""Console reporter: discovered resources → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from localekeys.infrastructure.reflection import type_full_name

if TYPE_CHECKING:
    from collections.abc import Sequence

    from localekeys.domain.model.discovered_resource import DiscoveredResource


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults (convenience).
    Immutable (frozen dataclass).

    Attributes:
        group_by_type: One table per declaring class instead of one table.
        show_member: Show member and simple-type columns.
        max_rows: Max rows to display. None = unlimited.
        width: Console width in characters.
    """

    group_by_type: bool = True
    show_member: bool = True
    max_rows: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_rows is not None and self.max_rows < 0:
            raise ValueError(f"max_rows must be >= 0, got {self.max_rows}")
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, resources: Sequence[DiscoveredResource]) -> str:
        """Format resources as rich formatted string.

        Args:
            resources: Discovered resources

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        shown = list(resources)
        if self._config.max_rows is not None:
            shown = shown[: self._config.max_rows]

        console.print()
        console.rule("[bold]LOCALIZABLE RESOURCES[/bold]")
        console.print()
        console.print(f"[bold]Resources:[/bold] {len(resources)}")
        console.print()

        if self._config.group_by_type:
            for type_name, group in self._group_by_type(shown).items():
                console.print(f"[yellow]{type_name}[/yellow] ({len(group)})")
                console.print(self._create_table(group))
                console.print()
        else:
            console.print(self._create_table(shown))

        hidden = len(resources) - len(shown)
        if hidden > 0:
            console.print(f"[dim]... {hidden} more[/dim]")

        return output.getvalue()

    def _group_by_type(self, resources: list[DiscoveredResource]) -> dict[str, list[DiscoveredResource]]:
        """Group resources by declaring class, in first-seen order."""
        grouped: dict[str, list[DiscoveredResource]] = {}
        for resource in resources:
            grouped.setdefault(type_full_name(resource.declaring_type), []).append(resource)
        return grouped

    def _create_table(self, resources: list[DiscoveredResource]) -> Table:
        """Create resource table."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="green")
        if self._config.show_member:
            table.add_column("Member", style="dim")
            table.add_column("Simple", style="dim")

        for resource in resources:
            row = [resource.key, resource.value]
            if self._config.show_member:
                row.append(resource.property_name or "-")
                row.append("yes" if resource.is_simple_type else "no")
            table.add_row(*row)

        return table
