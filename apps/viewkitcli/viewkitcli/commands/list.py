"""List command - show compiled pages and their fragments"""

from __future__ import annotations

from rich.table import Table

from viewkit import TemplateAdapter

from .utils import console


def list_command(adapter: TemplateAdapter, show_fragments: bool = True) -> None:
    """Print every registered page id."""
    described = adapter.describe()

    if not described:
        console.print("[yellow]No page templates found[/yellow]")
        return

    table = Table()
    table.add_column("Page", style="cyan")
    table.add_column("Entry")
    if show_fragments:
        table.add_column("Partials/Layouts")

    for pid, names in described.items():
        unit = adapter.lookup(pid)
        row = [pid, unit.entry or ""]
        if show_fragments:
            row.append("\n".join(n for n in names if n != unit.entry))
        table.add_row(*row)

    console.print(table)
