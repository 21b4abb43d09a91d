from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

_KIND_STYLES = {
    "added": "green",
    "removed": "magenta",
    "detail": "cyan",
    "denied": "bold red",
}


def print_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render scenario results as a rich table, one row per notification.

    Failed scenarios get a single row carrying the error message.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(
        title="Bookshelf Pattern Scenarios",
        box=box.ROUNDED,
        caption=f"{len(results)} scenario(s)",
    )
    table.add_column("Scenario", style="cyan", no_wrap=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Message")

    for res in results:
        scenario = res.get("scenario", "Unknown")
        kinds = res.get("kinds", [])
        messages = res.get("notifications", [])

        if res.get("error"):
            table.add_row(scenario, "-", "[bold red]error[/bold red]", str(res["error"]))
        elif not messages:
            table.add_row(scenario, "-", "[dim]none[/dim]", "")

        for index, (kind, message) in enumerate(zip(kinds, messages), start=1):
            style = _KIND_STYLES.get(kind, "white")
            table.add_row(scenario, str(index), f"[{style}]{kind}[/{style}]", message)

        table.add_section()

    console.print(table)


__all__ = ["print_results"]
