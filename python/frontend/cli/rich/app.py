"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output of the same result the
vanilla frontend prints.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.models.result import NO_SOLUTION, SearchResult

console = Console()


# -- rendering ----------------------------------------------------------------


def _render_stats(result: SearchResult) -> Text:
    stats = Text()
    stats.append("Total configs: ", style="dim")
    stats.append(str(result.total_configs), style="bold yellow")
    stats.append("    Unique configs: ", style="dim")
    stats.append(str(result.unique_configs), style="bold yellow")
    return stats


def _render_path(result: SearchResult) -> Table | Text:
    """Return a table with one row per step, or the no-solution notice."""
    if result.path is None:
        return Text(NO_SOLUTION, style="bold red")

    table = Table(
        box=rich.box.ROUNDED,
        border_style="bright_blue",
        show_lines=False,
    )
    table.add_column("Step", justify="right", style="dim")
    table.add_column("Configuration")

    last = len(result.path) - 1
    for i, config in enumerate(result.path):
        style = "bold green" if i == last else "bold white"
        table.add_row(str(i), Text(str(config), style=style))
    return table


# -- public entry point -------------------------------------------------------


def run(title: str, result: SearchResult) -> None:
    """Render *title*, the search statistics, and the solution path."""
    body = Group(
        Align.center(_render_stats(result)),
        Text(""),
        Align.center(_render_path(result)),
    )
    panel = Panel(
        body,
        title=Text(title, style="bold cyan"),
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)
