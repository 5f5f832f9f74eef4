from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from mdbaccess.domain.models import Record


def _cell(value: Optional[str], width: int) -> str:
    if value is None:
        return "[dim]NULL[/dim]"
    if width and len(value) > width:
        return value[: width - 1] + "…"
    return value


def print_names(title: str, names: Sequence[str], console: Optional[Console] = None) -> None:
    """
    Render a single-column list (tables, columns) as a rich table.
    """
    console = console or Console()
    table = Table(title=title, box=box.ROUNDED, caption=f"{len(names)} item(s)")
    table.add_column("#", justify="right", style="magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    for index, name in enumerate(names, start=1):
        table.add_row(str(index), name)
    console.print(table)


def print_records(
    title: str,
    columns: Sequence[str],
    records: List[Record],
    limit: Optional[int] = None,
    max_width: int = 40,
    console: Optional[Console] = None,
) -> None:
    """
    Render decoded records as a rich table.

    Long values are cut to ``max_width`` characters and only the first
    ``limit`` rows are shown when a limit is given.
    """
    console = console or Console()

    if not records:
        console.print(f"[yellow]{title}: no rows.[/yellow]")
        return

    shown = records if limit is None else records[:limit]
    caption = f"{len(shown)} of {len(records)} row(s)"
    table = Table(title=title, box=box.ROUNDED, caption=caption)
    for name in columns:
        table.add_column(name, overflow="fold")
    for record in shown:
        table.add_row(*(_cell(record.get(name), max_width) for name in columns))
    console.print(table)


def print_dump_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Summarize a database dump, failed tables last.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No tables dumped.[/yellow]")
        return

    table = Table(title="Dump Results", box=box.ROUNDED)
    table.add_column("Table", style="cyan", no_wrap=True)
    table.add_column("Columns", justify="right", style="magenta")
    table.add_column("Rows", justify="right", style="green")
    table.add_column("File / Error", style="yellow")

    for res in sorted(results, key=lambda r: ("error" in r, r["table"])):
        if "error" in res:
            table.add_row(res["table"], "-", "-", f"[red]{res['error']}[/red]")
        else:
            table.add_row(res["table"], str(res["columns"]), f"{res['rows']:,}", res["file"])

    console.print(table)


__all__ = ["print_names", "print_records", "print_dump_results"]
