# tagbridge/cli/ui.py
"""
Shared UI helpers for CLI commands.

Messages go to stderr; stdout carries tag output only.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tagbridge.core.models import KindSpec

console = Console()
err_console = Console(stderr=True)


def error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def info(message: str) -> None:
    err_console.print(f"[dim]{escape(message)}[/dim]", highlight=False)


def kinds_table(kinds: Iterable[KindSpec]) -> Table:
    table = Table(title="Kinds")
    table.add_column("Name", style="cyan")
    table.add_column("Letter")
    table.add_column("Role")
    table.add_column("Prefix")
    table.add_column("Summary")

    for kind in kinds:
        table.add_row(
            Text(kind.name),
            Text(kind.letter or "-"),
            kind.role.value,
            Text(kind.prefix or "-"),
            Text(kind.summary_format or "-"),
        )
    return table
