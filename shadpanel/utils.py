"""Shared utility functions for shadpanel.

Provides Rich-based console reporting and small async file-system helpers.
Diagnostics are written to stderr so that stdout only ever carries the list
of written paths, which callers may pipe into other tooling.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console(stderr=True)

# Plain stdout channel for machine-readable output.  Markup is disabled so
# that route segments such as ``[id]`` are printed verbatim.
output = Console(soft_wrap=True, markup=False, highlight=False, emoji=False)


# ---------------------------------------------------------------------------
# Async file-system helpers
# ---------------------------------------------------------------------------


async def path_exists(path: str | Path) -> bool:
    """Return ``True`` if *path* exists, checked off the event loop."""
    return await asyncio.to_thread(Path(path).exists)


async def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file in a worker thread."""
    return await asyncio.to_thread(Path(path).read_text, "utf-8")


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories first."""
    out = Path(path)
    await asyncio.to_thread(_write_file, out, content)
    return out


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[blue]i[/blue] {escape(message)}", highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_path(path: str | Path) -> None:
    """Print one path on stdout, unformatted."""
    output.print(str(path))


def print_summary_table(
    rows: list[tuple[str, ...]],
    columns: tuple[str, ...],
    title: str = "Summary",
) -> None:
    """Print a simple multi-column table.

    Args:
        rows: One tuple of cell values per row.
        columns: Column headers; the first column is rendered dim.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        table.add_column(column, style="dim" if index == 0 else None, no_wrap=index == 0)

    for row in rows:
        table.add_row(*(escape(str(cell)) for cell in row))

    console.print(table)
    console.print()
