"""Rich terminal reporter — branch line, coloured status table, summary."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from porcelain.git.models import StatusEntry, StatusKind, StatusSnapshot

_STATUS_STYLE = {
    StatusKind.ADDED: "bold green",
    StatusKind.MODIFIED: "bold yellow",
    StatusKind.DELETED: "bold red",
    StatusKind.RENAMED: "bold cyan",
    StatusKind.UNTRACKED: "bold magenta",
}

_STATUS_CODE = {
    StatusKind.ADDED: "A",
    StatusKind.MODIFIED: "M",
    StatusKind.DELETED: "D",
    StatusKind.RENAMED: "R",
    StatusKind.UNTRACKED: "??",
}


def _status_pill(kind: StatusKind) -> Text:
    return Text(f" {_STATUS_CODE[kind]} {kind.value} ", style=_STATUS_STYLE[kind])


def _branch_line(snapshot: StatusSnapshot) -> Text:
    line = Text("On branch ", style="dim")
    line.append(snapshot.local_branch or "(unknown)", style="bold")
    if snapshot.remote_branch:
        line.append(" tracking ", style="dim")
        line.append(snapshot.remote_branch, style="bold blue")
    if snapshot.ahead:
        line.append(f"  ↑{snapshot.ahead}", style="green")
    if snapshot.behind:
        line.append(f"  ↓{snapshot.behind}", style="red")
    return line


def _path_cell(entry: StatusEntry, show_full_paths: bool) -> Text:
    path = entry.full_path if show_full_paths and entry.full_path else entry.path
    if entry.original_path:
        return Text(f"{entry.original_path} → {path}")
    return Text(path)


def render(
    snapshot: StatusSnapshot,
    *,
    show_summary: bool = True,
    show_full_paths: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print a status snapshot to the terminal using Rich."""
    console = console or Console()

    console.print(_branch_line(snapshot))

    if snapshot.is_clean:
        console.print("[bold green]✅ Nothing to commit — working tree clean.[/bold green]")
        return

    console.print()
    table = Table(show_lines=False, title_style="bold", border_style="dim")
    table.add_column("Status", justify="center", no_wrap=True)
    table.add_column("Path", style="magenta")

    for entry in snapshot.entries or []:
        table.add_row(_status_pill(entry.status), _path_cell(entry, show_full_paths))

    console.print(table)

    if show_summary:
        _print_summary(console, snapshot)


def _print_summary(console: Console, snapshot: StatusSnapshot) -> None:
    console.print()
    for kind, count in snapshot.counts().items():
        if count:
            console.print(f"[dim]{kind.capitalize() + ':':<11}[/dim] {count}")
    console.print(f"[dim]{'Total:':<11}[/dim] {len(snapshot.entries or [])}")
