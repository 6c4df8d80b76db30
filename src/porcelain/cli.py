"""porcelain CLI — Typer application with status, parse, and init commands."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from porcelain import __version__
from porcelain.config.schema import OUTPUT_FORMATS, UNTRACKED_MODES

app = typer.Typer(
    name="porcelain",
    help="Parse git porcelain status into structured snapshots.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from porcelain.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _check_choice(value: Optional[str], choices: tuple[str, ...], label: str) -> None:
    if value is not None and value not in choices:
        console.print(f"[bold red]Invalid {label}:[/bold red] {value}")
        raise typer.Exit(code=2)


def _emit(snapshot, fmt: str, *, show_summary: bool, show_full_paths: bool) -> None:
    """Write the snapshot to stdout in the requested format."""
    from porcelain.output import json_report, terminal, yaml_report

    if fmt == "json":
        print(json_report.render(snapshot))
    elif fmt == "yaml":
        print(yaml_report.render(snapshot), end="")
    else:
        terminal.render(
            snapshot,
            show_summary=show_summary,
            show_full_paths=show_full_paths,
        )


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .porcelain.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml"),
    untracked: Optional[str] = typer.Option(None, "--untracked", "-u", help="Untracked files: all | normal | no"),
    exit_code: bool = typer.Option(False, "--exit-code", help="Exit 1 when the working tree is dirty"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Show the working-tree status of the current repository."""
    from porcelain.config.loader import ConfigError, find_config_file, load_config
    from porcelain.git.adapter import GitError, get_status
    from porcelain.git.status_parser import UnparseableLine

    _check_choice(format, OUTPUT_FORMATS, "format")
    _check_choice(untracked, UNTRACKED_MODES, "untracked mode")

    repo_root = _resolve_repo_root()

    # --- Load config ---
    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        cfg.output.format = format  # type: ignore[assignment]
    if untracked:
        cfg.status.untracked = untracked  # type: ignore[assignment]

    if verbose or debug:
        source = find_config_file(repo_root, config)
        console.print(f"[dim]Repo root: {repo_root}[/dim]")
        console.print(f"[dim]Config: {source or 'defaults'}[/dim]")
        console.print(f"[dim]Untracked mode: {cfg.status.untracked}[/dim]")

    # --- Run git status ---
    start = time.perf_counter()
    try:
        snapshot = get_status(repo_root, cfg)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except UnparseableLine as exc:
        console.print(f"[bold red]Parse error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    if debug:
        elapsed_ms = (time.perf_counter() - start) * 1000
        console.print(f"[dim]Status duration: {elapsed_ms:.0f}ms[/dim]")

    _emit(
        snapshot,
        cfg.output.format,
        show_summary=cfg.output.show_summary,
        show_full_paths=cfg.output.show_full_paths,
    )

    if exit_code and not snapshot.is_clean:
        raise typer.Exit(code=1)


# ── parse ─────────────────────────────────────────────────────────────────────


@app.command()
def parse(
    file: Optional[Path] = typer.Argument(None, help="Captured porcelain output (default: stdin)"),
    format: str = typer.Option("terminal", "--format", "-f", help="Output format: terminal | json | yaml"),
) -> None:
    """Parse captured `git status --porcelain --branch` output."""
    from porcelain.git.adapter import parse_status_text
    from porcelain.git.status_parser import UnparseableLine

    _check_choice(format, OUTPUT_FORMATS, "format")

    if file is not None:
        try:
            text = file.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
    else:
        text = sys.stdin.read()

    try:
        snapshot = parse_status_text(text)
    except UnparseableLine as exc:
        console.print(f"[bold red]Parse error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    _emit(snapshot, format, show_summary=True, show_full_paths=False)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .porcelain.toml in the repo root."""
    from porcelain.config.defaults import DEFAULT_TOML
    from porcelain.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"porcelain {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """porcelain — structured git status snapshots."""
