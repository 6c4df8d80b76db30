"""Git subprocess wrapper — repo root lookup and streaming porcelain status."""

from __future__ import annotations

import subprocess
import tempfile
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from porcelain.git.models import StatusEntryFactory, StatusSnapshot
from porcelain.git.status_parser import StatusParser

if TYPE_CHECKING:
    from porcelain.config.schema import PorcelainConfig


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        raise GitError(f"git error: {result.stderr.strip()}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def status_args(untracked: str = "all") -> List[str]:
    """Return the git arguments that produce parser-compatible output."""
    return ["status", "--porcelain=v1", "--branch", f"--untracked-files={untracked}"]


def stream_status_lines(
    repo_root: Path,
    *,
    untracked: str = "all",
    timeout: int = 30,
) -> Iterator[Optional[str]]:
    """Yield porcelain status lines as git writes them, then a ``None`` sentinel.

    Raises GitError if git is missing, times out, or exits non-zero.
    """
    args = status_args(untracked)
    # stderr goes to a spool file so a chatty git cannot block on a full pipe.
    with tempfile.TemporaryFile() as err_file:
        try:
            proc = subprocess.Popen(
                ["git", *args],
                cwd=repo_root,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=err_file,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError:
            raise GitError("git is not installed or not on PATH")

        # Hard timeout: reading stdout blocks, so a timer kills a stuck git.
        timer = threading.Timer(timeout, proc.kill)
        timer.daemon = True
        timer.start()
        try:
            assert proc.stdout is not None
            for raw in proc.stdout:
                yield raw.rstrip("\n").rstrip("\r")
            proc.wait()
        finally:
            timed_out = not timer.is_alive()
            timer.cancel()
            if proc.poll() is None:
                proc.kill()
                proc.wait()
            if proc.stdout is not None:
                proc.stdout.close()

        err_file.seek(0)
        stderr = err_file.read().decode("utf-8", errors="replace")

    if timed_out:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")
    if proc.returncode != 0:
        raise GitError(f"git error: {stderr.strip()}")
    yield None


def feed(parser: StatusParser, lines: Iterable[Optional[str]]) -> None:
    """Push every line (sentinels included) into *parser*, in order."""
    for line in lines:
        parser.consume_line(line)


def _collect(factory: StatusEntryFactory, lines: Iterable[Optional[str]]) -> StatusSnapshot:
    snapshots: List[StatusSnapshot] = []
    parser = StatusParser(factory, on_status=snapshots.append)
    feed(parser, lines)
    if len(snapshots) != 1:
        raise GitError(f"expected one status snapshot, got {len(snapshots)}")
    return snapshots[0]


def parse_status_text(
    text: str,
    factory: Optional[StatusEntryFactory] = None,
) -> StatusSnapshot:
    """Parse captured porcelain output (one status run) into a snapshot."""
    lines: List[Optional[str]] = [line for line in text.splitlines() if line.strip()]
    lines.append(None)
    return _collect(factory or StatusEntryFactory(), lines)


def get_status(repo_root: Path, config: Optional[PorcelainConfig] = None) -> StatusSnapshot:
    """Run ``git status`` in *repo_root* and return its parsed snapshot."""
    untracked = config.status.untracked if config else "all"
    timeout = config.status.timeout if config else 30
    return _collect(
        StatusEntryFactory(repo_root),
        stream_status_lines(repo_root, untracked=untracked, timeout=timeout),
    )
