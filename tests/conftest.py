"""Shared test fixtures — sample porcelain dumps, a collecting parser, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path
from typing import List

import pytest

from porcelain.git.models import StatusSnapshot
from porcelain.git.status_parser import StatusParser


@pytest.fixture
def snapshots() -> List[StatusSnapshot]:
    """Sink list that collects every snapshot a parser emits."""
    return []


@pytest.fixture
def parser(snapshots: List[StatusSnapshot]) -> StatusParser:
    """A parser wired to append emitted snapshots to ``snapshots``."""
    return StatusParser(on_status=snapshots.append)


@pytest.fixture
def status_clean() -> str:
    """Tracked branch, nothing to commit."""
    return "## master...origin/master\n"


@pytest.fixture
def status_diverged() -> str:
    """Tracked branch that is both ahead and behind, with every entry shape."""
    return textwrap.dedent("""\
        ## master...origin/master [ahead 2, behind 3]
         M a.txt
         D b.txt
        A  c.txt
        R  old.txt -> new.txt
        ?? d.txt
    """)


@pytest.fixture
def status_quoted() -> str:
    """Paths with spaces are quoted by git."""
    return textwrap.dedent("""\
        ## feature/x
        A  "my file.txt"
        R  "old name.txt" -> "new name.txt"
        ?? "notes dir/todo list.md"
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    (tmp_path / "keep.txt").write_text("keep\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path


@pytest.fixture
def current_branch(tmp_git_repo: Path) -> str:
    """Name of the branch git init checked out (master or main)."""
    return subprocess.run(
        ["git", "rev-parse", "--abbrev-ref", "HEAD"],
        cwd=tmp_git_repo, capture_output=True, check=True, text=True,
    ).stdout.strip()
