"""Data models for porcelain status parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class StatusKind(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    UNTRACKED = "untracked"


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single changed or untracked file from a status report."""

    path: str
    status: StatusKind
    original_path: Optional[str] = None  # set on renames
    full_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "status": self.status.value,
            **({"original_path": self.original_path} if self.original_path else {}),
            **({"full_path": self.full_path} if self.full_path else {}),
        }


class StatusEntryFactory:
    """Build StatusEntry values, optionally anchored to a repository root."""

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = repo_root

    def create(
        self,
        path: str,
        status: StatusKind,
        original_path: Optional[str] = None,
    ) -> StatusEntry:
        full_path = None
        if self.repo_root is not None:
            full_path = (Path(self.repo_root) / path).as_posix()
        return StatusEntry(
            path=path,
            status=status,
            original_path=original_path,
            full_path=full_path,
        )


@dataclass
class StatusSnapshot:
    """Branch metadata plus the ordered file entries of one status run.

    ``entries`` is ``None`` for a clean working tree.
    """

    local_branch: Optional[str] = None
    remote_branch: Optional[str] = None
    ahead: int = 0
    behind: int = 0
    entries: Optional[List[StatusEntry]] = None

    @property
    def is_clean(self) -> bool:
        return not self.entries

    def counts(self) -> Dict[str, int]:
        """Return a tally of entries per status kind, in enum order."""
        tally = {kind.value: 0 for kind in StatusKind}
        for entry in self.entries or []:
            tally[entry.status.value] += 1
        return tally

    def to_dict(self) -> Dict[str, Any]:
        return {
            "local_branch": self.local_branch,
            "remote_branch": self.remote_branch,
            "ahead": self.ahead,
            "behind": self.behind,
            "clean": self.is_clean,
            "entries": [e.to_dict() for e in self.entries or []],
        }
