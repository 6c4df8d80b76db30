"""Streaming parser for ``git status --porcelain --branch`` output.

Lines are pushed in one at a time through :meth:`StatusParser.consume_line`;
``None`` marks the end of one status run. At that point the accumulated
branch header and file entries are handed to the ``on_status`` callback as
a single :class:`StatusSnapshot` and the parser resets for the next run.

Recognised line shapes::

    ## master...origin/master [ahead 1, behind 2]
     M modified.txt
     D deleted.txt
    R  old.txt -> new.txt
    A  added.txt
    ?? untracked.txt

Anything else raises :class:`UnparseableLine`.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, List, Optional

from porcelain.git.line_cursor import LineCursor
from porcelain.git.models import (
    StatusEntry,
    StatusEntryFactory,
    StatusKind,
    StatusSnapshot,
)

_HEADER_MARKER = "##"
_BRANCH_SEPARATOR = "..."
_RENAME_SEPARATOR = "->"
_DELTA_SEPARATOR = ", "

# master...origin/master [ahead 1, behind 1]
_TRACKED_AND_DELTA_RE = re.compile(r"(\S+)\.\.\.(.*)\s\[(.*)\]")

# Leading space: index unchanged, worktree changed.
_WORKTREE_CODES = {
    "M": StatusKind.MODIFIED,
    "D": StatusKind.DELETED,
}

# Leading letter: index changed (or untracked).
_INDEX_CODES = {
    "R": StatusKind.RENAMED,
    "A": StatusKind.ADDED,
    "?": StatusKind.UNTRACKED,
}

StatusCallback = Callable[[StatusSnapshot], None]


class UnparseableLine(ValueError):
    """Raised when a line does not match any shape expected in the current state."""

    def __init__(self, line: str, reason: str = "unexpected input") -> None:
        super().__init__(f'{reason}: "{line}"')
        self.line = line
        self.reason = reason


class ParserState(str, Enum):
    AWAITING_HEADER = "awaiting_header"
    COLLECTING_ENTRIES = "collecting_entries"


def _strip_quotes(text: str) -> str:
    """Remove one leading and one trailing double quote, if present."""
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


class StatusParser:
    """Stateful, line-at-a-time porcelain status parser.

    Usage::

        parser = StatusParser(on_status=snapshots.append)
        for line in lines:
            parser.consume_line(line)
        parser.consume_line(None)

    Not safe for concurrent use: feed each instance from a single caller.
    """

    def __init__(
        self,
        factory: Optional[StatusEntryFactory] = None,
        on_status: Optional[StatusCallback] = None,
    ) -> None:
        self.factory = factory or StatusEntryFactory()
        self.on_status = on_status
        self.reset()

    @property
    def state(self) -> ParserState:
        return self._state

    def reset(self) -> None:
        """Drop all accumulated state and wait for a new header line."""
        self._state = ParserState.AWAITING_HEADER
        self._local_branch: Optional[str] = None
        self._remote_branch: Optional[str] = None
        self._ahead = 0
        self._behind = 0
        self._entries: List[StatusEntry] = []

    def consume_line(self, line: Optional[str]) -> None:
        """Consume one line, or the ``None`` end-of-stream sentinel."""
        if self.on_status is None:
            return

        if line is None:
            self._emit()
            return

        if self._state is ParserState.AWAITING_HEADER:
            self._parse_header(line)
            self._state = ParserState.COLLECTING_ENTRIES
        else:
            self._entries.append(self._parse_entry(line))

    # --- header ---

    def _parse_header(self, line: str) -> None:
        cursor = LineCursor(line)
        if not cursor.matches(_HEADER_MARKER):
            raise UnparseableLine(line, "expected branch header")
        cursor.move_past("#")
        cursor.skip_whitespace()

        if cursor.matches(_TRACKED_AND_DELTA_RE):
            branches_text = cursor.read_until_whitespace()
            cursor.move_past("[")
            self._parse_deltas(cursor.read_until("]"), line)
        else:
            branches_text = cursor.read_to_end()

        branches = [b for b in branches_text.split(_BRANCH_SEPARATOR) if b]
        if not branches:
            raise UnparseableLine(line, "missing branch name")
        self._local_branch = branches[0]
        if len(branches) > 1:
            self._remote_branch = branches[1]

    def _parse_deltas(self, delta_text: str, line: str) -> None:
        for delta in (d for d in delta_text.split(_DELTA_SEPARATOR) if d):
            parts = delta.split(" ")
            if len(parts) != 2 or not parts[1].isdecimal():
                raise UnparseableLine(line, f"malformed delta '{delta}'")
            label, count = parts[0], int(parts[1])
            if label == "ahead":
                self._ahead = count
            elif label == "behind":
                self._behind = count
            else:
                raise UnparseableLine(line, f"unexpected delta '{label}'")

    # --- entries ---

    def _parse_entry(self, line: str) -> StatusEntry:
        cursor = LineCursor(line)
        original_path: Optional[str] = None

        if cursor.is_at_whitespace:
            cursor.skip_whitespace()
            status = _WORKTREE_CODES.get(cursor.current)
        else:
            status = _INDEX_CODES.get(cursor.current)
        if status is None:
            raise UnparseableLine(line, "unrecognised status code")

        if status is StatusKind.UNTRACKED:
            cursor.move_past("?")
        else:
            cursor.move_next()
        # Status code must end in a blank: no two-letter XY codes.
        if not cursor.is_at_whitespace:
            raise UnparseableLine(line, "unrecognised status code")
        cursor.skip_whitespace()
        rest = cursor.read_to_end()

        if status is StatusKind.RENAMED:
            sides = [
                _strip_quotes(s.strip())
                for s in rest.split(_RENAME_SEPARATOR)
                if s
            ]
            if len(sides) != 2 or not all(sides):
                raise UnparseableLine(line, "malformed rename")
            original_path, path = sides
        else:
            path = _strip_quotes(rest)
        if not path:
            raise UnparseableLine(line, "missing path")

        return self.factory.create(path, status, original_path)

    # --- emit ---

    def _emit(self) -> None:
        snapshot = StatusSnapshot(
            local_branch=self._local_branch,
            remote_branch=self._remote_branch,
            ahead=self._ahead,
            behind=self._behind,
            entries=self._entries if self._entries else None,
        )
        self.on_status(snapshot)  # type: ignore[misc]
        self.reset()
