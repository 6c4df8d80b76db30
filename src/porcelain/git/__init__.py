"""Git interface layer — adapter, status parsing, models."""

from porcelain.git.adapter import (
    GitError,
    feed,
    get_repo_root,
    get_status,
    parse_status_text,
    stream_status_lines,
)
from porcelain.git.line_cursor import LineCursor
from porcelain.git.models import StatusEntry, StatusEntryFactory, StatusKind, StatusSnapshot
from porcelain.git.status_parser import ParserState, StatusParser, UnparseableLine

__all__ = [
    "GitError",
    "LineCursor",
    "ParserState",
    "StatusEntry",
    "StatusEntryFactory",
    "StatusKind",
    "StatusParser",
    "StatusSnapshot",
    "UnparseableLine",
    "feed",
    "get_repo_root",
    "get_status",
    "parse_status_text",
    "stream_status_lines",
]
