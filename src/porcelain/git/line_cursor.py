"""Forward-only scanning cursor over a single line of text."""

from __future__ import annotations

import re
from typing import Union


class LineCursor:
    """Position-aware scanning primitives for one line.

    None of the methods raise: a failed match is ``False`` and a read past
    the end of the line is ``""``.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        self.pos = 0

    @property
    def current(self) -> str:
        """Character under the cursor, or ``""`` at end of line."""
        return self.line[self.pos] if self.pos < len(self.line) else ""

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.line)

    @property
    def is_at_whitespace(self) -> bool:
        return not self.at_end and self.line[self.pos].isspace()

    def matches(self, expected: Union[str, re.Pattern[str]]) -> bool:
        """Return True if *expected* matches at the cursor."""
        if isinstance(expected, str):
            return self.line.startswith(expected, self.pos)
        return expected.match(self.line, self.pos) is not None

    def matches_char(self, ch: str) -> bool:
        return self.current == ch

    def move_next(self) -> None:
        if not self.at_end:
            self.pos += 1

    def move_past(self, ch: str) -> None:
        """Move past the next occurrence of *ch* and any run of it."""
        idx = self.line.find(ch, self.pos)
        if idx < 0:
            return
        self.pos = idx + 1
        while self.matches_char(ch):
            self.pos += 1

    def skip_whitespace(self) -> None:
        while self.is_at_whitespace:
            self.pos += 1

    def read_until(self, ch: str) -> str:
        """Read up to (not including) *ch*; reads to end if *ch* is absent."""
        idx = self.line.find(ch, self.pos)
        if idx < 0:
            return self.read_to_end()
        text = self.line[self.pos:idx]
        self.pos = idx
        return text

    def read_until_whitespace(self) -> str:
        start = self.pos
        while not self.at_end and not self.is_at_whitespace:
            self.pos += 1
        return self.line[start:self.pos]

    def read_to_end(self) -> str:
        text = self.line[self.pos:]
        self.pos = len(self.line)
        return text
