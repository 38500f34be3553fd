"""Character source with push-back and span tracking for diagnostics."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TextIO

from cdecl.errors import StreamPushbackFailure

EOF = ""


@dataclass(frozen=True)
class Span:
    """A range within a source."""

    file: str
    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def __str__(self) -> str:
        return f"{self.file}:{self.start_line}:{self.start_col}"


class CharSource:
    """Reads a text stream one character at a time.

    Keeps ``line`` (1-based) and ``column`` (number of characters consumed on
    the current line) up to date. One character of push-back is guaranteed,
    like ``ungetc``.
    """

    def __init__(self, stream: TextIO, filename: str = "<stdin>") -> None:
        self.stream = stream
        self.filename = filename
        self.line = 1
        self.column = 0
        self._pending: str | None = None
        self._last: str | None = None
        self._before_last: tuple[int, int] = (1, 0)

    @classmethod
    def from_string(cls, text: str, filename: str = "<string>") -> CharSource:
        return cls(io.StringIO(text), filename)

    def read_char(self) -> str:
        """Return the next character, or ``EOF`` when the stream is drained."""
        if self._pending is not None:
            ch = self._pending
            self._pending = None
        else:
            ch = self.stream.read(1)
        if ch == EOF:
            self._last = None
            return EOF

        self._before_last = (self.line, self.column)
        self._last = ch
        if ch == '\n':
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return ch

    def push_back(self, ch: str) -> None:
        """Return ``ch`` to the stream; it must be the character just read."""
        if self._pending is not None or self._last is None or ch != self._last:
            raise StreamPushbackFailure(
                f"cannot push back {ch!r}", self.span(),
            )
        self._pending = ch
        self._last = None
        self.line, self.column = self._before_last

    def span(self) -> Span:
        """A zero-width span at the current position."""
        return Span(self.filename, self.line, self.column, self.line, self.column)
