"""Character cursor over a text buffer that skips whitespace and tracks position."""

from __future__ import annotations

EOF = ""
"""Returned by the cursor once the text is exhausted."""

_WHITESPACE = frozenset(" \t\n\v\f\r")


class TextCursor:
    """Reads a text one significant character at a time.

    Whitespace is skipped before every read. Line and column numbers start at 1
    and are advanced for every character consumed, whitespace included.
    """

    __slots__ = ("_text", "_pos", "_line", "_column")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._line = 1
        self._column = 1

    @property
    def line(self) -> int:
        """Current line, starting at 1."""
        return self._line

    @property
    def column(self) -> int:
        """Current column, starting at 1."""
        return self._column

    def next_char(self) -> str:
        """Consume and return the next non-whitespace character, or EOF."""
        self._skip_whitespace()
        if self._pos >= len(self._text):
            return EOF
        ch = self._text[self._pos]
        self._pos += 1
        self._advance(ch)
        return ch

    def peek_char(self) -> str:
        """Return the next non-whitespace character without consuming anything."""
        pos = self._pos
        while pos < len(self._text) and self._text[pos] in _WHITESPACE:
            pos += 1
        return self._text[pos] if pos < len(self._text) else EOF

    def _advance(self, ch: str) -> None:
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._advance(self._text[self._pos])
            self._pos += 1