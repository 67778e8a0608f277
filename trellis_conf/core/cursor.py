"""Lookahead cursor and token reader over a text stream."""

from typing import Protocol

BLANK = " \t\r\n\f\v"
HORIZONTAL_BLANK = " \t\r\f\v"


class LineStream(Protocol):
    """Anything that can hand out one line of text at a time."""

    def readline(self) -> str: ...


class Cursor:
    """Character cursor with one line of lookahead.

    The stream is read a line at a time; nothing is consumed by the ``peek`` and
    ``at_*`` methods except blanks and, at entry boundaries, comments.

    Parameters
    ----------
    stream : LineStream
        Text stream to read from. It is not closed by the cursor.

    Attributes
    ----------
    lineno : int
        1-based number of the line currently being read, 0 before any input.
    """

    def __init__(self, stream: LineStream) -> None:
        self._stream = stream
        self._line = ""
        self._pos = 0
        self._eof = False
        self.lineno = 0

    def _peek(self) -> str:
        """Return the next character without consuming it, ``""`` at end of input."""
        while self._pos >= len(self._line):
            if self._eof:
                return ""
            self._line = self._stream.readline()
            self._pos = 0
            if not self._line:
                self._eof = True
                return ""
            self.lineno += 1
        return self._line[self._pos]

    def _skip(self, chars: str) -> str:
        la = self._peek()
        while la and la in chars:
            self._pos += 1
            la = self._peek()
        return la

    def _skip_horizontal(self) -> str:
        # never refills: the current line ends at its newline
        while self._pos < len(self._line) and self._line[self._pos] in HORIZONTAL_BLANK:
            self._pos += 1
        if self._pos >= len(self._line):
            return self._peek()
        return self._line[self._pos]

    def peek_non_blank(self) -> str:
        """Skip blanks and return the next character, ``""`` at end of input."""
        return self._skip(BLANK)

    def at_entry(self) -> bool:
        """Skip blanks and ``#`` comments, return whether an entry follows."""
        while (la := self.peek_non_blank()) == "#":
            end = self._line.find("\n", self._pos)
            self._pos = len(self._line) if end < 0 else end
        return la != ""

    def at_block_end(self) -> bool:
        """Return whether the next non-blank character closes a nested block."""
        return self.peek_non_blank() in ("", ".")

    def _read_token(self) -> str:
        start = self._pos
        end = start
        while end < len(self._line) and self._line[end] not in BLANK:
            end += 1
        self._pos = end
        return self._line[start:end]

    def read_keyword(self) -> str | None:
        """Read the next token, skipping any blanks including line breaks."""
        if not self.peek_non_blank():
            return None
        return self._read_token()

    def read_word(self) -> str | None:
        """Read the next token on the current line, ``None`` if the line ends first."""
        la = self._skip_horizontal()
        if la == "" or la == "\n" or self._pos == 0:
            # a fresh line means the previous one ended without a token
            return None
        return self._read_token()

    def read_rest_of_line(self) -> str | None:
        """Read what remains of the current line, ``None`` if nothing does."""
        la = self._skip_horizontal()
        if la == "" or la == "\n" or self._pos == 0:
            return None
        end = self._line.find("\n", self._pos)
        if end < 0:
            end = len(self._line)
        text = self._line[self._pos : end].rstrip(HORIZONTAL_BLANK)
        self._pos = end
        return text
