"""Scanner primitives: a forward-only cursor and whitespace/comment skipping."""

from __future__ import annotations


# space plus \b \t \n \v \f \r
WHITESPACE = frozenset(b" \b\t\n\v\f\r")

_NEWLINE = ord("\n")


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------

class Cursor:
    """Read position inside an immutable byte buffer.

    ``pos`` only moves forward and never exceeds ``end``.
    """

    __slots__ = ("data", "pos", "end")

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self.data = data
        self.end = len(data)
        self.pos = min(pos, self.end)

    @property
    def at_end(self) -> bool:
        return self.pos >= self.end

    def peek(self, offset: int = 0) -> int | None:
        """Byte at ``pos + offset``, or ``None`` past the end."""
        i = self.pos + offset
        if i < self.end:
            return self.data[i]
        return None

    def startswith(self, marker: bytes) -> bool:
        return self.data.startswith(marker, self.pos, self.end)

    def advance(self, count: int = 1) -> int:
        """Move forward at most *count* bytes; return how far it moved."""
        new_pos = min(self.pos + count, self.end)
        moved = new_pos - self.pos
        self.pos = new_pos
        return moved

    def skip_to(self, stop: int) -> int:
        """Advance to the next byte equal to *stop* (not consuming it), or to the end."""
        i = self.data.find(bytes((stop,)), self.pos, self.end)
        return self.advance((self.end if i < 0 else i) - self.pos)

    def location(self, offset: int | None = None) -> tuple[int, int]:
        """1-based (line, column) of *offset* (default: current position)."""
        if offset is None:
            offset = self.pos
        line = self.data.count(_NEWLINE, 0, offset) + 1
        column = offset - (self.data.rfind(_NEWLINE, 0, offset) + 1) + 1
        return line, column

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, end={self.end})"


# ---------------------------------------------------------------------------
# Skipping
# ---------------------------------------------------------------------------

def is_whitespace(byte: int | None) -> bool:
    return byte is not None and byte in WHITESPACE


def skip_whitespace(cursor: Cursor) -> int:
    """Skip whitespace; return the number of bytes skipped (0 = no progress)."""
    start = cursor.pos
    while not cursor.at_end and cursor.data[cursor.pos] in WHITESPACE:
        cursor.pos += 1
    return cursor.pos - start


def skip_line_comment(cursor: Cursor) -> int:
    """Skip ``// …`` up to and including the next newline (or to the end)."""
    if not cursor.startswith(b"//"):
        return 0
    start = cursor.pos
    cursor.skip_to(_NEWLINE)
    cursor.advance()
    return cursor.pos - start


def skip_block_comment(cursor: Cursor) -> int:
    """Skip ``/* … */``; an unterminated comment runs to the end of the buffer.

    The opening marker is consumed before the search, so ``/*/`` does not close.
    """
    if not cursor.startswith(b"/*"):
        return 0
    start = cursor.pos
    close = cursor.data.find(b"*/", start + 2, cursor.end)
    if close < 0:
        cursor.pos = cursor.end
    else:
        cursor.pos = close + 2
    return cursor.pos - start


def skip_comments(cursor: Cursor) -> int:
    """One line comment, then one block comment; return the bytes skipped."""
    return skip_line_comment(cursor) + skip_block_comment(cursor)
