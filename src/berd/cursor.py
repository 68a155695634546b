"""Input buffer with a bounded scan position.

The cursor owns the source text and a character offset into it. All moves
are clamped: a request that would run past the end of input is ignored
rather than raising, so sub-scanners never corrupt the position.

Thread Safety:
Cursor instances are owned by a single Lexer and are not shared.

"""

from __future__ import annotations

import sys

from berd.charsets import is_whitespace
from berd.location import SourceLocation


class Cursor:
    """Character cursor over immutable source text.

    Usage:
            >>> cursor = Cursor("fun x !")
            >>> cursor.read(3)
            'fun'
            >>> cursor.peek()
            ' '
            >>> cursor.current_location()
        SourceLocation(line=1, column=4, source_file=None)

    """

    __slots__ = ("_source", "_source_len", "_pos", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize cursor at the start of source.

        Args:
            source: Source text (never mutated)
            source_file: Optional source file path for locations
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file

    @property
    def source(self) -> str:
        return self._source

    @property
    def offset(self) -> int:
        """Current character offset (0 <= offset <= len(source))."""
        return self._pos

    # =========================================================================
    # Inspection
    # =========================================================================

    def has_remaining(self) -> bool:
        return self._pos < self._source_len

    def remaining_length(self) -> int:
        return self._source_len - self._pos

    def remaining(self) -> str:
        """Return the unread part of the source."""
        return self._source[self._pos :]

    def peek(self) -> str | None:
        """Peek at current character without advancing.

        Returns:
            Current character or None at end of input.
        """
        if self._pos >= self._source_len:
            return None
        return self._source[self._pos]

    def peek_at(self, distance: int) -> str | None:
        """Peek at the character `distance` positions past the current one."""
        pos = self._pos + distance
        if pos < 0 or pos >= self._source_len:
            return None
        return self._source[pos]

    def peek_text(self, count: int) -> str:
        """Return the next `count` characters without advancing.

        If fewer than `count` characters remain, returns an empty string
        instead of a truncated slice.
        """
        if count > self.remaining_length():
            return ""
        return self._source[self._pos : self._pos + count]

    # =========================================================================
    # Movement
    # =========================================================================

    def advance(self, count: int) -> None:
        """Move forward by `count` characters; no-op if that would overflow."""
        if self._pos + count > self._source_len:
            return
        self._pos += count

    def retreat(self, count: int = 1) -> None:
        """Move back by `count` characters, stopping at the start of input."""
        self._pos = max(0, self._pos - count)

    def read(self, count: int) -> str:
        """Consume and return the next `count` characters.

        Out-of-bounds reads return "" and leave the position unchanged.
        """
        text = self.peek_text(count)
        self.advance(count)
        return text

    def skip_whitespace(
        self,
        max_count: int = sys.maxsize,
        preserve_single: bool = False,
        *,
        stop_at_newline: bool = False,
    ) -> None:
        """Skip up to `max_count` whitespace characters.

        Args:
            max_count: Maximum number of characters to skip
            preserve_single: Leave a lone trailing space in place when it is
                the only character left, so end-of-input checks still see it
            stop_at_newline: Stop before a newline instead of consuming it
        """
        if preserve_single and self.remaining_length() == 1 and self.peek() == " ":
            return

        skipped = 0
        while skipped < max_count and self._pos < self._source_len:
            char = self._source[self._pos]
            if not is_whitespace(char) or (stop_at_newline and char == "\n"):
                break
            self._pos += 1
            skipped += 1

    # =========================================================================
    # Location tracking
    # =========================================================================

    def current_location(self) -> SourceLocation:
        """Location of the current offset, recomputed from the source."""
        return SourceLocation.from_offset(self._source, self._pos, self._source_file)
