"""End-of-line marker scanner mixin.

Both markers end the scan. They differ in how much trailing input they
check:

- ``!`` (strict): everything after it, once whitespace is skipped, must be
  more ``!`` characters or newlines, through end of input.
- ``?`` (debug): only the single character after the skipped whitespace is
  checked and must be a newline. Input beyond it is never read.
"""

from __future__ import annotations

from typing import NoReturn

from berd.config import LexConfig
from berd.cursor import Cursor
from berd.errors import DeadCodeError, LexError
from berd.lexer.modes import ScanState
from berd.tokens import TokenKind

# Characters allowed after a strict marker
STRICT_TRAILERS: frozenset[str] = frozenset("!\n")


class MarkerScannerMixin:
    """Mixin providing strict and debug end-of-line scanning."""

    # These will be set by the Lexer class
    _cursor: Cursor
    _config: LexConfig
    _state: ScanState

    def _emit(self, kind: TokenKind, text: str) -> None:
        """Append a token at the current location. Implemented by Lexer."""
        raise NotImplementedError

    def _fail(self, error: LexError) -> NoReturn:
        """Enter the FAILED state and raise. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_strict_eol(self) -> None:
        """Scan a strict marker and validate the rest of the input.

        The token text is the marker plus every accepted trailing character.

        Raises:
            DeadCodeError: At the first character that is not '!' or newline.
        """
        cursor = self._cursor
        text = [cursor.read(1)]
        cursor.skip_whitespace()

        while cursor.has_remaining():
            char = cursor.peek()
            if char not in STRICT_TRAILERS:
                self._fail(DeadCodeError(cursor.current_location()))
            text.append(cursor.read(1))

        self._emit(TokenKind.END_OF_LINE, "".join(text))
        self._state = ScanState.TERMINATED

    def _scan_debug_eol(self) -> None:
        """Scan a debug marker and check the character after it.

        Raises:
            DeadCodeError: If the first non-whitespace character after the
                marker is not a newline.
        """
        cursor = self._cursor
        text = cursor.read(1)
        cursor.skip_whitespace(
            stop_at_newline=not self._config.debug_marker_crosses_lines
        )

        if cursor.has_remaining():
            if cursor.peek() != "\n":
                self._fail(DeadCodeError(cursor.current_location()))
            cursor.advance(1)

        self._emit(TokenKind.END_OF_LINE_DEBUG, text)
        self._state = ScanState.TERMINATED
