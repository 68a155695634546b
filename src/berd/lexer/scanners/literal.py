"""Literal and word scanner mixin.

Scans string literals, integer literals and identifiers/keywords. Each
scanner is entered with the cursor on the first character of the token.

The main loop advances the cursor by one character after every dispatch.
The word scanner stops on the first character after the word, so it steps
back one character to let that advance land on the boundary. The integer
scanner does not step back unless configured to, so by default the
character after an integer literal is skipped.
"""

from __future__ import annotations

from typing import NoReturn

from berd.charsets import is_alphanumeric, is_numeric
from berd.config import LexConfig
from berd.cursor import Cursor
from berd.errors import LexError, UnterminatedStringError
from berd.tokens import TokenKind


class LiteralScannerMixin:
    """Mixin providing string, integer and word scanning."""

    # These will be set by the Lexer class
    _cursor: Cursor
    _config: LexConfig

    def _emit(self, kind: TokenKind, text: str) -> None:
        """Append a token at the current location. Implemented by Lexer."""
        raise NotImplementedError

    def _fail(self, error: LexError) -> NoReturn:
        """Enter the FAILED state and raise. Implemented by Lexer."""
        raise NotImplementedError

    def _classify_word(self, word: str) -> TokenKind:
        """Implemented by KeywordClassifierMixin."""
        raise NotImplementedError

    def _scan_string(self) -> None:
        """Scan a string literal; the cursor starts on the opening quote.

        There are no escape sequences: the literal ends at the next '"'.
        The token is emitted with the cursor on the closing quote.

        Raises:
            UnterminatedStringError: No closing quote before end of input.
        """
        cursor = self._cursor
        cursor.advance(1)  # opening quote

        start = cursor.offset
        end = cursor.source.find('"', start)
        if end == -1:
            cursor.advance(cursor.remaining_length())
            self._fail(UnterminatedStringError(cursor.current_location()))

        cursor.advance(end - start)
        self._emit(TokenKind.STRING_LITERAL, cursor.source[start:end])

    def _scan_integer(self) -> None:
        """Scan consecutive numeric characters into an INT_LITERAL."""
        cursor = self._cursor
        start = cursor.offset
        while cursor.has_remaining() and is_numeric(cursor.peek()):
            cursor.advance(1)

        self._emit(TokenKind.INT_LITERAL, cursor.source[start : cursor.offset])

        if not self._config.skip_after_integer:
            cursor.retreat(1)

    def _scan_word(self) -> None:
        """Scan a letter followed by alphanumerics; emit keyword or IDENTIFIER."""
        cursor = self._cursor
        start = cursor.offset
        cursor.advance(1)
        while cursor.has_remaining() and is_alphanumeric(cursor.peek()):
            cursor.advance(1)

        word = cursor.source[start : cursor.offset]
        self._emit(self._classify_word(word), word)

        # Land the main loop's advance on the boundary character
        cursor.retreat(1)
