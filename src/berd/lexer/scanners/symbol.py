"""Punctuation and operator scanner mixin."""

from __future__ import annotations

from berd.cursor import Cursor
from berd.lexer.classifiers.char import PUNCTUATION_KINDS
from berd.tokens import TokenKind


class SymbolScannerMixin:
    """Mixin providing single-character punctuation and `=`/`=>` scanning.

    Scanners leave the cursor on the last character of the token; the main
    loop's advance moves past it.

    """

    # These will be set by the Lexer class
    _cursor: Cursor

    def _emit(self, kind: TokenKind, text: str) -> None:
        """Append a token at the current location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_punctuation(self, char: str) -> None:
        self._emit(PUNCTUATION_KINDS[char], char)

    def _scan_equals(self) -> None:
        """Scan `=`, or `=>` when the next character is `>`."""
        if self._cursor.peek_at(1) == ">":
            self._cursor.advance(1)
            self._emit(TokenKind.ARROW, "=>")
        else:
            self._emit(TokenKind.EQUALS, "=")
