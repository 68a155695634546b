"""State-machine lexer for Berd source text.

Each iteration of the main loop skips whitespace, classifies the character
under the cursor, runs the matching sub-scanner and advances one character.
The scan ends when input is exhausted or an end-of-line marker is accepted;
at that point the token list must be empty or end with a marker.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from typing import NoReturn

from berd.config import LexConfig, get_lex_config
from berd.cursor import Cursor
from berd.errors import LexError, UnterminatedLineError
from berd.lexer.classifiers import CharClassifierMixin, KeywordClassifierMixin
from berd.lexer.modes import CharAction, ScanState
from berd.lexer.scanners import (
    LiteralScannerMixin,
    MarkerScannerMixin,
    SymbolScannerMixin,
)
from berd.tokens import Token, TokenKind
from berd.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no cursor movement)
    CharClassifierMixin,
    KeywordClassifierMixin,
    # Scanners (consume characters and emit tokens)
    LiteralScannerMixin,
    SymbolScannerMixin,
    MarkerScannerMixin,
):
    """State-machine lexer.

    Usage:
            >>> lexer = Lexer("fun greet(name) => { return name } !")
            >>> [str(token) for token in lexer.tokenize()][:3]
            ['FunctionDeclaration', 'Identifier(greet)', 'Lparen']

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_cursor",
        "_config",
        "_source_file",
        "_state",
        "_tokens",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Berd source text
            source_file: Optional source file path for error messages
            config: Lexer configuration; the context's config if None
        """
        self._cursor = Cursor(source, source_file)
        self._config = config if config is not None else get_lex_config()
        self._source_file = source_file
        self._state = ScanState.SCANNING
        self._tokens: list[Token] = []

    @property
    def state(self) -> ScanState:
        return self._state

    def tokenize(self) -> list[Token]:
        """Tokenize source into a list of tokens.

        Returns:
            Tokens in source order. Empty for empty or whitespace-only input.

        Raises:
            UnterminatedStringError: A string literal is not closed.
            UnterminatedLineError: Tokens were produced but the last one is
                not an end-of-line marker.
            DeadCodeError: Input after a marker violates its trailing rules.
            RuntimeError: The lexer was already used.
        """
        if self._state is not ScanState.SCANNING:
            raise RuntimeError(f"Lexer already used (state: {self._state.name})")

        cursor = self._cursor
        while self._state is ScanState.SCANNING:
            cursor.skip_whitespace(preserve_single=True)

            char = cursor.peek()
            if char is None:
                self._state = ScanState.TERMINATED
                break

            self._dispatch(char)

            if self._state is ScanState.SCANNING:
                cursor.advance(1)

        if self._tokens and not self._tokens[-1].kind.is_end_of_line:
            self._fail(UnterminatedLineError(cursor.current_location()))

        logger.debug(
            "Lexed %d tokens from %s (%s)",
            len(self._tokens),
            self._source_file or "<string>",
            self._state.name,
        )
        return self._tokens

    def _dispatch(self, char: str) -> None:
        """Run the scanner for the character under the cursor."""
        action = self._classify_char(char)

        if action is CharAction.STRING:
            self._scan_string()
        elif action is CharAction.PUNCTUATION:
            self._scan_punctuation(char)
        elif action is CharAction.EQUALS:
            self._scan_equals()
        elif action is CharAction.STRICT_EOL:
            self._scan_strict_eol()
        elif action is CharAction.DEBUG_EOL:
            self._scan_debug_eol()
        elif action is CharAction.DIGIT:
            self._scan_integer()
        elif action is CharAction.LETTER:
            self._scan_word()
        # SPACE and SKIP produce no token

    # =========================================================================
    # Token and error helpers
    # =========================================================================

    def _emit(self, kind: TokenKind, text: str) -> None:
        """Append a token located at the current cursor position."""
        self._tokens.append(Token(kind, text, self._cursor.current_location()))

    def _fail(self, error: LexError) -> NoReturn:
        """Enter the FAILED state and raise error."""
        self._state = ScanState.FAILED
        logger.debug("Lexing failed: %s", error)
        raise error
