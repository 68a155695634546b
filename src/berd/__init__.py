"""
Berd: lexer for a line-terminated toy language

Every Berd program ends each lexed unit with an end-of-line marker: the
strict ``!`` (nothing but more ``!`` and blank lines may follow) or the
debug ``?`` (only the next line break is checked).

Quick Start:
    >>> from berd import lex
    >>> tokens = lex("fun greet(name) => { return name } !")
    >>> print(format_tokens(tokens[:3]), end="")
    FunctionDeclaration
    Identifier(greet)
    Lparen

    >>> lex("x = 1")
    Traceback (most recent call last):
    ...
    berd.errors.UnterminatedLineError: unterminated line at 1:6
"""

from berd.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from berd.cursor import Cursor
from berd.errors import (
    BerdError,
    DeadCodeError,
    LexError,
    UnterminatedLineError,
    UnterminatedStringError,
    format_error,
)
from berd.lexer import Lexer
from berd.location import SourceLocation
from berd.tokens import Token, TokenKind, format_tokens

__version__ = "0.1.0"


def lex(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize Berd source text.

    Args:
        source: Berd source text
        source_file: Optional source file path for error locations
        config: Lexer configuration (uses the context's config if None)

    Returns:
        Tokens in source order; empty for empty input.

    Raises:
        LexError: On the first lexical error (UnterminatedStringError,
            UnterminatedLineError or DeadCodeError).

    Example:
        >>> [token.kind.name for token in lex("Int x ?")]
        ['PRIMITIVE_TYPE', 'IDENTIFIER', 'END_OF_LINE_DEBUG']
    """
    return Lexer(source, source_file=source_file, config=config).tokenize()


__all__ = [
    # Main API
    "lex",
    "format_tokens",
    "format_error",
    # Lexer
    "Lexer",
    "Cursor",
    "Token",
    "TokenKind",
    "SourceLocation",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "BerdError",
    "LexError",
    "UnterminatedStringError",
    "UnterminatedLineError",
    "DeadCodeError",
]
