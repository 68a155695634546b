"""Token and TokenKind definitions for the Berd lexer.

The lexer produces a list of Token objects for a downstream parser.
Each Token has a kind, raw text, and source location.

Display Form:
str(token) gives the stable one-line form used by the fixture answer files,
e.g. ``Identifier(greet)``, ``StringLiteral("hi")`` or bare ``Lparen``.
Answer files depend on these spellings; do not change them.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from berd.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    Each value is the kind's name in the display form.

    """

    # Keywords
    FUNCTION_DECLARATION = "FunctionDeclaration"  # f, fu, ... function
    RETURN = "Return"  # return
    PRIMITIVE_TYPE = "Primitive"  # Int String Char Digit Bool

    # Names and literals
    IDENTIFIER = "Identifier"
    STRING_LITERAL = "StringLiteral"  # "..."
    INT_LITERAL = "IntLiteral"  # 42
    BOOL_LITERAL = "BoolLiteral"  # true false maybe

    # Punctuation
    LPAREN = "Lparen"  # (
    RPAREN = "Rparen"  # )
    LBRACE = "Lbrace"  # {
    RBRACE = "Rbrace"  # }
    COMMA = "Comma"  # ,
    ARROW = "Arrow"  # =>
    EQUALS = "Equals"  # =
    LOGICAL_NOT_MARKER = "Not"  # ;

    # Line terminators
    END_OF_LINE = "Eol"  # !
    END_OF_LINE_DEBUG = "EolDebug"  # ?

    @property
    def is_end_of_line(self) -> bool:
        """True for the strict and debug end-of-line markers."""
        return self in END_OF_LINE_KINDS


END_OF_LINE_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.END_OF_LINE, TokenKind.END_OF_LINE_DEBUG}
)

# Kinds whose display form carries the token text
PAYLOAD_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.IDENTIFIER,
        TokenKind.STRING_LITERAL,
        TokenKind.INT_LITERAL,
        TokenKind.PRIMITIVE_TYPE,
        TokenKind.BOOL_LITERAL,
    }
)

_DEBUG_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}

# General categories rendered as \u{hex} escapes
_UNPRINTABLE_CATEGORIES: frozenset[str] = frozenset(
    {"Cc", "Cf", "Zl", "Zp", "Cn", "Co", "Cs"}
)


def _escape_char(char: str) -> str:
    escaped = _DEBUG_ESCAPES.get(char)
    if escaped is not None:
        return escaped
    if unicodedata.category(char) in _UNPRINTABLE_CATEGORIES:
        return f"\\u{{{ord(char):x}}}"
    return char


def quote_text(text: str) -> str:
    """Quote text for the display form of string literals.

    Backslashes and double quotes are escaped, as are the common control
    characters. Other non-printable characters become ``\\u{hex}`` escapes
    (lowercase hex, no padding), so a quoted string never spans lines.

    Example:
        >>> quote_text('say "hi"')
        '"say \\\\"hi\\\\""'
    """
    return '"' + "".join(_escape_char(c) for c in text) + '"'


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        text: The raw text from source (quotes excluded for strings)
        location: Cursor position when the token was emitted; for tokens
            spanning several characters this is after the consumed text,
            not the start

    """

    kind: TokenKind
    text: str
    location: SourceLocation

    def __str__(self) -> str:
        """Display form used by the fixture answer files."""
        if self.kind is TokenKind.STRING_LITERAL:
            return f"{self.kind.value}({quote_text(self.text)})"
        if self.kind in PAYLOAD_KINDS:
            return f"{self.kind.value}({self.text})"
        return self.kind.value

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return (
            f"Token({self.kind.name}, {val!r}, "
            f"{self.location.line}:{self.location.column})"
        )

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self.location.line

    @property
    def column(self) -> int:
        """Column number (convenience accessor)."""
        return self.location.column


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens in answer-file format, one display form per line."""
    return "".join(f"{token}\n" for token in tokens)
