"""Character classifier for the main dispatch loop."""

from __future__ import annotations

from berd.charsets import is_alphabetic, is_numeric
from berd.lexer.modes import CharAction
from berd.tokens import TokenKind

# Single-character tokens; the token text is the character itself
PUNCTUATION_KINDS: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.LOGICAL_NOT_MARKER,
}

_SYMBOL_ACTIONS: dict[str, CharAction] = {
    " ": CharAction.SPACE,
    '"': CharAction.STRING,
    "=": CharAction.EQUALS,
    "!": CharAction.STRICT_EOL,
    "?": CharAction.DEBUG_EOL,
    **{char: CharAction.PUNCTUATION for char in PUNCTUATION_KINDS},
}


def classify_char(char: str) -> CharAction:
    """Classify the character under the cursor.

    Symbols are looked up first; digits win over letters for characters
    that are both (e.g. roman numeral code points).

    Args:
        char: A single character

    Returns:
        The CharAction the main loop should run.
    """
    action = _SYMBOL_ACTIONS.get(char)
    if action is not None:
        return action
    if is_numeric(char):
        return CharAction.DIGIT
    if is_alphabetic(char):
        return CharAction.LETTER
    return CharAction.SKIP


class CharClassifierMixin:
    """Mixin providing character classification for the Lexer."""

    def _classify_char(self, char: str) -> CharAction:
        return classify_char(char)
