"""Keyword classifier mixin.

Words are classified against closed whitelists. The function keyword
accepts every truncation of "function" down to "f", but only those eight
spellings: "fx" and "functions" are plain identifiers.
"""

from __future__ import annotations

from berd.tokens import TokenKind

FUNCTION_KEYWORD = "function"

# "f", "fu", ..., "function"
FUNCTION_PREFIXES: frozenset[str] = frozenset(
    FUNCTION_KEYWORD[:length] for length in range(1, len(FUNCTION_KEYWORD) + 1)
)

PRIMITIVE_TYPES: frozenset[str] = frozenset({"Int", "String", "Char", "Digit", "Bool"})

# Three-valued boolean literals
BOOL_LITERALS: frozenset[str] = frozenset({"true", "false", "maybe"})

KEYWORDS: dict[str, TokenKind] = {
    **{word: TokenKind.FUNCTION_DECLARATION for word in FUNCTION_PREFIXES},
    **{word: TokenKind.PRIMITIVE_TYPE for word in PRIMITIVE_TYPES},
    **{word: TokenKind.BOOL_LITERAL for word in BOOL_LITERALS},
    "return": TokenKind.RETURN,
}


def classify_word(word: str) -> TokenKind:
    """Classify a scanned word as a keyword kind or IDENTIFIER.

    Matching is exact and case-sensitive.

    Example:
        >>> classify_word("fun")
        <TokenKind.FUNCTION_DECLARATION: 'FunctionDeclaration'>
        >>> classify_word("functions")
        <TokenKind.IDENTIFIER: 'Identifier'>
    """
    return KEYWORDS.get(word, TokenKind.IDENTIFIER)


class KeywordClassifierMixin:
    """Mixin providing keyword classification for scanned words."""

    def _classify_word(self, word: str) -> TokenKind:
        return classify_word(word)
