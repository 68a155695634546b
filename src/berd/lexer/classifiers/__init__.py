"""Classifiers for the Berd lexer.

Classifiers are pure functions (wrapped as mixins for the Lexer) that map a
character to a dispatch action or a word to a token kind. They never move
the cursor.
"""

from berd.lexer.classifiers.char import (
    PUNCTUATION_KINDS,
    CharClassifierMixin,
    classify_char,
)
from berd.lexer.classifiers.keyword import (
    KEYWORDS,
    KeywordClassifierMixin,
    classify_word,
)

__all__ = [
    "KEYWORDS",
    "PUNCTUATION_KINDS",
    "CharClassifierMixin",
    "KeywordClassifierMixin",
    "classify_char",
    "classify_word",
]
