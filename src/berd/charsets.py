"""Character classes for the Berd lexer.

All sets are frozensets for O(1) membership testing and module-level caching.

Classification follows the Unicode character properties rather than the
ASCII subsets, so identifiers and integers may contain any letter or digit.

Usage:
    from berd.charsets import is_whitespace

    if is_whitespace(char):
        ...
"""

import unicodedata

import regex

# Unicode White_Space property
# https://www.unicode.org/Public/UCD/latest/ucd/PropList.txt
WHITESPACE: frozenset[str] = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# General categories counted as numeric (decimal digit, letter, other)
NUMERIC_CATEGORIES: frozenset[str] = frozenset({"Nd", "Nl", "No"})

# Unicode Alphabetic property (L*, Nl and Other_Alphabetic)
_ALPHABETIC = regex.compile(r"\p{Alphabetic}")


def is_whitespace(char: str) -> bool:
    """Check if character has the Unicode White_Space property."""
    return char in WHITESPACE


def is_numeric(char: str) -> bool:
    """Check if character is numeric (Unicode category Nd, Nl or No).

    Broader than str.isdigit: includes superscripts, fractions and
    roman numerals.

    """
    if not char:
        return False
    return unicodedata.category(char) in NUMERIC_CATEGORIES


def is_alphabetic(char: str) -> bool:
    """Check if character has the Unicode Alphabetic property.

    Broader than str.isalpha: includes letter numbers and the
    Other_Alphabetic marks, such as Devanagari vowel signs.

    """
    if not char:
        return False
    return _ALPHABETIC.fullmatch(char) is not None


def is_alphanumeric(char: str) -> bool:
    """Check if character is alphabetic or numeric."""
    return is_alphabetic(char) or is_numeric(char)
