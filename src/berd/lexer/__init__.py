"""State-machine lexer for the Berd language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ScanState, CharAction
├── core.py              # Lexer class (mixin composition + main loop)
├── modes.py             # ScanState and CharAction enums
├── classifiers/         # Pure classification mixins
│   ├── char.py          # Character -> CharAction
│   └── keyword.py       # Word -> TokenKind
└── scanners/            # Token-consuming mixins
    ├── literal.py       # Strings, integers, words
    ├── symbol.py        # Punctuation, = and =>
    └── marker.py        # ! and ? end-of-line markers

Usage:
    >>> from berd.lexer import Lexer
    >>> for token in Lexer("x = true ?").tokenize():
    ...     print(token)
    Identifier(x)
    Equals
    BoolLiteral(true)
    EolDebug

"""

from berd.lexer.core import Lexer
from berd.lexer.modes import CharAction, ScanState

__all__ = ["CharAction", "Lexer", "ScanState"]
