"""Lexer states and dispatch actions.

This module defines the finite state machine states for the lexer and
the closed set of actions the main loop dispatches on.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Lexer states.

    - SCANNING: Reading tokens
    - TERMINATED: Input exhausted or an end-of-line marker accepted;
      no further tokens are produced
    - FAILED: A LexError was raised

    """

    SCANNING = auto()
    TERMINATED = auto()
    FAILED = auto()


class CharAction(Enum):
    """What the main loop does with the character under the cursor."""

    SPACE = auto()  # ' ' (normally consumed by the whitespace skip)
    STRING = auto()  # "
    PUNCTUATION = auto()  # ( ) { } , ;
    EQUALS = auto()  # = or =>
    STRICT_EOL = auto()  # !
    DEBUG_EOL = auto()  # ?
    DIGIT = auto()  # start of an integer literal
    LETTER = auto()  # start of an identifier or keyword
    SKIP = auto()  # anything else; ignored
