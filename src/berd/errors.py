"""Exception classes for Berd.

Lexing stops at the first error; the raised exception carries the location
where the violation was detected and no partial token list.
"""

from __future__ import annotations

from typing import ClassVar

from berd.location import SourceLocation


class BerdError(Exception):
    """Base exception for all Berd errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(BerdError):
    """Error during tokenization.

    Subclasses form a closed set; `name` is the spelling used by the
    fixture answer files (``<error(DeadCode)>``).
    """

    name: ClassVar[str] = "LexError"
    description: ClassVar[str] = "lex error"

    def __init__(self, location: SourceLocation) -> None:
        """Initialize lex error at a location.

        Args:
            location: Where the violation was detected
        """
        self.location = location
        self.message = self.description
        super().__init__(f"{self.description} at {location}")

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column


class UnterminatedStringError(LexError):
    """End of input reached inside an open string literal."""

    name = "UnterminatedString"
    description = "unterminated string"


class UnterminatedLineError(LexError):
    """Input ended without a strict (!) or debug (?) end-of-line marker."""

    name = "UnterminatedLine"
    description = "unterminated line"


class DeadCodeError(LexError):
    """Content found where an end-of-line marker allows none."""

    name = "DeadCode"
    description = "dead code"


def format_error(error: LexError) -> str:
    """Render an error in answer-file format."""
    return f"<error({error.name})>\n"


__all__ = [
    "BerdError",
    "DeadCodeError",
    "LexError",
    "UnterminatedLineError",
    "UnterminatedStringError",
    "format_error",
]
