"""Source location tracking for tokens and lexer errors.

Provides SourceLocation dataclass for positions in Berd source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position in source text.

    Both coordinates are 1-indexed. A newline moves to the next line
    and resets the column to 1; every other character advances the column.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        source_file: Source file path (optional, for error messages)

    Examples:
            >>> SourceLocation.from_offset("ab\\ncd", 4)
        SourceLocation(line=2, column=2, source_file=None)

            >>> str(SourceLocation(3, 7, "demo.berd"))
            'demo.berd:3:7'

    """

    line: int
    column: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "demo.berd:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"

    @classmethod
    def from_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute the location of a character offset in source.

        Uses str.count/rfind over the prefix instead of a per-character loop.

        Args:
            source: Full source text
            offset: Character offset (0 <= offset <= len(source))
            source_file: Optional source file path

        Returns:
            SourceLocation of the offset
        """
        segment = source[:offset]
        last_nl = segment.rfind("\n")
        return cls(
            line=segment.count("\n") + 1,
            column=len(segment) - last_nl,  # chars after last newline + 1
            source_file=source_file,
        )
