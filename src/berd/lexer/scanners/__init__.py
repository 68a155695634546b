"""Sub-scanners for the Berd lexer.

Each scanner is a mixin that consumes one kind of token starting at the
character the main loop dispatched on.
"""

from __future__ import annotations

from berd.lexer.scanners.literal import LiteralScannerMixin
from berd.lexer.scanners.marker import MarkerScannerMixin
from berd.lexer.scanners.symbol import SymbolScannerMixin

__all__ = [
    "LiteralScannerMixin",
    "MarkerScannerMixin",
    "SymbolScannerMixin",
]
