"""Utility modules for Berd.

Provides:
- logger: get_logger for logging
"""

from berd.utils.logger import get_logger

__all__ = [
    "get_logger",
]
