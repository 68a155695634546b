"""ContextVar-based lexer configuration for Berd.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction, unless one is passed
explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from berd.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(skip_after_integer=False)):
        tokens = lex("x 12, y !")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    The defaults reproduce the token dumps of existing fixtures.

    Attributes:
        skip_after_integer: Skip the character directly after an integer
            literal (``12,`` loses the comma). False makes the integer
            scanner stop on the boundary like the identifier scanner.
        debug_marker_crosses_lines: Let the whitespace skip after ``?``
            consume newlines, so any later non-blank line is dead code.
            When False the skip stops at the first newline, which satisfies
            the marker, and the text after it is not examined.

    """

    skip_after_integer: bool = True
    debug_marker_crosses_lines: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"skip_after_integer": False, "x": 1})
            LexConfig(skip_after_integer=False, debug_marker_crosses_lines=False)

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(skip_after_integer=False)):
        ...     tokens = lex("x 12, y !")

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
