"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from berd import lex
from berd.config import LexConfig
from berd.errors import DeadCodeError, LexError
from berd.lexer.classifiers import classify_word
from berd.tokens import TokenKind

BERD_ALPHABET = string.ascii_letters + string.digits + ' \n\t"!?(){},;=>+'


def _lex_or_none(source: str, config: LexConfig | None = None):
    try:
        return lex(source, config=config)
    except LexError:
        return None


class TestTerminationInvariants:
    """Accepted input is empty or ends with an end-of-line marker."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_accepted_output_ends_with_marker(self, source: str) -> None:
        tokens = _lex_or_none(source)
        if tokens:
            assert tokens[-1].kind.is_end_of_line

    @given(st.text(alphabet=BERD_ALPHABET, max_size=200), st.booleans(), st.booleans())
    @settings(max_examples=200)
    def test_only_lex_errors_escape(
        self, source: str, skip_after_integer: bool, crosses_lines: bool
    ) -> None:
        """Any input either lexes or raises a LexError, under every config."""
        config = LexConfig(
            skip_after_integer=skip_after_integer,
            debug_marker_crosses_lines=crosses_lines,
        )
        tokens = _lex_or_none(source, config)
        if tokens:
            assert tokens[-1].kind.is_end_of_line
            assert sum(1 for t in tokens if t.kind.is_end_of_line) == 1

    @given(st.text(max_size=300))
    @settings(max_examples=100)
    def test_locations_are_one_indexed(self, source: str) -> None:
        for token in _lex_or_none(source) or []:
            assert token.location.line >= 1
            assert token.location.column >= 1


class TestKeywordInvariants:
    """The function keyword whitelist is exactly the prefixes of "function"."""

    @given(st.text(alphabet=string.ascii_letters, min_size=1, max_size=12))
    @settings(max_examples=300)
    def test_function_prefix_whitelist(self, word: str) -> None:
        is_prefix = "function".startswith(word)
        assert (classify_word(word) == TokenKind.FUNCTION_DECLARATION) == is_prefix

    @given(st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=8))
    @settings(max_examples=200)
    def test_bool_literals_are_closed(self, word: str) -> None:
        is_bool = word in {"true", "false", "maybe"}
        assert (classify_word(word) == TokenKind.BOOL_LITERAL) == is_bool


class TestMarkerInvariants:
    """Trailing content rules for the strict marker."""

    @given(st.text(alphabet="!\n", max_size=30))
    @settings(max_examples=100)
    def test_strict_marker_accepts_markers_and_blank_lines(self, tail: str) -> None:
        tokens = lex("x !" + tail)
        assert tokens[-1].kind == TokenKind.END_OF_LINE
        assert tokens[-1].text == "!" + tail.lstrip("\n")

    @given(st.text(alphabet=string.ascii_letters, min_size=1, max_size=10))
    @settings(max_examples=100)
    def test_strict_marker_rejects_trailing_words(self, junk: str) -> None:
        with pytest.raises(DeadCodeError) as exc_info:
            lex("x ! " + junk)
        assert exc_info.value.location.column == 5


class TestStringInvariants:
    @given(st.text(alphabet=st.characters(exclude_characters='"'), max_size=50))
    @settings(max_examples=100)
    def test_string_text_round_trips(self, text: str) -> None:
        tokens = lex('"' + text + '" !')
        assert tokens[0].kind == TokenKind.STRING_LITERAL
        assert tokens[0].text == text
        assert tokens[-1].kind == TokenKind.END_OF_LINE


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        first = _lex_or_none(source)
        second = _lex_or_none(source)
        assert first == second
