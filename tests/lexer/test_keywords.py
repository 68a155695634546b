"""Tests for keyword and identifier classification."""

import pytest

from berd import lex
from berd.lexer.classifiers import classify_word
from berd.tokens import TokenKind


def _first_kind(word: str) -> TokenKind:
    return lex(f"{word} !")[0].kind


class TestFunctionKeyword:
    """Every truncation of "function" is the function keyword."""

    @pytest.mark.parametrize(
        "word", ["f", "fu", "fun", "func", "funct", "functi", "functio", "function"]
    )
    def test_prefixes(self, word: str) -> None:
        assert _first_kind(word) == TokenKind.FUNCTION_DECLARATION

    @pytest.mark.parametrize(
        "word", ["g", "fx", "fn", "functions", "unction", "Function", "F", "funky"]
    )
    def test_non_prefixes_are_identifiers(self, word: str) -> None:
        assert _first_kind(word) == TokenKind.IDENTIFIER

    def test_keyword_text_is_kept(self) -> None:
        assert lex("func !")[0].text == "func"


class TestPrimitiveTypes:
    @pytest.mark.parametrize("word", ["Int", "String", "Char", "Digit", "Bool"])
    def test_primitives(self, word: str) -> None:
        token = lex(f"{word} !")[0]
        assert token.kind == TokenKind.PRIMITIVE_TYPE
        assert str(token) == f"Primitive({word})"

    @pytest.mark.parametrize("word", ["int", "string", "Integer", "BOOL"])
    def test_case_sensitive(self, word: str) -> None:
        assert _first_kind(word) == TokenKind.IDENTIFIER


class TestBoolLiterals:
    @pytest.mark.parametrize("word", ["true", "false", "maybe"])
    def test_three_valued(self, word: str) -> None:
        assert _first_kind(word) == TokenKind.BOOL_LITERAL

    @pytest.mark.parametrize("word", ["True", "FALSE", "perhaps", "maybes", "yes"])
    def test_other_words_are_identifiers(self, word: str) -> None:
        assert _first_kind(word) == TokenKind.IDENTIFIER


class TestReturnAndIdentifiers:
    def test_return(self) -> None:
        assert _first_kind("return") == TokenKind.RETURN

    def test_returns_is_identifier(self) -> None:
        assert _first_kind("returns") == TokenKind.IDENTIFIER

    def test_alphanumeric_identifier(self) -> None:
        assert str(lex("abc123 !")[0]) == "Identifier(abc123)"

    def test_unicode_identifier(self) -> None:
        assert str(lex("café ?")[0]) == "Identifier(café)"

    def test_punctuation_splits_words(self) -> None:
        tokens = lex("a.b !")
        assert [str(t) for t in tokens] == ["Identifier(a)", "Identifier(b)", "Eol"]

    def test_underscore_splits_words(self) -> None:
        tokens = lex("snake_case !")
        assert [str(t) for t in tokens] == [
            "Identifier(snake)",
            "Identifier(case)",
            "Eol",
        ]


class TestClassifyWord:
    """The pure classifier, independent of scanning."""

    def test_keyword_table(self) -> None:
        assert classify_word("fun") == TokenKind.FUNCTION_DECLARATION
        assert classify_word("Char") == TokenKind.PRIMITIVE_TYPE
        assert classify_word("maybe") == TokenKind.BOOL_LITERAL
        assert classify_word("return") == TokenKind.RETURN
        assert classify_word("name") == TokenKind.IDENTIFIER

    def test_empty_word_is_identifier(self) -> None:
        assert classify_word("") == TokenKind.IDENTIFIER
