"""Tests for token locations.

A token's location is the cursor position when it was emitted. For words,
integers and markers that is just past the consumed text; single-character
punctuation is emitted before the main loop steps over it, and strings are
emitted with the cursor on the closing quote.
"""

from berd import lex
from berd.location import SourceLocation

EXAMPLE = "fun greet(name) => { return name } !"


def _positions(source: str) -> list[tuple[str, int, int]]:
    return [(str(t), t.location.line, t.location.column) for t in lex(source)]


class TestSingleLineLocations:
    """Test location tracking on one line."""

    def test_example_locations(self) -> None:
        assert _positions(EXAMPLE) == [
            ("FunctionDeclaration", 1, 4),
            ("Identifier(greet)", 1, 10),
            ("Lparen", 1, 10),
            ("Identifier(name)", 1, 15),
            ("Rparen", 1, 15),
            ("Arrow", 1, 18),
            ("Lbrace", 1, 20),
            ("Return", 1, 28),
            ("Identifier(name)", 1, 33),
            ("Rbrace", 1, 34),
            ("Eol", 1, 37),
        ]

    def test_string_location_is_closing_quote(self) -> None:
        token = lex('"ab" !')[0]
        assert token.location == SourceLocation(1, 4)

    def test_integer_location_is_after_digits(self) -> None:
        token = lex("123 !")[0]
        assert token.location == SourceLocation(1, 4)

    def test_equals_location(self) -> None:
        assert lex("x = y !")[1].location == SourceLocation(1, 3)


class TestMultilineLocations:
    """Test location tracking across lines."""

    def test_tokens_on_later_lines(self) -> None:
        source = "fun f() => {\n  return x\n} !"
        positions = _positions(source)
        assert positions[-4:] == [
            ("Return", 2, 9),
            ("Identifier(x)", 2, 11),
            ("Rbrace", 3, 1),
            ("Eol", 3, 4),
        ]

    def test_source_file_in_token_locations(self) -> None:
        tokens = lex("x !", source_file="main.berd")
        assert all(t.location.source_file == "main.berd" for t in tokens)
        assert str(tokens[0].location) == "main.berd:1:2"
