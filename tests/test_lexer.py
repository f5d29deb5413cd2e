"""
Unit tests for the sexpc lexer.
"""

import pytest
from sexpc import tokenize, Lexer, Token, TokenType, LexerError, UnrecognizedCharacter


def paren(value):
    return Token(TokenType.PAREN, value)


def name(value):
    return Token(TokenType.NAME, value)


def number(value):
    return Token(TokenType.NUMBER, value)


class TestLexerBasics:
    """Test basic lexer functionality."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace is never emitted."""
        assert tokenize("  \t\n  \r\n") == []

    def test_reference_input(self):
        """The reference input yields the nine reference tokens."""
        tokens = tokenize("(add 2 (subtract 4 2))")
        assert tokens == [
            paren("("),
            name("add"),
            number("2"),
            paren("("),
            name("subtract"),
            number("4"),
            number("2"),
            paren(")"),
            paren(")"),
        ]

    def test_token_dicts(self):
        """Tokens serialize to type/value pairs."""
        tokens = tokenize("(add 22)")
        assert [t.to_dict() for t in tokens] == [
            {"type": "paren", "value": "("},
            {"type": "name", "value": "add"},
            {"type": "number", "value": "22"},
            {"type": "paren", "value": ")"},
        ]

    def test_multi_digit_number(self):
        """A digit run is a single number token kept as text."""
        tokens = tokenize("007 12345")
        assert tokens == [number("007"), number("12345")]

    def test_name_run(self):
        """A letter run is a single name token."""
        tokens = tokenize("subtractAll")
        assert tokens == [name("subtractAll")]

    def test_adjacent_name_and_number(self):
        """Letters and digits split into separate tokens without spaces."""
        tokens = tokenize("abc123def")
        assert tokens == [name("abc"), number("123"), name("def")]

    def test_parens_need_no_spaces(self):
        """Parentheses delimit tokens on their own."""
        tokens = tokenize("((f))")
        assert [t.value for t in tokens] == ["(", "(", "f", ")", ")"]

    def test_kind_property(self):
        """Token kind is the lowercase tag."""
        tokens = tokenize("(a 1)")
        assert [t.kind for t in tokens] == ["paren", "name", "number", "paren"]


class TestPositions:
    """Test source position tracking."""

    def test_columns(self):
        """Token spans record 1-indexed columns."""
        tokens = tokenize("(add 2)")
        assert tokens[0].span.start.column == 1
        assert tokens[1].span.start.column == 2
        assert tokens[1].span.end.column == 5
        assert tokens[2].span.start.column == 6

    def test_lines(self):
        """Position tracking across multiple lines."""
        tokens = tokenize("(add\n  2\n  3)")
        assert tokens[1].span.start.line == 1
        assert tokens[2].span.start.line == 2
        assert tokens[2].span.start.column == 3
        assert tokens[3].span.start.line == 3

    def test_filename(self):
        """Filename is carried on spans."""
        tokens = tokenize("(f)", filename="main.sexp")
        assert str(tokens[0].span.start) == "main.sexp:1:1"

    def test_span_ignored_in_equality(self):
        """Tokens from different positions compare equal."""
        first, second = tokenize("1 1")
        assert first == second
        assert first.span != second.span


class TestStreaming:
    """Test lazy iteration."""

    def test_iteration_matches_tokenize(self):
        """Iterating the lexer yields the same tokens as tokenize()."""
        source = "(add 2 (subtract 4 2))"
        assert list(Lexer(source)) == tokenize(source)

    def test_rescan_from_start(self):
        """Each iteration scans from the start of the source."""
        lexer = Lexer("(f 1)")
        assert lexer.tokenize() == lexer.tokenize()

    def test_interleaved_iterators(self):
        """Two iterators over one lexer keep separate cursors."""
        lexer = Lexer("(add 2 3)")
        first = iter(lexer)
        assert [next(first) for _ in range(3)] == [paren("("), name("add"), number("2")]
        second = iter(lexer)
        assert next(second) == paren("(")
        assert list(first) == [number("3"), paren(")")]
        assert list(second) == [name("add"), number("2"), number("3"), paren(")")]

    def test_lazy_error(self):
        """Tokens before a bad character are produced before the error."""
        stream = iter(Lexer("(f $"))
        assert next(stream) == paren("(")
        assert next(stream) == name("f")
        with pytest.raises(UnrecognizedCharacter):
            next(stream)


class TestLexerErrors:
    """Test lexical errors."""

    def test_unrecognized_character(self):
        """A dollar sign is rejected with its position."""
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            tokenize("(add 2 $)")
        err = exc_info.value
        assert err.char == "$"
        assert err.location.offset == 7
        assert err.location.column == 8
        assert err.location.line == 1
        assert "E001" in str(err)

    def test_is_lexer_error(self):
        """UnrecognizedCharacter is a LexerError."""
        with pytest.raises(LexerError):
            tokenize("1.5")

    def test_non_ascii_digit(self):
        """Only ASCII digits form numbers."""
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            tokenize("(f ٣)")
        assert exc_info.value.char == "٣"

    def test_non_ascii_letter(self):
        """Only ASCII letters form names."""
        with pytest.raises(UnrecognizedCharacter):
            tokenize("(café)")

    def test_underscore_rejected(self):
        """Names are letters only."""
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            tokenize("(my_fn)")
        assert exc_info.value.char == "_"

    def test_error_on_later_line(self):
        """Error location follows newlines."""
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            tokenize("(f 1)\n(g -2)")
        assert exc_info.value.location.line == 2
        assert exc_info.value.location.column == 4

    def test_error_shows_source_line(self):
        """Formatted error includes the offending line and a caret."""
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            tokenize("(add 2 $)")
        text = str(exc_info.value)
        assert "(add 2 $)" in text
        assert "       ^" in text

    def test_carriage_return_keeps_line_numbers(self):
        """A bare '\\r' does not start a new line for error display."""
        with pytest.raises(UnrecognizedCharacter) as exc_info:
            tokenize("(f\r 1)\n(g $)")
        assert exc_info.value.location.line == 2
        assert "  2 | (g $)" in str(exc_info.value)
