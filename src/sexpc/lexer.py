"""
Lexer for the sexpc source language.

Converts source text into a sequence of tokens for the parser.
Recognizes:
- Parentheses
- Runs of ASCII letters (names)
- Runs of ASCII digits (numbers)
Whitespace separates tokens and is never emitted.
"""

import string
from typing import List, Optional, Iterator
from .tokens import Token, TokenType, SourceLocation, SourceSpan
from .errors import error_unrecognized_character

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)


class Lexer:
    """
    Single-pass tokenizer with one cursor and no backtracking.

    Usage:
        lexer = Lexer(source_code)
        tokens = lexer.tokenize()

    Or for streaming:
        lexer = Lexer(source_code)
        for token in lexer:
            process(token)
    """

    def __init__(self, source: str, filename: Optional[str] = None):
        self.source = source
        self.filename = filename
        self.pos = 0            # Current position in source
        self.line = 1           # Current line (1-indexed)
        self.column = 1         # Current column (1-indexed)
        self._lines: Optional[List[str]] = None  # Cached line list

    @property
    def lines(self) -> List[str]:
        """Lazy-load line list for error reporting."""
        if self._lines is None:
            # Only '\n' advances the line counter
            self._lines = self.source.split("\n")
        return self._lines

    def get_source_line(self, line_num: int) -> Optional[str]:
        """Get a specific line of source (1-indexed)."""
        if 1 <= line_num <= len(self.lines):
            return self.lines[line_num - 1]
        return None

    def _location(self) -> SourceLocation:
        """Get current source location."""
        return SourceLocation(self.line, self.column, self.pos, self.filename)

    def _span(self, start: SourceLocation) -> SourceSpan:
        """Create a span from start to current position."""
        return SourceSpan(start, self._location())

    def _peek(self) -> str:
        """Look at the current character without consuming it."""
        if self.pos >= len(self.source):
            return '\0'
        return self.source[self.pos]

    def _advance(self) -> str:
        """Consume and return current character."""
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while not self._is_at_end() and self._peek().isspace():
            self._advance()

    def _make_token(self, token_type: TokenType, start: SourceLocation) -> Token:
        value = self.source[start.offset:self.pos]
        return Token(token_type, value, self._span(start))

    def _scan_run(self, charset: frozenset, token_type: TokenType) -> Token:
        """Scan a maximal run of characters from charset."""
        start = self._location()
        while self._peek() in charset:
            self._advance()
        return self._make_token(token_type, start)

    def _scan_token(self) -> Optional[Token]:
        """Scan the next token, or return None at end of input."""
        self._skip_whitespace()
        if self._is_at_end():
            return None

        ch = self._peek()

        if ch in '()':
            start = self._location()
            self._advance()
            return self._make_token(TokenType.PAREN, start)

        if ch in DIGITS:
            return self._scan_run(DIGITS, TokenType.NUMBER)

        if ch in LETTERS:
            return self._scan_run(LETTERS, TokenType.NAME)

        start = self._location()
        self._advance()
        raise error_unrecognized_character(
            ch, start, self._span(start), self.get_source_line(start.line)
        )

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source, returning a list of tokens."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens, scanning from the start of the source.

        Each iteration scans with its own cursor, so several iterators over
        one lexer are independent.
        """
        scanner = Lexer(self.source, self.filename)
        scanner._lines = self._lines
        while True:
            token = scanner._scan_token()
            if token is None:
                break
            yield token


def tokenize(source: str, filename: Optional[str] = None) -> List[Token]:
    """
    Convenience function to tokenize source code.

    Args:
        source: The source code to tokenize
        filename: Optional filename for error messages

    Returns:
        List of tokens

    Raises:
        UnrecognizedCharacter: If a character starts no token
    """
    lexer = Lexer(source, filename)
    return lexer.tokenize()
