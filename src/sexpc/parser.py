"""
Recursive descent parser for the sexpc source language.

Converts a token sequence into a source AST (:class:`sexpc.ast.Program`).

Grammar:
    program    := expression*
    expression := NUMBER | '(' NAME expression* ')'
"""

from typing import Optional, Sequence
from .tokens import Token, TokenType, SourceSpan
from .ast import Program, CallExpression, NumberLiteral, Expression
from .errors import (
    error_unexpected_token,
    error_missing_call_name,
    error_nesting_too_deep,
)


class Parser:
    """
    Recursive descent parser with one token of lookahead.

    Usage:
        parser = Parser(tokens)
        program = parser.parse_program()

    When the input ends early the parser reports the construct it was
    expecting: a call name right after '(' gives MissingCallName, an
    unclosed call gives UnexpectedToken with no token attached.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.pos = 0

    # =========================================================================
    # Token Navigation
    # =========================================================================

    def _current(self) -> Optional[Token]:
        """Get current token, or None past the end."""
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token is of given type."""
        token = self._current()
        return token is not None and token.type == token_type

    def _check_close(self) -> bool:
        token = self._current()
        return token is not None and token.is_close

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _error_span(self) -> Optional[SourceSpan]:
        """Span of the current token, or the end of the last one."""
        token = self._current()
        if token is not None:
            return token.span
        if self.tokens and self.tokens[-1].span is not None:
            end = self.tokens[-1].span.end
            return SourceSpan(end, end)
        return None

    def _span_from(self, start: Token) -> Optional[SourceSpan]:
        """Create a span from start token to the last consumed token."""
        end_token = self.tokens[max(0, self.pos - 1)]
        if start.span is None or end_token.span is None:
            return None
        return SourceSpan(start.span.start, end_token.span.end)

    # =========================================================================
    # Expressions
    # =========================================================================

    def _walk(self) -> Expression:
        """Parse one expression starting at the cursor."""
        token = self._current()

        if token is not None and token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(token.value, span=token.span)

        if token is not None and token.is_open:
            return self._parse_call()

        raise error_unexpected_token("number or '('", token, self._error_span())

    def _parse_call(self) -> CallExpression:
        """Parse ``'(' NAME expression* ')'``."""
        start = self._advance()  # consume '('

        if not self._check(TokenType.NAME):
            raise error_missing_call_name(self._current(), self._error_span())
        name = self._advance().value

        params = []
        while not self._check_close():
            if self._is_at_end():
                raise error_unexpected_token("expression or ')'", None, self._error_span())
            params.append(self._walk())

        self._advance()  # consume ')'
        return CallExpression(name, params, span=self._span_from(start))

    # =========================================================================
    # Program
    # =========================================================================

    def parse_program(self) -> Program:
        """Parse expressions until the tokens are exhausted."""
        self.pos = 0
        body = []
        try:
            while not self._is_at_end():
                body.append(self._walk())
        except RecursionError:
            raise error_nesting_too_deep("parser", self._error_span()) from None

        span = None
        if self.tokens:
            span = self._span_from(self.tokens[0])
        return Program(body, span=span)


def parse(tokens: Sequence[Token]) -> Program:
    """
    Convenience function to parse tokens into a program.

    Args:
        tokens: Tokens from the lexer

    Returns:
        Parsed source AST

    Raises:
        ParserError: If parsing fails
    """
    parser = Parser(tokens)
    return parser.parse_program()
