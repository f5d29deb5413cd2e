"""
Token types for the sexpc lexer.

The source language has only three token kinds: parentheses, bare-word
names and digit runs. Error code ranges used throughout the package:
- E0xx: Lexer errors
- E1xx: Parser errors
- E2xx: Tree errors (transformer and code generator)
- E3xx: Limit errors
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    """All token types recognized by the lexer."""

    PAREN = auto()      # ( or )
    NAME = auto()       # add, subtract
    NUMBER = auto()     # 42


@dataclass(frozen=True)
class SourceLocation:
    """Represents a position in source code."""
    line: int           # 1-indexed line number
    column: int         # 1-indexed column number
    offset: int         # 0-indexed character offset from start
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a range in source code."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"


@dataclass(frozen=True)
class Token:
    """A single token from the lexer.

    Equality ignores the span, so a token built by hand compares equal to
    the same token read from source.
    """
    type: TokenType
    value: str                  # The raw source text
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    @property
    def kind(self) -> str:
        """Lowercase tag: 'paren', 'name' or 'number'."""
        return self.type.name.lower()

    @property
    def is_open(self) -> bool:
        return self.type == TokenType.PAREN and self.value == "("

    @property
    def is_close(self) -> bool:
        return self.type == TokenType.PAREN and self.value == ")"

    def to_dict(self) -> dict:
        return {"type": self.kind, "value": self.value}

    def __str__(self) -> str:
        return f"{self.type.name}({self.value!r})"
