"""
Compiler exceptions and diagnostic reporting.

Error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E2xx: Tree errors (transformer and code generator)
- E3xx: Limit errors
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, List
from .tokens import SourceSpan, SourceLocation, Token


class ErrorSeverity(Enum):
    """Severity levels for diagnostics."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


@dataclass
class Diagnostic:
    """A single diagnostic message (error, warning, etc.)."""
    code: str                       # E001, E101, etc.
    message: str                    # Human-readable message
    severity: ErrorSeverity
    span: Optional[SourceSpan] = None   # None for hand-built trees
    source_line: Optional[str] = None   # The actual line of source code
    hints: List[str] = field(default_factory=list)

    def format(self, show_source: bool = True) -> str:
        """Format the diagnostic for display."""
        parts = []

        # Header: location: severity[code]: message
        if self.span is not None:
            parts.append(f"{self.span.start}: {self.severity.value}[{self.code}]: {self.message}")
        else:
            parts.append(f"{self.severity.value}[{self.code}]: {self.message}")

        # Source line with caret
        if show_source and self.span is not None and self.source_line is not None:
            parts.append("  |")
            line_num = str(self.span.start.line)
            parts.append(f"{line_num:>3} | {self.source_line}")

            col = self.span.start.column
            end_col = self.span.end.column if self.span.start.line == self.span.end.line else len(self.source_line) + 1
            underline_len = max(1, end_col - col)
            parts.append(f"    | {' ' * (col - 1)}{'^' * underline_len}")

        for hint in self.hints:
            parts.append(f"    = hint: {hint}")

        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        result = {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
            "range": None,
            "hints": self.hints,
        }
        if self.span is not None:
            result["range"] = {
                "start": {
                    "line": self.span.start.line,
                    "column": self.span.start.column,
                    "offset": self.span.start.offset,
                },
                "end": {
                    "line": self.span.end.line,
                    "column": self.span.end.column,
                    "offset": self.span.end.offset,
                },
            }
            if self.span.start.filename:
                result["file"] = self.span.start.filename
        return result


class CompilerError(Exception):
    """Base exception for compiler errors."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.diagnostic.format()


class LexerError(CompilerError):
    """Error during lexical analysis (E0xx)."""
    pass


class ParserError(CompilerError):
    """Error during parsing (E1xx)."""
    pass


class TreeError(CompilerError):
    """Error while walking a syntax tree (E2xx)."""
    pass


class UnrecognizedCharacter(LexerError):
    """A source character that starts no token."""

    def __init__(self, diagnostic: Diagnostic, char: str, location: SourceLocation):
        super().__init__(diagnostic)
        self.char = char
        self.location = location


class UnexpectedToken(ParserError):
    """A token where an expression was expected.

    ``token`` is None when the input ended instead.
    """

    def __init__(self, diagnostic: Diagnostic, token: Optional[Token]):
        super().__init__(diagnostic)
        self.token = token


class MissingCallName(ParserError):
    """An opening paren not followed by a name."""

    def __init__(self, diagnostic: Diagnostic, token: Optional[Token]):
        super().__init__(diagnostic)
        self.token = token


class UnknownNodeType(TreeError):
    """A node outside the set a stage understands."""

    def __init__(self, diagnostic: Diagnostic, node: Any):
        super().__init__(diagnostic)
        self.node = node


class NestingTooDeep(CompilerError):
    """Input nested deeper than the interpreter stack allows (E3xx)."""

    def __init__(self, diagnostic: Diagnostic, stage: str):
        super().__init__(diagnostic)
        self.stage = stage


def describe_token(token: Optional[Token]) -> str:
    """Short human description of a token for error messages."""
    if token is None:
        return "end of input"
    return f"{token.kind} '{token.value}'"


# --- Lexer error codes ---

def error_unrecognized_character(char: str, location: SourceLocation, span: SourceSpan,
                                 source_line: str = None) -> UnrecognizedCharacter:
    """E001: Unrecognized character."""
    diag = Diagnostic(
        code="E001",
        message=f"unrecognized character '{char}'",
        severity=ErrorSeverity.ERROR,
        span=span,
        source_line=source_line,
        hints=["only parentheses, ASCII letters, ASCII digits and whitespace are allowed"],
    )
    return UnrecognizedCharacter(diag, char, location)


# --- Parser error codes ---

def error_unexpected_token(expected: str, token: Optional[Token],
                           span: Optional[SourceSpan]) -> UnexpectedToken:
    """E101: Unexpected token."""
    diag = Diagnostic(
        code="E101",
        message=f"expected {expected}, found {describe_token(token)}",
        severity=ErrorSeverity.ERROR,
        span=span,
    )
    return UnexpectedToken(diag, token)


def error_missing_call_name(token: Optional[Token],
                            span: Optional[SourceSpan]) -> MissingCallName:
    """E102: Call without a name."""
    diag = Diagnostic(
        code="E102",
        message=f"expected call name after '(', found {describe_token(token)}",
        severity=ErrorSeverity.ERROR,
        span=span,
        hints=["a call is written as (name arg ...)"],
    )
    return MissingCallName(diag, token)


# --- Tree error codes ---

def error_unknown_node_type(node: Any, stage: str) -> UnknownNodeType:
    """E201: Node type not understood by a stage."""
    tag = getattr(node, "type", None)
    if not isinstance(tag, str):
        tag = type(node).__name__
    diag = Diagnostic(
        code="E201",
        message=f"{stage}: unknown node type '{tag}'",
        severity=ErrorSeverity.ERROR,
        span=getattr(node, "span", None),
    )
    return UnknownNodeType(diag, node)


# --- Limit error codes ---

def error_nesting_too_deep(stage: str, span: Optional[SourceSpan]) -> NestingTooDeep:
    """E301: Nesting exceeds the recursion limit."""
    diag = Diagnostic(
        code="E301",
        message=f"{stage}: calls nested too deeply",
        severity=ErrorSeverity.ERROR,
        span=span,
        hints=["split the expression into several top-level calls"],
    )
    return NestingTooDeep(diag, stage)


class DiagnosticCollector:
    """Collects diagnostics across several compilations."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []
        self._error_count = 0

    def add(self, diagnostic: Diagnostic) -> None:
        """Add a diagnostic."""
        self.diagnostics.append(diagnostic)
        if diagnostic.severity == ErrorSeverity.ERROR:
            self._error_count += 1

    def add_error(self, error: CompilerError) -> None:
        """Add an error exception as a diagnostic."""
        self.add(error.diagnostic)

    @property
    def error_count(self) -> int:
        return self._error_count

    @property
    def has_errors(self) -> bool:
        return self._error_count > 0

    def format_all(self, show_source: bool = True) -> str:
        """Format all diagnostics for display."""
        parts = [d.format(show_source) for d in self.diagnostics]
        if self._error_count > 0:
            parts.append(f"\n{self._error_count} error(s)")
        return "\n\n".join(parts)

    def to_json(self) -> dict:
        """Convert all diagnostics to JSON format."""
        return {
            "diagnostics": [d.to_json() for d in self.diagnostics],
            "error_count": self._error_count,
        }
