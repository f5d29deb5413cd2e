"""
Unit tests for diagnostics and the error hierarchy.
"""

import pytest
from sexpc import (
    tokenize, parse, generate, ast,
    CompilerError, LexerError, ParserError, TreeError,
    UnrecognizedCharacter, UnexpectedToken, MissingCallName, UnknownNodeType,
    NestingTooDeep,
    Diagnostic, DiagnosticCollector, ErrorSeverity, SourceLocation, SourceSpan,
)


def span_at(line, start_col, end_col, filename=None):
    return SourceSpan(
        SourceLocation(line, start_col, start_col - 1, filename),
        SourceLocation(line, end_col, end_col - 1, filename),
    )


class TestHierarchy:
    """Test exception classes."""

    @pytest.mark.parametrize("cls, base", [
        (UnrecognizedCharacter, LexerError),
        (UnexpectedToken, ParserError),
        (MissingCallName, ParserError),
        (UnknownNodeType, TreeError),
        (LexerError, CompilerError),
        (ParserError, CompilerError),
        (TreeError, CompilerError),
        (NestingTooDeep, CompilerError),
    ])
    def test_bases(self, cls, base):
        assert issubclass(cls, base)

    def test_codes(self):
        """Each error kind carries its code."""
        cases = [
            (lambda: tokenize("%"), "E001"),
            (lambda: parse(tokenize("(f")), "E101"),
            (lambda: parse(tokenize("(1)")), "E102"),
            (lambda: generate(ast.NumberLiteral("1")), "E201"),
            (lambda: parse(tokenize("(f " * 5000 + ")" * 5000)), "E301"),
        ]
        for action, code in cases:
            with pytest.raises(CompilerError) as exc_info:
                action()
            assert exc_info.value.code == code


class TestDiagnosticFormat:
    """Test diagnostic rendering."""

    def test_header(self):
        diag = Diagnostic("E101", "expected number, found name 'x'",
                          ErrorSeverity.ERROR, span_at(1, 4, 5, "a.sexp"))
        assert diag.format().splitlines()[0] == "a.sexp:1:4: error[E101]: expected number, found name 'x'"

    def test_caret_under_source(self):
        diag = Diagnostic("E001", "unrecognized character '$'", ErrorSeverity.ERROR,
                          span_at(1, 8, 9), source_line="(add 2 $)")
        lines = diag.format().splitlines()
        assert lines[2] == "  1 | (add 2 $)"
        assert lines[3] == "    |        ^"

    def test_source_hidden(self):
        diag = Diagnostic("E001", "bad", ErrorSeverity.ERROR,
                          span_at(1, 1, 2), source_line="$")
        assert diag.format(show_source=False) == "1:1: error[E001]: bad"

    def test_hints(self):
        diag = Diagnostic("E102", "missing name", ErrorSeverity.ERROR,
                          hints=["write (name ...)"])
        assert "    = hint: write (name ...)" in diag.format()

    def test_without_span(self):
        """Hand-built trees have no span; the header drops the location."""
        diag = Diagnostic("E201", "code generator: unknown node type 'X'", ErrorSeverity.ERROR)
        assert diag.format() == "error[E201]: code generator: unknown node type 'X'"

    def test_to_json(self):
        diag = Diagnostic("E001", "bad", ErrorSeverity.ERROR, span_at(2, 3, 4, "f.sexp"))
        data = diag.to_json()
        assert data["code"] == "E001"
        assert data["severity"] == "error"
        assert data["file"] == "f.sexp"
        assert data["range"]["start"] == {"line": 2, "column": 3, "offset": 2}

    def test_to_json_without_span(self):
        data = Diagnostic("E201", "bad", ErrorSeverity.ERROR).to_json()
        assert data["range"] is None
        assert "file" not in data


class TestCollector:
    """Test diagnostic collection."""

    def test_empty(self):
        collector = DiagnosticCollector()
        assert not collector.has_errors
        assert collector.to_json() == {"diagnostics": [], "error_count": 0}

    def test_add_errors(self):
        collector = DiagnosticCollector()
        for source in ("$", "(f"):
            try:
                parse(tokenize(source))
            except CompilerError as e:
                collector.add_error(e)
        assert collector.error_count == 2
        assert [d.code for d in collector.diagnostics] == ["E001", "E101"]
        assert collector.format_all().endswith("2 error(s)")

    def test_warnings_not_counted(self):
        collector = DiagnosticCollector()
        collector.add(Diagnostic("W001", "note", ErrorSeverity.WARNING))
        assert collector.error_count == 0
        assert not collector.has_errors
