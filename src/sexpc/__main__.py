#!/usr/bin/env python3
"""
CLI for the sexpc compiler.

Usage:
    python -m sexpc compile FILE [--output OUT]
    python -m sexpc compile -e SOURCE
    python -m sexpc dump FILE --stage {tokens,ast,cast}
    python -m sexpc check FILE... [--json]

Examples:
    # Compile an inline expression
    python -m sexpc compile -e "(add 2 (subtract 4 2))"

    # Compile a file to another file
    python -m sexpc compile examples/math.sexp -o math.c

    # Show the C-style tree as JSON
    python -m sexpc dump examples/math.sexp --stage cast

    # Check several files, reporting every error
    python -m sexpc check examples/*.sexp
"""

import argparse
import json
import sys
from pathlib import Path

from .errors import CompilerError, DiagnosticCollector

STAGES = ('tokens', 'ast', 'cast')


def read_source(file_arg: str):
    """Read a source file, returning None (after reporting) if it is missing."""
    source_path = Path(file_arg)
    if not source_path.exists():
        print(f"Error: File not found: {source_path}", file=sys.stderr)
        return None
    return source_path.read_text(encoding="utf-8")


def cmd_compile(args):
    """Compile a file or an inline expression."""
    from . import compile

    if args.expr is not None:
        source, filename = args.expr, "<expr>"
    elif args.file is not None:
        source, filename = read_source(args.file), args.file
        if source is None:
            return 1
    else:
        print("Error: give a FILE or -e SOURCE", file=sys.stderr)
        return 1

    try:
        code = compile(source, filename)
    except CompilerError as e:
        print(e, file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(code + "\n", encoding="utf-8")
        print(f"Compiled to: {args.output}")
    else:
        print(code)
    return 0


def cmd_dump(args):
    """Print one intermediate stage as JSON."""
    from . import compile_stages

    source = read_source(args.file)
    if source is None:
        return 1

    try:
        result = compile_stages(source, args.file)
    except CompilerError as e:
        print(e, file=sys.stderr)
        return 1

    if args.stage == 'tokens':
        data = [token.to_dict() for token in result.tokens]
    elif args.stage == 'ast':
        data = result.ast.to_dict()
    else:
        data = result.cast.to_dict()

    print(json.dumps(data, indent=2))
    return 0


def cmd_check(args):
    """Compile each file and report all diagnostics."""
    from . import compile

    collector = DiagnosticCollector()
    missing = 0

    for file_arg in args.files:
        source = read_source(file_arg)
        if source is None:
            missing += 1
            continue
        try:
            compile(source, file_arg)
        except CompilerError as e:
            collector.add_error(e)

    if args.json:
        print(json.dumps(collector.to_json(), indent=2))
    elif collector.has_errors:
        print(collector.format_all(), file=sys.stderr)
    else:
        checked = len(args.files) - missing
        print(f"OK: {checked} file(s), no errors")

    if collector.has_errors or missing:
        return 1
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='python -m sexpc',
        description='Compile S-expression calls to C-style calls',
    )

    subparsers = parser.add_subparsers(dest='action', required=True)

    # compile command
    compile_parser = subparsers.add_parser('compile', help='Compile a file or expression')
    compile_parser.add_argument('file', nargs='?', help='Source file')
    compile_parser.add_argument('-e', '--expr', metavar='SOURCE',
                                help='Compile SOURCE instead of a file')
    compile_parser.add_argument('-o', '--output', metavar='FILE',
                                help='Write the generated code to FILE')

    # dump command
    dump_parser = subparsers.add_parser('dump', help='Print an intermediate stage as JSON')
    dump_parser.add_argument('file', help='Source file')
    dump_parser.add_argument('-s', '--stage', choices=STAGES, default='cast',
                             help='Stage to print (default: cast)')

    # check command
    check_parser = subparsers.add_parser('check', help='Check source files for errors')
    check_parser.add_argument('files', nargs='+', metavar='FILE', help='Source files')
    check_parser.add_argument('--json', action='store_true',
                              help='Print diagnostics as JSON')

    args = parser.parse_args(argv)

    if args.action == 'compile':
        return cmd_compile(args)
    elif args.action == 'dump':
        return cmd_dump(args)
    elif args.action == 'check':
        return cmd_check(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
