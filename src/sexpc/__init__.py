"""
sexpc: a tiny S-expression to C-style call compiler.

This package provides:
- Lexer: Tokenizes source code
- Parser: Builds the source AST from tokens
- Transformer: Rewrites the source AST into a C-style AST
- Code generator: Renders the C-style AST as text

Usage:
    from sexpc import tokenize, parse, transform, generate, compile

    compile('(add 2 (subtract 4 2))')
    # 'add(2, subtract(4, 2));'

    # Or stage by stage
    tokens = tokenize('(add 2 (subtract 4 2))')
    program = parse(tokens)
    c_program = transform(program)
    code = generate(c_program)
"""

from .tokens import (
    Token,
    TokenType,
    SourceLocation,
    SourceSpan,
)

from .lexer import (
    Lexer,
    tokenize,
)

from .parser import (
    Parser,
    parse,
)

from .ast import (
    Node,
    AstNode,
    Program,
    CallExpression,
    NumberLiteral,
    depth,
    print_ast,
)

from . import cast

from .transformer import (
    AstTransform,
    Transformer,
    transform,
)

from .codegen import (
    CodeGenerator,
    generate,
)

from .compiler import (
    CompileResult,
    compile,
    compile_stages,
    compile_file,
)

from .errors import (
    CompilerError,
    LexerError,
    ParserError,
    TreeError,
    UnrecognizedCharacter,
    UnexpectedToken,
    MissingCallName,
    UnknownNodeType,
    NestingTooDeep,
    Diagnostic,
    DiagnosticCollector,
    ErrorSeverity,
)

__version__ = "0.1.0"

__all__ = [
    # Tokens
    'Token',
    'TokenType',
    'SourceLocation',
    'SourceSpan',

    # Lexer
    'Lexer',
    'tokenize',

    # Parser
    'Parser',
    'parse',

    # Source AST
    'Node',
    'AstNode',
    'Program',
    'CallExpression',
    'NumberLiteral',
    'depth',
    'print_ast',

    # C-style AST module
    'cast',

    # Transformer
    'AstTransform',
    'Transformer',
    'transform',

    # Code generator
    'CodeGenerator',
    'generate',

    # Compiler
    'CompileResult',
    'compile',
    'compile_stages',
    'compile_file',

    # Errors
    'CompilerError',
    'LexerError',
    'ParserError',
    'TreeError',
    'UnrecognizedCharacter',
    'UnexpectedToken',
    'MissingCallName',
    'UnknownNodeType',
    'NestingTooDeep',
    'Diagnostic',
    'DiagnosticCollector',
    'ErrorSeverity',
]
