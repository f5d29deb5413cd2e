"""
The full pipeline: tokenize, parse, transform, generate.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from . import ast
from . import cast
from .tokens import Token
from .lexer import tokenize
from .parser import parse
from .transformer import transform
from .codegen import generate


@dataclass
class CompileResult:
    """Every intermediate of one compilation."""
    tokens: List[Token]
    ast: ast.Program
    cast: cast.Program
    code: str


def compile_stages(source: str, filename: Optional[str] = None) -> CompileResult:
    """
    Compile source, keeping each stage's output.

    Raises:
        CompilerError: From whichever stage fails first
    """
    tokens = tokenize(source, filename)
    source_tree = parse(tokens)
    c_tree = transform(source_tree)
    code = generate(c_tree)
    return CompileResult(tokens=tokens, ast=source_tree, cast=c_tree, code=code)


def compile(source: str, filename: Optional[str] = None) -> str:
    """
    Compile S-expression calls to C-style calls.

        >>> compile("(add 2 (subtract 4 2))")
        'add(2, subtract(4, 2));'
    """
    return generate(transform(parse(tokenize(source, filename))))


def compile_file(path: Union[str, Path]) -> str:
    """Compile a UTF-8 source file; diagnostics name the file."""
    path = Path(path)
    return compile(path.read_text(encoding="utf-8"), str(path))
