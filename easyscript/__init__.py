"""EasyScript.

A small embeddable interpreter: source text is tokenized, parsed into an
immutable tuple AST and executed by a tree-walk interpreter.

    >>> from easyscript import tokenize, parse, execute
    >>> execute(parse(tokenize('print(2 + 3 * 4);')))
    14


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from easyscript.exceptions import (
    ArityMismatchError,
    DivisionByZeroError,
    EasyScriptError,
    LexError,
    ParseError,
    ScriptRuntimeError,
    StackOverflowError,
    TypeMismatchError,
    UndefinedFunctionError,
    UndefinedVariableError,
)
from easyscript.interpreter import Interpreter
from easyscript.lexer import Token, tokenize
from easyscript.parser import Parser

__version__ = "0.1.1"


def parse(tokens: list, file: str = '<script>') -> tuple:
    """
    Parse a token list into a program node.

    Raises:
        ParseError: On the first malformed construct.
    """
    return Parser(tokens, file).parse()


def execute(ast: tuple, file: str = '<script>') -> None:
    """
    Execute a program node in a fresh global environment.

    Raises:
        ScriptRuntimeError: On the first runtime failure.
    """
    Interpreter(file).execute(ast)


def run(source: str, file: str = '<script>') -> Interpreter:
    """
    Tokenize, parse and execute source text.

    Returns:
        Interpreter: the interpreter, so callers can inspect global bindings.
    """
    interpreter = Interpreter(file)
    interpreter.execute(parse(tokenize(source, file), file))
    return interpreter


__all__ = [
    "ArityMismatchError",
    "DivisionByZeroError",
    "EasyScriptError",
    "Interpreter",
    "LexError",
    "ParseError",
    "Parser",
    "ScriptRuntimeError",
    "StackOverflowError",
    "Token",
    "TypeMismatchError",
    "UndefinedFunctionError",
    "UndefinedVariableError",
    "execute",
    "parse",
    "run",
    "tokenize",
]
