"""Errors.

Every stage of the pipeline fails fast with one of the exceptions below.
Lexer and parser errors carry a line and column; runtime errors carry the
line of the AST node being evaluated.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _where(line=None, column=None, file=None) -> str:
    location = ""
    if line is not None:
        location += f" on line {line}"
        if column is not None:
            location += f", column {column}"
    if file is not None:
        location += f" in {file}"
    return location


class EasyScriptError(Exception):
    """
    Base class for all EasyScript errors.
    """


class LexError(EasyScriptError):
    """
    Error for characters the lexer cannot classify.
    """
    def __init__(self, char, line, column, file=None, reason=None):
        self.char = char
        self.line = line
        self.column = column
        message = reason or f"Unexpected character {char!r}"
        super().__init__(message + _where(line, column, file))


class ParseError(EasyScriptError):
    """
    Error for unexpected or missing tokens.
    """
    def __init__(self, expected, found, line, column, file=None):
        self.expected = expected
        self.found = found
        self.line = line
        self.column = column
        super().__init__(
            f"Expected {expected}, but got {found}" + _where(line, column, file)
        )


class ScriptRuntimeError(EasyScriptError):
    """
    Base class for errors raised while executing a program.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        super().__init__(message + _where(line, file=file))


class UndefinedVariableError(ScriptRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, file)


class UndefinedFunctionError(ScriptRuntimeError):
    """
    Error for calls to names that are unbound or not callable.
    """
    def __init__(self, name, line=None, file=None):
        self.name = name
        super().__init__(f"Undefined function '{name}'", line, file)


class TypeMismatchError(ScriptRuntimeError):
    """
    Error for operands or arguments of the wrong runtime type.
    """


class ArityMismatchError(ScriptRuntimeError):
    """
    Error for calls with the wrong number of arguments.
    """
    def __init__(self, name, expected, got, line=None, file=None):
        self.name = name
        self.expected = expected
        self.got = got
        plural = "" if expected == 1 else "s"
        super().__init__(
            f"{name}() expects {expected} argument{plural}, got {got}", line, file
        )


class DivisionByZeroError(ScriptRuntimeError):
    """
    Error for division or modulo by zero.
    """
    def __init__(self, line=None, file=None):
        super().__init__("Division by zero", line, file)


class StackOverflowError(ScriptRuntimeError):
    """
    Error for runaway recursion.
    """
    def __init__(self, depth, line=None, file=None):
        self.depth = depth
        super().__init__(f"Maximum call depth of {depth} exceeded", line, file)
