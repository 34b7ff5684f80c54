"""Runtime values.

EasyScript values are plain Python objects, tagged by their Python type:

    null      None
    boolean   bool
    number    int or float (never bool)
    string    str
    list      list
    function  Function or Builtin

Only lists and environments are mutable at runtime.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from easyscript.environment import Environment


class Function:
    """Runtime representation of a user-defined function (a closure)."""

    def __init__(self, name: str, params: tuple, body: tuple, closure: Environment):
        self.name = name
        self.params = params
        self.body = body
        # Environment active at definition time; parent of every call frame.
        self.closure = closure

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return f"<function {self.name}({', '.join(self.params)})>"


class Builtin:
    """A native function implemented in Python."""

    def __init__(self, name: str, impl: Callable[..., Any], arity: int | None):
        self.name = name
        self.impl = impl
        # None means variadic.
        self.arity = arity

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


def is_number(value: Any) -> bool:
    """True for int and float values, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: Any) -> str:
    """
    Return the runtime tag of a value.

    Returns:
        str: one of null, boolean, number, string, list, function.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if is_number(value):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'list'
    if isinstance(value, (Function, Builtin)):
        return 'function'
    raise TypeError(f"Not an EasyScript value: {value!r}")


def format_number(value: int | float) -> str:
    """Integral values below 1e16 print without a fraction; others use ``repr``."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def to_display(value: Any, nested: bool = False) -> str:
    """
    Convert a value to the text `print` writes.

    Strings are written verbatim at the top level and quoted inside lists.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if is_number(value):
        return format_number(value)
    if isinstance(value, str):
        return f'"{value}"' if nested else value
    if isinstance(value, list):
        return '[' + ', '.join(to_display(item, nested=True) for item in value) + ']'
    if isinstance(value, (Function, Builtin)):
        return f"<function {value.name}>"
    return str(value)


def values_equal(lhs: Any, rhs: Any) -> bool:
    """Equality that never crosses runtime tags (true != 1)."""
    if type_name(lhs) != type_name(rhs):
        return False
    if isinstance(lhs, list):
        return len(lhs) == len(rhs) and all(
            values_equal(a, b) for a, b in zip(lhs, rhs)
        )
    if isinstance(lhs, (Function, Builtin)):
        return lhs is rhs
    return lhs == rhs
