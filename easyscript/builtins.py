"""Built-in functions.

A call to `print`, `len` or `type` always reaches the built-in. When the
name is read as a value, a script binding of the same name wins and the
built-in is returned only if no frame binds it. Arity is checked by the
interpreter from the `Builtin.arity` field before the implementation is
called.


File: builtins.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from easyscript.exceptions import TypeMismatchError
from easyscript.values import Builtin, to_display, type_name


def builtin_print(args, line=None, file=None):
    """Write the display form of each argument, space separated, plus a newline."""
    print(' '.join(to_display(arg) for arg in args))
    return None


def builtin_len(args, line=None, file=None):
    """Character count of a string or element count of a list."""
    value = args[0]
    if isinstance(value, (str, list)):
        return float(len(value))
    raise TypeMismatchError(
        f"len() only works on strings or lists, not {type_name(value)}", line, file
    )


def builtin_type(args, line=None, file=None):
    """Name of the runtime tag of the argument."""
    return type_name(args[0])


BUILTINS: dict[str, Builtin] = {
    'print': Builtin('print', builtin_print, None),
    'len': Builtin('len', builtin_len, 1),
    'type': Builtin('type', builtin_type, 1),
}
