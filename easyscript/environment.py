"""Lexical environments.

An environment is one scope frame: a dict of bindings plus a link to the
enclosing frame. The global frame has no parent. Function call frames are
chained to the function's defining environment, never to the caller's.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Any

from easyscript.exceptions import UndefinedVariableError


class Environment:
    """A scope frame mapping names to values."""

    def __init__(self, parent: Environment | None = None):
        self.vars: dict[str, Any] = {}
        self.parent = parent

    def child(self) -> Environment:
        """Create a new frame enclosed by this one."""
        return Environment(self)

    def define(self, name: str, value: Any = None) -> None:
        """Bind ``name`` in this frame, overwriting any existing binding here."""
        self.vars[name] = value

    def resolve(self, name: str) -> Environment | None:
        """Return the nearest frame that binds ``name``, or None."""
        env = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.parent
        return None

    def lookup(self, name: str, line: int | None = None, file: str | None = None) -> Any:
        """
        Return the value bound to ``name`` in the nearest enclosing frame.

        Raises:
            UndefinedVariableError: If no frame binds the name.
        """
        env = self.resolve(name)
        if env is None:
            raise UndefinedVariableError(name, line, file)
        return env.vars[name]

    def assign(self, name: str, value: Any, line: int | None = None, file: str | None = None) -> None:
        """
        Rebind ``name`` in the nearest frame that already binds it.

        Raises:
            UndefinedVariableError: If no frame binds the name.
        """
        env = self.resolve(name)
        if env is None:
            raise UndefinedVariableError(name, line, file)
        env.vars[name] = value

    def __repr__(self) -> str:
        return f"Environment({sorted(self.vars)})"
