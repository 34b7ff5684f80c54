"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, variables, function definitions and calls with closures, conditionals, loops and
the built-in functions.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via `exec_stmt()` and expressions are evaluated via `eval_expr()`.
Both operate over structured tuples representing nodes in the AST, together with the
environment the node runs in.

2. Environment
Scopes are `Environment` frames chained to a parent. The interpreter owns one global frame.
Blocks and loops run in child frames, so their declarations do not leak. A function call
creates a frame whose parent is the environment captured when the function was declared,
never the caller's frame; this is what makes closures lexical.

3. Control Flow
Every statement returns an `Outcome`. `return`, `break` and `continue` produce a non-normal
outcome that each enclosing block hands back to its caller until a loop or a function call
consumes it. No exceptions are used for control transfer.

4. Error Handling
Runtime errors (undefined names, type mismatches, wrong argument counts, division by zero,
runaway recursion) are raised as `ScriptRuntimeError` subclasses with the line of the
offending node and the script name.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
import math
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any

from easyscript.builtins import BUILTINS
from easyscript.environment import Environment
from easyscript.exceptions import (
    ArityMismatchError,
    DivisionByZeroError,
    StackOverflowError,
    TypeMismatchError,
    UndefinedFunctionError,
)
from easyscript.operations import Op
from easyscript.values import (
    Builtin,
    Function,
    is_number,
    to_display,
    type_name,
    values_equal,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_CALL_DEPTH = 200

# Python frames budgeted for each script-level call.
FRAMES_PER_CALL = 24


class Signal(Enum):
    """How a statement finished."""
    NORMAL = "normal"
    RETURN = "return"
    BREAK = "break"
    CONTINUE = "continue"


@dataclass(frozen=True)
class Outcome:
    """Result of executing a statement: a signal and, for returns, a value."""
    signal: Signal
    value: Any = None


NORMAL = Outcome(Signal.NORMAL)
BREAK = Outcome(Signal.BREAK)
CONTINUE = Outcome(Signal.CONTINUE)


@contextmanager
def stack_headroom(frames: int):
    """Raise the Python recursion limit by ``frames`` for the duration of the block."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + frames)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Interpreter:
    """Tree-walk interpreter for EasyScript."""

    def __init__(self, file: str = '<script>', max_call_depth: int = DEFAULT_MAX_CALL_DEPTH):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Script name used in error messages.
            max_call_depth (int): Nested call limit before StackOverflowError.
        """
        self.file = file
        self.max_call_depth = max_call_depth
        self.global_env = Environment()
        self.call_depth = 0

    @property
    def vars(self) -> dict:
        """Bindings of the global frame."""
        return self.global_env.vars

    def _format_expr(self, node) -> str:
        """
        Convert an expression node back to readable source for error messages.

        Args:
            node (tuple): An expression node, structured as a tuple.

        Returns:
            str: A string representation of the expression.
        """
        kind = node[0]
        match kind:
            case 'number':
                return to_display(node[1])
            case 'string':
                return f'"{node[1]}"'
            case 'ident':
                return node[1]
            case 'list':
                return '[' + ', '.join(self._format_expr(e) for e in node[1]) + ']'
            case 'func_call':
                return f"{node[1]}({', '.join(self._format_expr(a) for a in node[2])})"
            case 'unary':
                return f"{node[1].symbol}{self._format_expr(node[2])}"
            case Op():
                return (
                    f"({self._format_expr(node[1])} {kind.symbol} "
                    f"{self._format_expr(node[2])})"
                )
            case _:
                return f"<expr {kind}>"

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, program: tuple) -> None:
        """
        Execute a program node against the global environment.

        Parameters:
            program (tuple): ('program', statements, line) as produced by the parser.
        """
        _, statements, _ = program
        with stack_headroom(self.max_call_depth * FRAMES_PER_CALL):
            try:
                self.execute_block(statements, self.global_env)
            except RecursionError:
                raise StackOverflowError(self.max_call_depth, None, self.file) from None

    def execute_block(self, statements, env: Environment) -> Outcome:
        """
        Execute statements in order in ``env``, stopping at the first
        non-normal outcome and handing it back to the caller.
        """
        for stmt in statements:
            outcome = self.exec_stmt(stmt, env)
            if outcome.signal is not Signal.NORMAL:
                return outcome
        return NORMAL

    def exec_stmt(self, stmt: tuple, env: Environment) -> Outcome:
        """
        Execute one statement.

        Raises:
            ScriptRuntimeError: For any runtime failure in the statement.
        """
        kind = stmt[0]
        line = stmt[-1]

        if kind == 'var':
            _, name, init, _ = stmt
            value = self.eval_expr(init, env) if init is not None else None
            env.define(name, value)

        elif kind == 'assign':
            _, name, expr_node, _ = stmt
            value = self.eval_expr(expr_node, env)
            env.assign(name, value, line, self.file)

        elif kind == 'expr_stmt':
            self.eval_expr(stmt[1], env)

        elif kind == 'if':
            _, cond_node, then_block, else_node, _ = stmt
            if self._condition(cond_node, env, 'if'):
                return self.execute_block(then_block[1], env.child())
            if else_node is not None:
                if else_node[0] == 'if':
                    return self.exec_stmt(else_node, env)
                return self.execute_block(else_node[1], env.child())

        elif kind == 'for':
            return self._exec_for(stmt, env)

        elif kind == 'while':
            _, cond_node, body, _ = stmt
            while self._condition(cond_node, env, 'while'):
                outcome = self.execute_block(body[1], env.child())
                if outcome.signal is Signal.BREAK:
                    break
                if outcome.signal is Signal.RETURN:
                    return outcome

        elif kind == 'block':
            return self.execute_block(stmt[1], env.child())

        elif kind == 'func_def':
            _, name, params, body, _ = stmt
            env.define(name, Function(name, params, body, env))

        elif kind == 'return':
            expr_node = stmt[1]
            value = self.eval_expr(expr_node, env) if expr_node is not None else None
            return Outcome(Signal.RETURN, value)

        elif kind == 'break':
            return BREAK

        elif kind == 'continue':
            return CONTINUE

        else:
            raise TypeError(f"Unknown statement type: {kind} on line {line} in {self.file}")

        return NORMAL

    def _exec_for(self, stmt: tuple, env: Environment) -> Outcome:
        _, name, start_node, end_node, body, line = stmt
        start = self.eval_expr(start_node, env)
        end = self.eval_expr(end_node, env)
        for label, bound in (('start', start), ('end', end)):
            if not is_number(bound):
                raise TypeMismatchError(
                    f"for loop {label} must be a number, not {type_name(bound)}",
                    line, self.file,
                )
            if not math.isfinite(bound):
                raise TypeMismatchError(
                    f"for loop {label} must be a finite number, not {to_display(bound)}",
                    line, self.file,
                )

        loop_env = env.child()
        for i in range(math.floor(start), math.floor(end) + 1):
            loop_env.define(name, float(i))
            outcome = self.execute_block(body[1], loop_env)
            if outcome.signal is Signal.BREAK:
                break
            if outcome.signal is Signal.RETURN:
                return outcome
        return NORMAL

    def _condition(self, node: tuple, env: Environment, construct: str) -> bool:
        value = self.eval_expr(node, env)
        if not isinstance(value, bool):
            raise TypeMismatchError(
                f"{construct} condition must be a boolean, not {type_name(value)} "
                f"{self._format_expr(node)}",
                node[-1], self.file,
            )
        return value

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def eval_expr(self, node: tuple, env: Environment) -> Any:
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (tuple): An expression node. The first element is the node kind
                (e.g. 'number', 'ident' or an `Op`), the last is the line number.
            env (Environment): The frame the expression is evaluated in.

        Returns:
            The evaluated result of the expression.

        Raises:
            UndefinedVariableError: If a variable is referenced that has not been defined.
            TypeMismatchError: If an operator is applied to the wrong kinds of values.
            DivisionByZeroError: If the divisor of '/' or '%' is zero.
        """
        kind = node[0]
        line = node[-1]

        # Literals
        if kind in ('number', 'string'):
            return node[1]
        if kind == 'list':
            return [self.eval_expr(elem, env) for elem in node[1]]

        # Variables
        if kind == 'ident':
            name = node[1]
            if env.resolve(name) is None and name in BUILTINS:
                return BUILTINS[name]
            return env.lookup(name, line, self.file)

        if kind == 'func_call':
            return self._call(node, env)

        if kind == 'unary':
            return self._eval_unary(node, env)

        if isinstance(kind, Op):
            return self._eval_binary(node, env)

        raise RuntimeError(f"Invalid expression node: {node}")

    def _eval_unary(self, node: tuple, env: Environment) -> Any:
        _, operator, operand_node, line = node
        operand = self.eval_expr(operand_node, env)
        match operator:
            case Op.NEG:
                if not is_number(operand):
                    raise TypeMismatchError(
                        f"Unary minus (-) requires a number, not {type_name(operand)} "
                        f"{self._format_expr(node)}",
                        line, self.file,
                    )
                return -operand
            case Op.NOT:
                if not isinstance(operand, bool):
                    raise TypeMismatchError(
                        f"Logical not (!) requires a boolean, not {type_name(operand)} "
                        f"{self._format_expr(node)}",
                        line, self.file,
                    )
                return not operand
        raise RuntimeError(f"Unknown unary operator '{operator}' on line {line}")

    def _mismatch(self, node: tuple, lhs: Any, rhs: Any) -> TypeMismatchError:
        return TypeMismatchError(
            f"Operator '{node[0].symbol}' cannot be applied to "
            f"{type_name(lhs)} and {type_name(rhs)} {self._format_expr(node)}",
            node[-1], self.file,
        )

    def _logical_operand(self, node: tuple, operand_node: tuple, env: Environment) -> bool:
        value = self.eval_expr(operand_node, env)
        if not isinstance(value, bool):
            raise TypeMismatchError(
                f"Operator '{node[0].symbol}' requires boolean operands, "
                f"not {type_name(value)} {self._format_expr(node)}",
                node[-1], self.file,
            )
        return value

    def _eval_binary(self, node: tuple, env: Environment) -> Any:
        op, lhs_node, rhs_node, line = node

        # Short-circuit: the right operand is only evaluated when needed.
        if op == Op.AND:
            return self._logical_operand(node, lhs_node, env) and \
                self._logical_operand(node, rhs_node, env)
        if op == Op.OR:
            return self._logical_operand(node, lhs_node, env) or \
                self._logical_operand(node, rhs_node, env)

        lhs = self.eval_expr(lhs_node, env)
        rhs = self.eval_expr(rhs_node, env)

        match op:
            case Op.EQ:
                return values_equal(lhs, rhs)
            case Op.NE:
                return not values_equal(lhs, rhs)
            case Op.ADD:
                if is_number(lhs) and is_number(rhs):
                    return lhs + rhs
                if isinstance(lhs, str) or isinstance(rhs, str):
                    return to_display(lhs) + to_display(rhs)
                raise self._mismatch(node, lhs, rhs)
            case Op.LT | Op.LE | Op.GT | Op.GE:
                comparable = (is_number(lhs) and is_number(rhs)) or (
                    isinstance(lhs, str) and isinstance(rhs, str)
                )
                if not comparable:
                    raise self._mismatch(node, lhs, rhs)
                match op:
                    case Op.LT:
                        return lhs < rhs
                    case Op.LE:
                        return lhs <= rhs
                    case Op.GT:
                        return lhs > rhs
                    case _:
                        return lhs >= rhs

        if not (is_number(lhs) and is_number(rhs)):
            raise self._mismatch(node, lhs, rhs)

        match op:
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV:
                if rhs == 0:
                    raise DivisionByZeroError(line, self.file)
                return lhs / rhs
            case Op.MOD:
                if rhs == 0:
                    raise DivisionByZeroError(line, self.file)
                return lhs % rhs

        raise RuntimeError(f"Unknown binary operator '{op}' on line {line}")

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    def _resolve_callee(self, name: str, env: Environment, line: int) -> Function | Builtin:
        if name in BUILTINS:
            return BUILTINS[name]
        frame = env.resolve(name)
        if frame is None:
            raise UndefinedFunctionError(name, line, self.file)
        callee = frame.vars[name]
        if not isinstance(callee, (Function, Builtin)):
            raise UndefinedFunctionError(name, line, self.file)
        return callee

    def _call(self, node: tuple, env: Environment) -> Any:
        """
        Call a built-in or user-defined function.

        Arguments are evaluated left to right in the caller's frame. A user
        function body runs in a new frame whose parent is the function's
        closure environment.
        """
        _, name, args_nodes, line = node
        callee = self._resolve_callee(name, env, line)

        if callee.arity is not None and len(args_nodes) != callee.arity:
            raise ArityMismatchError(name, callee.arity, len(args_nodes), line, self.file)

        args = [self.eval_expr(arg, env) for arg in args_nodes]

        if isinstance(callee, Builtin):
            return callee.impl(args, line, self.file)

        if self.call_depth >= self.max_call_depth:
            raise StackOverflowError(self.max_call_depth, line, self.file)

        frame = callee.closure.child()
        for param, arg in zip(callee.params, args):
            frame.define(param, arg)

        logger.debug("call %s depth=%d line=%s", callee.name, self.call_depth + 1, line)
        self.call_depth += 1
        try:
            outcome = self.execute_block(callee.body[1], frame)
        except RecursionError:
            raise StackOverflowError(self.max_call_depth, line, self.file) from None
        finally:
            self.call_depth -= 1

        if outcome.signal is Signal.RETURN:
            return outcome.value
        return None
