"""
Tests for function calls in EasyScript
"""
import sys

import pytest

from easyscript.exceptions import (
    ArityMismatchError,
    StackOverflowError,
    UndefinedFunctionError,
)
from easyscript.interpreter import Interpreter

from easyscript.tests.utils import output_lines, parse_source, run_source


def test_call_ast_and_runtime(capsys):
    """
    Test that function calls are parsed correctly and execute as expected.
    """
    source = (
        "function foo() { print(42); }\n"
        "foo();\n"
        "print(foo());\n"
    )
    ast = parse_source(source)

    # The standalone call should be wrapped in an expr_stmt
    expr_stmt = ast[1][1]
    assert expr_stmt[0] == 'expr_stmt'
    assert expr_stmt[1] == ('func_call', 'foo', (), 2)

    interpreter = Interpreter('<test>')
    interpreter.execute(ast)
    assert output_lines(capsys) == ['42', '42', 'null']


def test_parameters_and_return(capsys):
    run_source("function add(a, b) { return a + b; } print(add(2, 3));")
    assert output_lines(capsys) == ['5']


def test_bare_return_yields_null(capsys):
    run_source("function f() { return; print(1); } print(f());")
    assert output_lines(capsys) == ['null']


def test_recursion(capsys):
    run_source(
        "function fact(n) { if (n <= 1) { return 1; } return n * fact(n - 1); }\n"
        "function fib(n) { if (n < 2) { return n; } return fib(n - 1) + fib(n - 2); }\n"
        "print(fact(10), fib(15));\n"
    )
    assert output_lines(capsys) == ['3628800 610']


def test_arguments_evaluated_left_to_right_in_caller(capsys):
    run_source(
        "function show(v) { print(v); return v; }\n"
        "function pair(a, b) { return a + b; }\n"
        "print(pair(show(1), show(2)));\n"
    )
    assert output_lines(capsys) == ['1', '2', '3']


def test_arity_mismatch():
    with pytest.raises(ArityMismatchError) as exc:
        run_source("function f(a, b) { return a; }\nf(1);")
    assert exc.value.expected == 2
    assert exc.value.got == 1
    assert exc.value.line == 2
    assert "f() expects 2 arguments, got 1" in str(exc.value)


def test_too_many_arguments():
    with pytest.raises(ArityMismatchError):
        run_source("function f() { } f(1);")


def test_arity_checked_before_arguments_run(capsys):
    with pytest.raises(ArityMismatchError):
        run_source('function f(a) { } f(print("side effect"), 2);')
    assert capsys.readouterr().out == ""


def test_undefined_function():
    with pytest.raises(UndefinedFunctionError, match="Undefined function 'missing'"):
        run_source("missing(1);")


def test_calling_a_non_function_value():
    with pytest.raises(UndefinedFunctionError):
        run_source("var notfn = 3; notfn();")


def test_functions_are_first_class_values(capsys):
    run_source(
        "function twice(x) { return x * 2; }\n"
        "var alias = twice;\n"
        "print(alias(21), type(alias), alias);\n"
    )
    assert output_lines(capsys) == ['42 function <function twice>']


def test_runaway_recursion_is_a_stack_overflow():
    with pytest.raises(StackOverflowError):
        run_source("function down(n) { return down(n + 1); } down(0);")


def test_call_depth_limit_is_configurable(capsys):
    source = "function depth(n) { if (n == 0) { return 0; } return 1 + depth(n - 1); }"
    interpreter = Interpreter('<test>', max_call_depth=10)
    interpreter.execute(parse_source(source + " print(depth(9));"))
    assert output_lines(capsys) == ['9']
    with pytest.raises(StackOverflowError) as exc:
        interpreter.execute(parse_source("depth(10);"))
    assert exc.value.depth == 10
    assert interpreter.call_depth == 0


def test_default_call_depth_is_reachable(capsys):
    source = (
        "function total(n) {\n"
        "    if (n == 0) { return 0; }\n"
        "    var rest = total(n - 1);\n"
        "    return n + rest;\n"
        "}\n"
    )
    interpreter = Interpreter('<test>')
    interpreter.execute(parse_source(source + "print(total(199));"))
    assert output_lines(capsys) == ['19900']
    with pytest.raises(StackOverflowError) as exc:
        interpreter.execute(parse_source("total(200);"))
    assert exc.value.depth == interpreter.max_call_depth
    assert "Maximum call depth of 200 exceeded" in str(exc.value)


def test_recursion_limit_is_restored_after_execute():
    limit = sys.getrecursionlimit()
    run_source("function f(n) { if (n == 0) { return 0; } return f(n - 1); } f(50);")
    assert sys.getrecursionlimit() == limit
