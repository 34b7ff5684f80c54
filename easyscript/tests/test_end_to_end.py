"""
End-to-end tests through the public embedding API
"""
import pytest

import easyscript
from easyscript import (
    ArityMismatchError,
    UndefinedVariableError,
    execute,
    parse,
    run,
    tokenize,
)

from easyscript.tests.utils import output_lines


def test_declare_assign_print(capsys):
    """
    Source text -> tokens -> three-statement program -> prints 5.
    """
    tokens = tokenize("var x; x = 5; print(x);")
    assert len(tokens) == 13  # 12 lexical tokens plus EOF
    ast = parse(tokens)
    assert len(ast[1]) == 3
    execute(ast)
    assert capsys.readouterr().out == "5\n"


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("2 + 3 * 4", "14"),
        ("(2 + 3) * 4", "20"),
        ("10 - 4 - 3", "3"),
        ("2 * 3 + 4 * 5", "26"),
        ("-2 * 3", "-6"),
        ("7 % 4 + 1", "4"),
        ("1 + 2 == 3", "true"),
        ("1 < 2 && 2 < 1 || 3 == 3", "true"),
    ],
)
def test_precedence(capsys, expression, expected):
    run(f"print({expression});")
    assert output_lines(capsys) == [expected]


def test_closure_sees_live_binding(capsys):
    run("var x; x = 10; function f() { return x; } x = 20; print(f());")
    assert output_lines(capsys) == ['20']


def test_for_loop_bindings_do_not_leak():
    with pytest.raises(UndefinedVariableError):
        run("for i = 1 to 3 { var x; x = i; } print(x);")


def test_two_parameter_function_with_one_argument():
    with pytest.raises(ArityMismatchError):
        run("function f(a, b) { return a; } f(1);")


def test_builtins(capsys):
    run('print(len("hello")); print(len([1,2,3])); print(type(5)); print(type("a"));')
    assert output_lines(capsys) == ['5', '3', 'number', 'string']


def test_descending_bounds_run_zero_times(capsys):
    run("for i = 5 to 3 { print(i); }")
    assert capsys.readouterr().out == ""


def test_each_execute_gets_fresh_globals():
    ast = parse(tokenize("var x; x = 1;"))
    execute(ast)
    with pytest.raises(UndefinedVariableError):
        execute(parse(tokenize("print(x);")))


def test_run_returns_interpreter_with_globals():
    interpreter = run("var total = 0; for i = 1 to 4 { total = total + i; }")
    assert interpreter.vars['total'] == 10
    assert 'i' not in interpreter.vars


def test_package_exports_version():
    assert easyscript.__version__
