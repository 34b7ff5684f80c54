"""
Tests for scoping rules and closures in EasyScript
"""
import pytest

from easyscript.exceptions import UndefinedVariableError

from easyscript.tests.utils import output_lines, run_source


def test_functions_have_fresh_env(capsys):
    """
    Test that functions have a fresh environment and do not leak variables.
    """
    source = (
        "function inner() {\n"
        "    var x = 1;\n"
        "    return x;\n"
        "}\n"
        "function outer() {\n"
        "    var x = 2;\n"
        "    return inner();\n"
        "}\n"
        "print(outer());\n"
    )
    run_source(source)
    assert output_lines(capsys) == ['1']


def test_globals_visible(capsys):
    """
    Test that global variables are visible inside functions.
    """
    run_source("var g = 5; function read_g() { return g; } print(read_g());")
    assert output_lines(capsys) == ['5']


def test_functions_modify_globals(capsys):
    """
    Test that functions can modify global variables.
    """
    run_source("var x = 1; function f() { x = 2; } f(); print(x);")
    assert output_lines(capsys) == ['2']


def test_closure_reads_live_binding(capsys):
    run_source("var x; x = 10; function f() { return x; } x = 20; print(f());")
    assert output_lines(capsys) == ['20']


def test_callee_does_not_see_caller_locals():
    """
    Call frames chain to the defining environment, not the caller's.
    """
    source = (
        "function peek() { return secret; }\n"
        "function caller() { var secret = 42; return peek(); }\n"
        "caller();\n"
    )
    with pytest.raises(UndefinedVariableError):
        run_source(source)


def test_nested_function_captures_enclosing_frame(capsys):
    source = (
        "function make_counter() {\n"
        "    var count = 0;\n"
        "    function next() { count = count + 1; return count; }\n"
        "    return next;\n"
        "}\n"
        "var a = make_counter();\n"
        "var b = make_counter();\n"
        "a(); a();\n"
        "print(a(), b());\n"
    )
    run_source(source)
    assert output_lines(capsys) == ['3 1']


def test_parameters_shadow_globals(capsys):
    run_source("var n = 1; function f(n) { n = n + 10; return n; } print(f(5), n);")
    assert output_lines(capsys) == ['15 1']


def test_function_locals_do_not_leak():
    with pytest.raises(UndefinedVariableError):
        run_source("function f() { var local = 1; } f(); print(local);")


def test_block_declarations_do_not_leak(capsys):
    with pytest.raises(UndefinedVariableError):
        run_source("{ var tmp = 1; } print(tmp);")


def test_closure_over_loop_frame(capsys):
    source = (
        "var last;\n"
        "for i = 1 to 3 {\n"
        "    function get() { return i; }\n"
        "    last = get;\n"
        "}\n"
        "print(last());\n"
    )
    run_source(source)
    assert output_lines(capsys) == ['3']
