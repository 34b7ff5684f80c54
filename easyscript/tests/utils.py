"""
Utility functions shared across EasyScript tests.
"""
from easyscript.lexer import tokenize
from easyscript.parser import Parser
from easyscript.interpreter import Interpreter


def parse_source(source: str) -> tuple:
    """
    Parse source code and return the program node.
    """
    return Parser(tokenize(source, "<test>"), "<test>").parse()


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.execute(parse_source(source))
    return interpreter


def output_lines(capsys) -> list[str]:
    """
    Captured standard output split into lines.
    """
    return capsys.readouterr().out.strip().splitlines()
