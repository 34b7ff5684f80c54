"""
Main parser entry point for EasyScript.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`easyscript.parser.expressions` and `easyscript.parser.statements`.

The parser never mutates the token list it is given, so parsing the same
tokens twice produces equal trees.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from easyscript.exceptions import ParseError
from easyscript.lexer import TOKEN_LITERALS, Token

from . import expressions as _expr
from . import statements as _stmt


_TOKEN_DESCRIPTIONS = {
    'ID': 'identifier',
    'NUMBER': 'number',
    'STRING': 'string',
    'EOF': 'end of input',
}


def describe_type(token_type: str) -> str:
    """
    Return a readable name for a token type, e.g. ``';'`` for ``SEMI``.
    """
    if token_type in TOKEN_LITERALS:
        return f"'{TOKEN_LITERALS[token_type]}'"
    return _TOKEN_DESCRIPTIONS.get(token_type, token_type)


def describe_token(tok: Token) -> str:
    """
    Return a readable description of an actual token for error messages.
    """
    if tok.type == 'EOF':
        return 'end of input'
    if tok.type == 'ID':
        return f"identifier '{tok.value}'"
    if tok.type == 'STRING':
        return f'string "{tok.value}"'
    if tok.type == 'NUMBER':
        return f"number {tok.value}"
    return f"'{tok.value}'"


class Parser:
    """EasyScript parser."""

    def __init__(self, tokens: list, file: str = '<script>'):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances, normally ending in EOF.
            file (str): The name of the script.
        """
        tokens = list(tokens)
        if not tokens or tokens[-1].type != 'EOF':
            last = tokens[-1] if tokens else None
            line = last.line if last else 1
            column = last.column + len(str(last.value)) if last else 1
            tokens.append(Token('EOF', None, line, column))
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

        # Static context for return/break/continue checks.
        self.function_depth = 0
        self.loop_depth = 0

    def error(self, expected: str, tok: Token | None = None) -> ParseError:
        """
        Build a ParseError for the given (or current) token.
        """
        tok = tok or self.curr_token
        return ParseError(expected, describe_token(tok), tok.line, tok.column, self.source_file)

    def peek(self, offset: int = 1) -> Token:
        """
        Look ahead without consuming; EOF is returned past the end.
        """
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            raise self.error(describe_type(token_type))
        if self.position < len(self.tokens) - 1:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok


    # Expression wrappers
    def expr(self) -> tuple:
        """
        Parse a full expression starting from the lowest precedence level.
        """
        return _expr.parse_expr(self)


    # Statement wrappers
    def block(self) -> tuple:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)


    def parse(self) -> tuple:
        """
        Parse the full input into a program node.

        Raises:
            ParseError: On a syntax error, or when nesting exhausts the Python stack.
        """
        statements = []
        try:
            while self.curr_token.type != 'EOF':
                statements.append(self.statement())
        except RecursionError:
            raise self.error('less deeply nested code') from None
        return ('program', tuple(statements), 1)
