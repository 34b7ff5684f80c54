"""Lexer for EasyScript.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, value and source position, so the token list is always
in source order.

Identifiers are matched first and then classified against the keyword table,
which keeps keywords from being matched a second time as identifiers.
Numbers are decimal with an optional fractional part and are always read
as floats; strings are double-quoted with no escape processing. ``//``
line comments and ``/* ... */`` block comments are skipped while keeping
line numbers accurate.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
from dataclasses import dataclass
from typing import Any

from easyscript.exceptions import LexError


KEYWORDS: dict[str, str] = {
    word: word.upper()
    for word in (
        'if', 'else', 'for', 'while', 'switch', 'case', 'default', 'break',
        'continue', 'return', 'function', 'class', 'extends', 'implements',
        'try', 'catch', 'finally', 'throw', 'new', 'this', 'super', 'in',
        'instanceof', 'var',
    )
}

# Two-character operators must precede their one-character prefixes.
OPERATORS: dict[str, str] = {
    '==': 'EQ',
    '!=': 'NE',
    '<=': 'LE',
    '>=': 'GE',
    '&&': 'AND',
    '||': 'OR',
    '+': 'PLUS',
    '-': 'MINUS',
    '*': 'MUL',
    '/': 'DIV',
    '%': 'MOD',
    '<': 'LT',
    '>': 'GT',
    '=': 'ASSIGN',
    '!': 'NOT',
    '(': 'LPAREN',
    ')': 'RPAREN',
    '{': 'LBRACE',
    '}': 'RBRACE',
    '[': 'LBRACKET',
    ']': 'RBRACKET',
    ',': 'COMMA',
    ';': 'SEMI',
}

# Token type -> source literal, used for readable parser errors.
TOKEN_LITERALS: dict[str, str] = {
    **{type_: literal for literal, type_ in OPERATORS.items()},
    **{type_: word for word, type_ in KEYWORDS.items()},
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, value and 1-based position.
    """
    type: str
    value: Any
    line: int
    column: int = 1

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line}, column={self.column})"


_token_specification: list[tuple[str, str]] = [
    # Comments
    ('LINE_COMMENT',   r'//[^\n]*'),
    ('BLOCK_COMMENT',  r'/\*(?s:.*?)\*/'),
    ('OPEN_COMMENT',   r'/\*'),

    # Literals
    ('NUMBER',         r'\d+(?:\.\d+)?'),
    ('STRING',         r'"[^"]*"'),
    ('OPEN_STRING',    r'"'),

    # Identifiers and keywords
    ('ID',             r'[A-Za-z_][A-Za-z0-9_]*'),

    # Operators and delimiters
    ('OP',             '|'.join(re.escape(op) for op in OPERATORS)),

    # Miscellaneous
    ('NEWLINE',        r'\n'),
    ('SKIP',           r'[ \t\r\f\v]+'),
    ('MISMATCH',       r'.'),
]

_tok_regex = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in _token_specification)
)


def tokenize(code: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): Optional script name used in error messages.

    Returns:
        list[Token]: Tokens in source order, terminated by a single EOF token.

    Raises:
        LexError: On an unexpected character, an unterminated string or an
            unterminated block comment.
    """
    tokens: list[Token] = []
    line_num = 1
    line_start = 0

    for match_obj in _tok_regex.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        start = match_obj.start()
        column = start - line_start + 1

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind in ('SKIP', 'LINE_COMMENT'):
            continue
        if kind == 'MISMATCH':
            raise LexError(value, line_num, column, file)
        if kind == 'OPEN_STRING':
            raise LexError(value, line_num, column, file, reason="Unterminated string literal")
        if kind == 'OPEN_COMMENT':
            raise LexError(value, line_num, column, file, reason="Unterminated block comment")

        if kind == 'NUMBER':
            number = float(value)
            tokens.append(Token('NUMBER', number, line_num, column))
        elif kind == 'STRING':
            tokens.append(Token('STRING', value[1:-1], line_num, column))
        elif kind == 'ID':
            tokens.append(Token(KEYWORDS.get(value, 'ID'), value, line_num, column))
        elif kind == 'OP':
            tokens.append(Token(OPERATORS[value], value, line_num, column))

        # Strings and block comments may span lines.
        newlines = value.count('\n')
        if newlines:
            line_num += newlines
            line_start = start + value.rfind('\n') + 1

    tokens.append(Token('EOF', None, line_num, len(code) - line_start + 1))
    return tokens
