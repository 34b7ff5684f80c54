"""
Expression parsing utilities for EasyScript.

These functions operate on a `easyscript.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. Each binary precedence
level parses the next-higher level and then loops over its own operators,
which makes every level left-associative.

Precedence, lowest first:
    ||   &&   == !=   < <= > >=   + -   * / %   unary - !   primary


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import TYPE_CHECKING, Callable

from easyscript.operations import Op

if TYPE_CHECKING:
    from easyscript.parser import Parser


def _parse_binary(parser: 'Parser', operand: Callable[['Parser'], tuple], op_map: dict) -> tuple:
    """Left-associative loop shared by every binary precedence level."""
    result = operand(parser)
    while parser.curr_token.type in op_map:
        op_tok = parser.eat(parser.curr_token.type)
        result = (op_map[op_tok.type], result, operand(parser), op_tok.line)
    return result


def _parse_arguments(parser: 'Parser', closing: str) -> tuple:
    """Parse a comma-separated expression list up to ``closing``."""
    items = []
    if parser.curr_token.type != closing:
        items.append(parser.expr())
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            items.append(parser.expr())
    parser.eat(closing)
    return tuple(items)


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> tuple:
    """Parse a literal, variable, call, list literal or parenthesized expression."""
    tok = parser.curr_token

    if tok.type == 'NUMBER':
        parser.eat('NUMBER')
        return ('number', tok.value, tok.line)

    if tok.type == 'STRING':
        parser.eat('STRING')
        return ('string', tok.value, tok.line)

    if tok.type == 'LBRACKET':
        parser.eat('LBRACKET')
        elements = _parse_arguments(parser, 'RBRACKET')
        return ('list', elements, tok.line)

    if tok.type == 'ID':
        parser.eat('ID')
        if parser.curr_token.type == 'LPAREN':
            parser.eat('LPAREN')
            args = _parse_arguments(parser, 'RPAREN')
            return ('func_call', tok.value, args, tok.line)
        return ('ident', tok.value, tok.line)

    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        node = parse_expr(parser)
        parser.eat('RPAREN')
        return node

    raise parser.error('expression')


def parse_unary(parser: 'Parser') -> tuple:
    """Parse prefix negation and logical not; both are right-associative."""
    tok = parser.curr_token
    if tok.type == 'MINUS':
        parser.eat('MINUS')
        return ('unary', Op.NEG, parse_unary(parser), tok.line)
    if tok.type == 'NOT':
        parser.eat('NOT')
        return ('unary', Op.NOT, parse_unary(parser), tok.line)
    return parse_primary(parser)


def parse_multiplicative(parser: 'Parser') -> tuple:
    """Parse multiplication, division, and modulus expressions."""
    op_map = {
        'MUL': Op.MUL,
        'DIV': Op.DIV,
        'MOD': Op.MOD,
    }
    return _parse_binary(parser, parse_unary, op_map)


def parse_additive(parser: 'Parser') -> tuple:
    """Parse addition and subtraction expressions."""
    op_map = {
        'PLUS': Op.ADD,
        'MINUS': Op.SUB,
    }
    return _parse_binary(parser, parse_multiplicative, op_map)


def parse_relational(parser: 'Parser') -> tuple:
    """Parse relational expressions (<, <=, >, >=)."""
    op_map = {
        'LT': Op.LT,
        'LE': Op.LE,
        'GT': Op.GT,
        'GE': Op.GE,
    }
    return _parse_binary(parser, parse_additive, op_map)


def parse_equality(parser: 'Parser') -> tuple:
    """Parse equality expressions (==, !=)."""
    op_map = {
        'EQ': Op.EQ,
        'NE': Op.NE,
    }
    return _parse_binary(parser, parse_relational, op_map)


def parse_logical_and(parser: 'Parser') -> tuple:
    """Parse logical AND expressions using '&&'."""
    return _parse_binary(parser, parse_equality, {'AND': Op.AND})


def parse_logical_or(parser: 'Parser') -> tuple:
    """Parse logical OR expressions using '||'."""
    return _parse_binary(parser, parse_logical_and, {'OR': Op.OR})


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> tuple:
    """Parse an expression starting from the lowest-precedence operator."""
    return parse_logical_or(parser)
