"""Statement parsing utilities for EasyScript.

These functions operate on a `easyscript.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
declarations, conditionals, loops, and function definitions.

The parser also tracks whether it is inside a function body or a loop body,
so a misplaced ``return``, ``break`` or ``continue`` is reported as a syntax
error rather than surfacing at runtime.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from easyscript.parser import Parser


# Keywords the lexer reserves but the language gives no meaning to.
RESERVED_KEYWORDS = frozenset({
    'SWITCH', 'CASE', 'DEFAULT', 'CLASS', 'EXTENDS', 'IMPLEMENTS', 'TRY',
    'CATCH', 'FINALLY', 'THROW', 'NEW', 'THIS', 'SUPER', 'IN', 'INSTANCEOF',
})


def parse_block(parser: 'Parser') -> tuple:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('block', statements, line_number)
    """
    tok = parser.eat('LBRACE')
    statements = []
    while parser.curr_token.type not in ('RBRACE', 'EOF'):
        statements.append(parser.statement())
    parser.eat('RBRACE')
    return ('block', tuple(statements), tok.line)


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type == 'VAR':
        return parse_declaration(parser)
    elif tok.type == 'IF':
        return parse_if(parser)
    elif tok.type == 'FOR':
        return parse_for(parser)
    elif tok.type == 'WHILE':
        return parse_while(parser)
    elif tok.type == 'FUNCTION':
        return parse_func_def(parser)
    elif tok.type == 'RETURN':
        return parse_return(parser)
    elif tok.type in ('BREAK', 'CONTINUE'):
        return parse_loop_control(parser)
    elif tok.type == 'LBRACE':
        return parser.block()
    elif tok.type == 'ID' and parser.peek().type == 'ASSIGN':
        return parse_assignment(parser)
    elif tok.type in RESERVED_KEYWORDS or tok.type == 'ELSE':
        raise parser.error('statement')

    expr_node = parser.expr()
    parser.eat('SEMI')
    return ('expr_stmt', expr_node, tok.line)


def parse_declaration(parser: 'Parser') -> tuple:
    """
    Parse a `var` declaration with an optional initialiser.

    Syntax:
        var <identifier> ;
        var <identifier> = <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('var', name, expr_or_None, line)
    """
    parser.eat('VAR')
    id_tok = parser.eat('ID')
    init = None
    if parser.curr_token.type == 'ASSIGN':
        parser.eat('ASSIGN')
        init = parser.expr()
    parser.eat('SEMI')
    return ('var', id_tok.value, init, id_tok.line)


def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse assignment to an existing variable.

    Syntax:
        <identifier> = <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('assign', name, expr, line)
    """
    id_tok = parser.eat('ID')
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    parser.eat('SEMI')
    return ('assign', id_tok.value, expr_node, id_tok.line)


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional 'if' statement with an optional else branch.

    Syntax:
        if ( <condition> ) { <block> }
        if ( <condition> ) { <block> } else { <block> }
        if ( <condition> ) { <block> } else if ...

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('if', condition, then_block, else_node_or_None, line)
    """
    tok = parser.eat('IF')
    parser.eat('LPAREN')
    condition = parser.expr()
    parser.eat('RPAREN')
    then_block = parser.block()

    else_node = None
    if parser.curr_token.type == 'ELSE':
        parser.eat('ELSE')
        if parser.curr_token.type == 'IF':
            else_node = parse_if(parser)
        else:
            else_node = parser.block()

    return ('if', condition, then_block, else_node, tok.line)


def _parse_loop_body(parser: 'Parser') -> tuple:
    parser.loop_depth += 1
    try:
        return parser.block()
    finally:
        parser.loop_depth -= 1


def parse_for(parser: 'Parser') -> tuple:
    """
    Parse a counted 'for' loop. ``to`` is contextual, not a keyword.

    Syntax:
        for <identifier> = <expression> to <expression> { <block> }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('for', name, start, end, body, line)
    """
    tok = parser.eat('FOR')
    id_tok = parser.eat('ID')
    parser.eat('ASSIGN')
    start = parser.expr()
    if parser.curr_token.type != 'ID' or parser.curr_token.value != 'to':
        raise parser.error("'to'")
    parser.eat('ID')
    end = parser.expr()
    body = _parse_loop_body(parser)
    return ('for', id_tok.value, start, end, body, tok.line)


def parse_while(parser: 'Parser') -> tuple:
    """
    Parse a 'while' loop.

    Syntax:
        while ( <condition> ) { <block> }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('while', condition, body, line)
    """
    tok = parser.eat('WHILE')
    parser.eat('LPAREN')
    condition = parser.expr()
    parser.eat('RPAREN')
    body = _parse_loop_body(parser)
    return ('while', condition, body, tok.line)


def parse_loop_control(parser: 'Parser') -> tuple:
    """
    Parse a 'break' or 'continue' statement.

    Syntax:
        break ;
        continue ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('break', line) or ('continue', line)
    """
    tok = parser.curr_token
    if parser.loop_depth == 0:
        raise parser.error('statement (not inside a loop)')
    parser.eat(tok.type)
    parser.eat('SEMI')
    return (tok.type.lower(), tok.line)


def parse_func_def(parser: 'Parser') -> tuple:
    """
    Parse a function definition.

    Syntax:
        function <name>(<params>) { <block> }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('func_def', name, params, body, line)
    """
    start_tok = parser.eat('FUNCTION')
    func_name = parser.eat('ID').value
    parser.eat('LPAREN')
    params = []
    if parser.curr_token.type != 'RPAREN':
        while True:
            param_tok = parser.curr_token
            parser.eat('ID')
            if param_tok.value in params:
                raise parser.error('unique parameter name', param_tok)
            params.append(param_tok.value)
            if parser.curr_token.type != 'COMMA':
                break
            parser.eat('COMMA')
    parser.eat('RPAREN')

    # A function body starts a fresh loop context.
    saved_loop_depth = parser.loop_depth
    parser.loop_depth = 0
    parser.function_depth += 1
    try:
        body = parser.block()
    finally:
        parser.function_depth -= 1
        parser.loop_depth = saved_loop_depth

    return ('func_def', func_name, tuple(params), body, start_tok.line)


def parse_return(parser: 'Parser') -> tuple:
    """
    Parse a 'return' statement.

    Syntax:
        return ;
        return <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('return', expr_or_None, line)
    """
    tok = parser.curr_token
    if parser.function_depth == 0:
        raise parser.error('statement (not inside a function)')
    parser.eat('RETURN')
    expr_node = None
    if parser.curr_token.type != 'SEMI':
        expr_node = parser.expr()
    parser.eat('SEMI')
    return ('return', expr_node, tok.line)
