"""Statement parsing utilities for the Baby language.

These functions operate on a `babylang.parser.parser.Parser` instance and
handle the statement forms of the language: ``let`` bindings, bare
assignments, ``return``, blocks and expression statements.

A statement that fails to parse records its error and resynchronises by
skipping ahead to the next ``;`` so that one malformed statement does not
take the rest of the program down with it.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from babylang.nodes import Node
from babylang.operations import ASSIGN_OPS

if TYPE_CHECKING:
    from babylang.parser import Parser


def _synchronize(parser: 'Parser') -> None:
    """
    Skip tokens up to the next ``;`` (or the end of input).
    """
    while not parser.curr_is('SEMICOLON') and not parser.curr_is('EOF'):
        parser.advance()


def _end_statement(parser: 'Parser') -> bool:
    """
    Consume the ``;`` that closes a statement.

    The semicolon may be left out before a closing brace or the end of
    input. Anything else is an error, after which the parser resynchronises.

    Returns:
        bool: ``True`` if the statement ended cleanly.
    """
    if parser.peek_is('SEMICOLON'):
        parser.advance()
        return True
    if parser.peek_is('RBRACE') or parser.peek_is('EOF'):
        return True
    parser.peek_error('SEMICOLON')
    _synchronize(parser)
    return False


def parse_statement(parser: 'Parser') -> tuple | None:
    """
    Parse a single statement.

    Syntax:
        <let> | <assignment> | <return> | <expression> [';']

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: The statement node, or ``None`` if it failed to parse.
    """
    tok = parser.curr_token
    if tok.type == 'LET':
        return parse_let(parser)
    if tok.type == 'RETURN':
        return parse_return(parser)
    if tok.type == 'IDENT' and parser.peek_token.type in ASSIGN_OPS:
        return parse_assignment(parser)
    return parse_expression_statement(parser)


def _parse_binding(parser: 'Parser', tag: Node, line: int) -> tuple | None:
    """
    Parse ``<identifier> <assign-op> <expression> ;`` with the current
    token on the identifier.
    """
    name = parser.curr_token.value
    if parser.peek_token.type not in ASSIGN_OPS:
        parser.peek_error('ASSIGN')
        _synchronize(parser)
        return None
    parser.advance()
    op = ASSIGN_OPS[parser.curr_token.type]

    parser.advance()
    value = parser.expression()
    if value is None:
        _synchronize(parser)
        return None
    if not _end_statement(parser):
        return None
    return (tag, name, op, value, line)


def parse_let(parser: 'Parser') -> tuple | None:
    """
    Parse a ``let`` binding.

    Syntax:
        let <identifier> ('=' | '=&' | '=*') <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: ``('let', name, op, value, line)``
    """
    tok = parser.curr_token
    if not parser.expect_peek('IDENT'):
        _synchronize(parser)
        return None
    return _parse_binding(parser, Node.LET, tok.line)


def parse_assignment(parser: 'Parser') -> tuple | None:
    """
    Parse an assignment to a name without the ``let`` keyword.

    Syntax:
        <identifier> ('=' | '=&' | '=*') <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: ``('assign', name, op, value, line)``
    """
    return _parse_binding(parser, Node.ASSIGN, parser.curr_token.line)


def parse_return(parser: 'Parser') -> tuple | None:
    """
    Parse a ``return`` statement. A bare ``return;`` returns null.

    Syntax:
        return [<expression>] ;

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: ``('return', expr, line)``
    """
    tok = parser.curr_token
    if parser.peek_is('SEMICOLON'):
        parser.advance()
        return (Node.RETURN, (Node.NULL, tok.line), tok.line)

    parser.advance()
    value = parser.expression()
    if value is None:
        _synchronize(parser)
        return None
    if not _end_statement(parser):
        return None
    return (Node.RETURN, value, tok.line)


def parse_expression_statement(parser: 'Parser') -> tuple | None:
    """
    Parse an expression used as a statement.

    Syntax:
        <expression> [';']

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: ``('expr_stmt', expr, line)``
    """
    tok = parser.curr_token
    expr_node = parser.expression()
    if parser.peek_is('SEMICOLON'):
        parser.advance()
    if expr_node is None:
        return None
    return (Node.EXPR_STMT, expr_node, tok.line)


def parse_block(parser: 'Parser') -> tuple:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance, positioned on the opening brace.

    Returns:
        tuple: ('block', statements, line)
    """
    tok = parser.curr_token
    statements = []
    parser.advance()
    while not parser.curr_is('RBRACE') and not parser.curr_is('EOF'):
        stmt = parser.statement()
        if stmt is not None:
            statements.append(stmt)
        parser.advance()
    if parser.curr_is('EOF'):
        parser.error(
            f"Expected token '}}' to close block opened on line {tok.line} but got end of input",
            parser.curr_token.line,
        )
    return (Node.BLOCK, tuple(statements), tok.line)
