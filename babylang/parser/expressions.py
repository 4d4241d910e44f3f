"""
Expression parsing utilities for the Baby language.

These functions operate on a `babylang.parser.parser.Parser` instance and
implement the Pratt (top-down operator precedence) loop together with every
prefix and infix handler. A handler is entered with the parser's current
token on the first token of its construct and leaves the current token on
the construct's last token.

Handlers return ``None`` when they cannot build a node; by then the problem
has been recorded on the parser.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import IntEnum
from typing import TYPE_CHECKING

from babylang.nodes import Node
from babylang.operations import BINARY_OPS, UNARY_OPS

if TYPE_CHECKING:
    from babylang.parser import Parser

INT64_MAX = 2 ** 63 - 1


class Precedence(IntEnum):
    """
    Binding power of each operator class, lowest first.
    """
    LOWEST = 1
    LOGICAL = 2      # & |
    EQUALS = 3       # =&= !&= =*= !*= == !=
    LESSGREATER = 4  # < > <= >=
    SUM = 5          # + -
    PRODUCT = 6      # * /
    PREFIX = 7       # -x !x
    CALL = 8         # f(x)
    INDEX = 9        # a[i]
    DOT = 10         # h.k


PRECEDENCES: dict[str, Precedence] = {
    'AND': Precedence.LOGICAL,
    'OR': Precedence.LOGICAL,
    'IDENTICAL': Precedence.EQUALS,
    'NOT_IDENTICAL': Precedence.EQUALS,
    'EQUAL': Precedence.EQUALS,
    'NOT_EQUAL': Precedence.EQUALS,
    'EQ': Precedence.EQUALS,
    'NE': Precedence.EQUALS,
    'LT': Precedence.LESSGREATER,
    'GT': Precedence.LESSGREATER,
    'LE': Precedence.LESSGREATER,
    'GE': Precedence.LESSGREATER,
    'PLUS': Precedence.SUM,
    'MINUS': Precedence.SUM,
    'ASTERISK': Precedence.PRODUCT,
    'SLASH': Precedence.PRODUCT,
    'LPAREN': Precedence.CALL,
    'LBRACKET': Precedence.INDEX,
    'DOT': Precedence.DOT,
}


# ---- Pratt loop ----

def parse_expression(parser: 'Parser', precedence: Precedence) -> tuple | None:
    """
    Parse an expression whose operators bind tighter than ``precedence``.

    The prefix handler for the current token builds the left operand. While
    the lookahead token binds tighter than ``precedence`` and has an infix
    handler, the parser advances onto it and the handler folds the operand
    into a larger expression.

    Args:
        parser: The parser instance.
        precedence: The binding power of the operator to the left.

    Returns:
        tuple | None: The expression node.
    """
    tok = parser.curr_token
    prefix = parser.prefix_handlers.get(tok.type)
    if prefix is None:
        parser.no_prefix_error(tok)
        return None
    left = prefix(parser)

    while (
        left is not None
        and not parser.peek_is('SEMICOLON')
        and precedence < parser.peek_precedence()
    ):
        infix = parser.infix_handlers.get(parser.peek_token.type)
        if infix is None:
            return left
        parser.advance()
        left = infix(parser, left)

    return left


def parse_expression_list(parser: 'Parser', end: str) -> list | None:
    """
    Parse comma-separated expressions up to the closing ``end`` token.

    Syntax:
        <expression> (',' <expression>)* <end>

    Args:
        parser: The parser instance, positioned on the opening delimiter.
        end: The token type of the closing delimiter.

    Returns:
        list | None: The element nodes, or ``None`` if any failed to parse.
    """
    items: list = []
    if parser.peek_is(end):
        parser.advance()
        return items

    parser.advance()
    items.append(parser.expression())
    while parser.peek_is('COMMA'):
        parser.advance()
        parser.advance()
        items.append(parser.expression())

    if not parser.expect_peek(end):
        return None
    if any(item is None for item in items):
        return None
    return items


# ---- Prefix handlers ----

def parse_identifier(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    return (Node.IDENT, tok.value, tok.line)


def parse_integer(parser: 'Parser') -> tuple | None:
    """Parse an integer literal, rejecting values outside signed 64 bits."""
    tok = parser.curr_token
    value = int(tok.value)
    if value > INT64_MAX:
        parser.error(f"Could not parse '{tok.value}' as integer", tok.line)
        return None
    return (Node.NUMBER, value, tok.line)


def parse_string(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    return (Node.STRING, tok.value, tok.line)


def parse_boolean(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    return (Node.BOOL, tok.type == 'TRUE', tok.line)


def parse_null(parser: 'Parser') -> tuple:
    return (Node.NULL, parser.curr_token.line)


def parse_group(parser: 'Parser') -> tuple | None:
    """
    Parse a parenthesized expression.

    Syntax:
        '(' <expression> ')'
    """
    parser.advance()
    node = parser.expression()
    if not parser.expect_peek('RPAREN'):
        return None
    return node


def parse_unary(parser: 'Parser') -> tuple | None:
    """
    Parse a prefix operator applied to its operand.

    Syntax:
        ('!' | '-') <expression>
    """
    tok = parser.curr_token
    parser.advance()
    operand = parser.expression(Precedence.PREFIX)
    if operand is None:
        return None
    return (Node.UNARY, UNARY_OPS[tok.type], operand, tok.line)


def parse_array(parser: 'Parser') -> tuple | None:
    """
    Parse an array literal.

    Syntax:
        '[' [<expression> (',' <expression>)*] ']'
    """
    tok = parser.curr_token
    elements = parse_expression_list(parser, 'RBRACKET')
    if elements is None:
        return None
    return (Node.LIST, tuple(elements), tok.line)


def parse_hash(parser: 'Parser') -> tuple | None:
    """
    Parse a hash literal. Keys are arbitrary expressions.

    Syntax:
        '{' [<expression> ':' <expression> (',' <expression> ':' <expression>)*] '}'
    """
    tok = parser.curr_token
    pairs = []
    while not parser.peek_is('RBRACE'):
        parser.advance()
        key = parser.expression()
        if not parser.expect_peek('COLON'):
            return None
        parser.advance()
        value = parser.expression()
        if key is None or value is None:
            return None
        pairs.append((key, value))
        if not parser.peek_is('RBRACE') and not parser.expect_peek('COMMA'):
            return None
    parser.advance()
    return (Node.DICT, tuple(pairs), tok.line)


def parse_if(parser: 'Parser') -> tuple | None:
    """
    Parse a conditional expression with an optional else block.

    Syntax:
        if '(' <condition> ')' '{' <block> '}' [else '{' <block> '}']
    """
    tok = parser.curr_token
    if not parser.expect_peek('LPAREN'):
        return None
    parser.advance()
    condition = parser.expression()
    if condition is None or not parser.expect_peek('RPAREN'):
        return None
    if not parser.expect_peek('LBRACE'):
        return None
    consequence = parser.block()

    alternative = None
    if parser.peek_is('ELSE'):
        parser.advance()
        if not parser.expect_peek('LBRACE'):
            return None
        alternative = parser.block()

    return (Node.IF, condition, consequence, alternative, tok.line)


def parse_while(parser: 'Parser') -> tuple | None:
    """
    Parse a while loop.

    Syntax:
        while '(' <condition> ')' '{' <block> '}'
    """
    tok = parser.curr_token
    if not parser.expect_peek('LPAREN'):
        return None
    parser.advance()
    condition = parser.expression()
    if condition is None or not parser.expect_peek('RPAREN'):
        return None
    if not parser.expect_peek('LBRACE'):
        return None
    body = parser.block()
    return (Node.WHILE, condition, body, tok.line)


def parse_parameters(parser: 'Parser') -> list[str] | None:
    """
    Parse a function's parameter names.

    Syntax:
        '(' [<identifier> (',' <identifier>)*] ')'
    """
    params: list[str] = []
    if parser.peek_is('RPAREN'):
        parser.advance()
        return params

    while True:
        if not parser.expect_peek('IDENT'):
            return None
        tok = parser.curr_token
        if tok.value in params:
            parser.error(f"Duplicate parameter '{tok.value}'", tok.line)
            return None
        params.append(tok.value)
        if not parser.peek_is('COMMA'):
            break
        parser.advance()

    if not parser.expect_peek('RPAREN'):
        return None
    return params


def parse_function(parser: 'Parser') -> tuple | None:
    """
    Parse a function literal.

    Syntax:
        fun '(' <params> ')' '{' <block> '}'
    """
    tok = parser.curr_token
    if not parser.expect_peek('LPAREN'):
        return None
    params = parse_parameters(parser)
    if params is None:
        return None
    if not parser.expect_peek('LBRACE'):
        return None
    body = parser.block()
    return (Node.FUNC, tuple(params), body, tok.line)


# ---- Infix handlers ----

def parse_binary(parser: 'Parser', left: tuple) -> tuple | None:
    """
    Parse the right operand of a binary operator. Operators of equal
    precedence associate to the left.
    """
    tok = parser.curr_token
    precedence = parser.curr_precedence()
    parser.advance()
    right = parser.expression(precedence)
    if right is None:
        return None
    return (BINARY_OPS[tok.type], left, right, tok.line)


def parse_call(parser: 'Parser', callee: tuple) -> tuple | None:
    """
    Parse a call's argument list.

    Syntax:
        <callee> '(' [<expression> (',' <expression>)*] ')'
    """
    tok = parser.curr_token
    args = parse_expression_list(parser, 'RPAREN')
    if args is None:
        return None
    return (Node.CALL, callee, tuple(args), tok.line)


def parse_index(parser: 'Parser', target: tuple) -> tuple | None:
    """
    Parse a subscript.

    Syntax:
        <target> '[' <expression> ']'
    """
    tok = parser.curr_token
    parser.advance()
    index = parser.expression()
    if index is None or not parser.expect_peek('RBRACKET'):
        return None
    return (Node.INDEX, target, index, tok.line)


def parse_dot(parser: 'Parser', target: tuple) -> tuple | None:
    """
    Parse attribute access. The attribute is itself an expression and is
    evaluated at runtime to produce the hash key.

    Syntax:
        <target> '.' <expression>
    """
    tok = parser.curr_token
    parser.advance()
    attribute = parser.expression(Precedence.DOT)
    if attribute is None:
        return None
    return (Node.DOT, target, attribute, tok.line)


PREFIX_HANDLERS = {
    'IDENT': parse_identifier,
    'INT': parse_integer,
    'STRING': parse_string,
    'TRUE': parse_boolean,
    'FALSE': parse_boolean,
    'NULL': parse_null,
    'LPAREN': parse_group,
    'LBRACKET': parse_array,
    'LBRACE': parse_hash,
    'BANG': parse_unary,
    'MINUS': parse_unary,
    'IF': parse_if,
    'WHILE': parse_while,
    'FUNCTION': parse_function,
}

INFIX_HANDLERS = {
    **{token_type: parse_binary for token_type in BINARY_OPS},
    'LPAREN': parse_call,
    'LBRACKET': parse_index,
    'DOT': parse_dot,
}
