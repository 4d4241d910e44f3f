"""AST node definitions for the Baby language.

Nodes are plain tuples: the first element is the node tag (a :class:`Node`
member, or an :class:`~babylang.operations.Op` for binary expressions) and
the last element is the source line the node starts on. Tuples are never
mutated after the parser builds them.

    ('program', statements, line)
    ('let', name, op, value, line)        ('assign', name, op, value, line)
    ('return', expr, line)                ('expr_stmt', expr, line)
    ('block', statements, line)
    ('ident', name, line)                 ('number', value, line)
    ('string', value, line)               ('bool', value, line)
    ('null', line)
    ('list', elements, line)              ('dict', pairs, line)
    ('func', params, body, line)
    ('unary', op, operand, line)          (Op.ADD, left, right, line)
    ('if', cond, consequence, alternative, line)
    ('while', cond, body, line)
    ('func_call', callee, args, line)     ('index', target, index, line)
    ('dot', target, attribute, line)

:func:`format_node` prints a node back in canonical, fully parenthesised
form, which is what the tests use to check operator precedence.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum

from babylang.operations import Op


class Node(str, Enum):
    """
    Enumeration of AST node tags.
    """

    # Statements
    PROGRAM = "program"
    LET = "let"
    ASSIGN = "assign"
    RETURN = "return"
    EXPR_STMT = "expr_stmt"
    BLOCK = "block"

    # Literals
    IDENT = "ident"
    NUMBER = "number"
    STRING = "string"
    BOOL = "bool"
    NULL = "null"
    LIST = "list"
    DICT = "dict"
    FUNC = "func"

    # Operators and accessors
    UNARY = "unary"
    IF = "if"
    WHILE = "while"
    CALL = "func_call"
    INDEX = "index"
    DOT = "dot"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


def format_node(node) -> str:
    """
    Convert an AST node back into canonical source text.

    Args:
        node (tuple | None): Any node produced by the parser. ``None`` stands
            for an expression the parser could not build.

    Returns:
        str: The canonical form, with every prefix, infix, index and
        attribute expression wrapped in parentheses.
    """
    if node is None:
        return ''
    tag = node[0]
    if isinstance(tag, Op):
        return f"({format_node(node[1])} {tag.value} {format_node(node[2])})"

    match tag:
        case Node.PROGRAM | Node.BLOCK:
            return ''.join(format_node(stmt) for stmt in node[1])
        case Node.LET:
            _, name, op, value, _ = node
            return f"let {name} {op.value} {format_node(value)};"
        case Node.ASSIGN:
            _, name, op, value, _ = node
            return f"{name} {op.value} {format_node(value)};"
        case Node.RETURN:
            return f"return {format_node(node[1])};"
        case Node.EXPR_STMT:
            return format_node(node[1])
        case Node.IDENT:
            return node[1]
        case Node.NUMBER:
            return str(node[1])
        case Node.STRING:
            return f'"{node[1]}"'
        case Node.BOOL:
            return 'true' if node[1] else 'false'
        case Node.NULL:
            return 'null'
        case Node.LIST:
            return '[' + ', '.join(format_node(e) for e in node[1]) + ']'
        case Node.DICT:
            return '{' + ', '.join(
                f"{format_node(k)}: {format_node(v)}" for k, v in node[1]
            ) + '}'
        case Node.FUNC:
            _, params, body, _ = node
            return f"fun({', '.join(params)}) {format_node(body)}"
        case Node.UNARY:
            return f"({node[1].value}{format_node(node[2])})"
        case Node.IF:
            _, cond, consequence, alternative, _ = node
            text = f"if{format_node(cond)} {format_node(consequence)}"
            if alternative is not None:
                text += f" else {format_node(alternative)}"
            return text
        case Node.WHILE:
            _, cond, body, _ = node
            return f"while{format_node(cond)} {format_node(body)}"
        case Node.CALL:
            _, callee, args, _ = node
            return f"{format_node(callee)}({', '.join(format_node(a) for a in args)})"
        case Node.INDEX:
            return f"({format_node(node[1])}[{format_node(node[2])}])"
        case Node.DOT:
            return f"({format_node(node[1])}.{format_node(node[2])})"
        case _:
            name = tag if isinstance(tag, str) else repr(tag)
            return f"<node {name}>"


__all__ = ["Node", "format_node"]
