"""Shared definitions for operator identifiers.

This module centralizes the operator names used by the parser and
interpreter to label nodes in the abstract syntax tree. Each member's value
is the operator's canonical spelling, so a node can be printed back without
a second lookup table.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported operators.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Relational
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Identity / value comparison
    IDENTICAL = "=&="
    NOT_IDENTICAL = "!&="
    EQUAL = "=*="
    NOT_EQUAL = "!*="

    # Boolean
    AND = "&"
    OR = "|"
    NOT = "!"

    # Assignment
    ASSIGN = "="
    ASSIGN_REF = "=&"
    ASSIGN_VAL = "=*"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Token type -> operator, for every token that can continue an expression.
BINARY_OPS: dict[str, Op] = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'ASTERISK': Op.MUL,
    'SLASH': Op.DIV,
    'GT': Op.GT,
    'LT': Op.LT,
    'GE': Op.GE,
    'LE': Op.LE,
    'IDENTICAL': Op.IDENTICAL,
    'NOT_IDENTICAL': Op.NOT_IDENTICAL,
    'EQUAL': Op.EQUAL,
    'NOT_EQUAL': Op.NOT_EQUAL,
    # `==` and `!=` are spellings of value equality.
    'EQ': Op.EQUAL,
    'NE': Op.NOT_EQUAL,
    'AND': Op.AND,
    'OR': Op.OR,
}

UNARY_OPS: dict[str, Op] = {
    'BANG': Op.NOT,
    'MINUS': Op.SUB,
}

ASSIGN_OPS: dict[str, Op] = {
    'ASSIGN': Op.ASSIGN,
    'ASSIGN_REF': Op.ASSIGN_REF,
    'ASSIGN_VAL': Op.ASSIGN_VAL,
}


__all__ = ["Op", "BINARY_OPS", "UNARY_OPS", "ASSIGN_OPS"]
