"""
Main parser entry point for the Baby language.

This module defines the `Parser` class, which drives an operator-precedence
(Pratt) parse over the token stream. The parser holds the current token and
one token of lookahead, pulled on demand from a
:class:`~babylang.lexer.Lexer`. Every token kind that can start an
expression has a prefix handler and every token kind that can continue one
has an infix handler; both tables are filled in from
`babylang.parser.expressions`. Statement forms live in
`babylang.parser.statements`.

Syntax errors never stop the parse. Each one is appended to
:attr:`Parser.errors` and the parser carries on, so a single pass reports
every problem in the source and still returns a (possibly partial) program.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Callable

from babylang.lexer import Lexer, Token, TOKEN_LITERALS
from babylang.nodes import Node

from . import expressions as _expr
from .expressions import Precedence, PRECEDENCES
from . import statements as _stmt


PrefixHandler = Callable[['Parser'], tuple | None]
InfixHandler = Callable[['Parser', tuple], tuple | None]


class Parser:
    """Baby language parser."""

    def __init__(self, lexer: Lexer, file: str = '<stdin>'):
        """
        Initialize the parser and prime the current and lookahead tokens.

        Parameters:
            lexer (Lexer): The token source.
            file (str): The name of the script, used in error messages.
        """
        self.lexer = lexer
        self.source_file = file
        self.errors: list[str] = []
        self.error_lines: list[int] = []

        self.prefix_handlers: dict[str, PrefixHandler] = {}
        self.infix_handlers: dict[str, InfixHandler] = {}
        for token_type, handler in _expr.PREFIX_HANDLERS.items():
            self.register_prefix(token_type, handler)
        for token_type, handler in _expr.INFIX_HANDLERS.items():
            self.register_infix(token_type, handler)

        self.curr_token = Token('EOF', '', 1)
        self.peek_token = Token('EOF', '', 1)
        self.advance()
        self.advance()

    def register_prefix(self, token_type: str, handler: PrefixHandler) -> None:
        """Register the handler for tokens that start an expression."""
        self.prefix_handlers[token_type] = handler

    def register_infix(self, token_type: str, handler: InfixHandler) -> None:
        """Register the handler for tokens that continue an expression."""
        self.infix_handlers[token_type] = handler

    # ------------------------------------------------------------------
    # Token navigation
    # ------------------------------------------------------------------

    def advance(self) -> None:
        """
        Shift the lookahead token into the current slot and pull a new one.
        """
        self.curr_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def curr_is(self, token_type: str) -> bool:
        return self.curr_token.type == token_type

    def peek_is(self, token_type: str) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: str) -> bool:
        """
        Advance if the lookahead token has the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            bool: ``True`` if the parser advanced. Otherwise an error is
            recorded and the parser stays where it is.
        """
        if self.peek_is(token_type):
            self.advance()
            return True
        self.peek_error(token_type)
        return False

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def curr_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.curr_token.type, Precedence.LOWEST)

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def error(self, message: str, line: int) -> None:
        """
        Record a syntax error.

        Parameters:
            message (str): A description of the problem, without location.
            line (int): The line the problem was found on.
        """
        self.errors.append(f"{message} on line {line}")
        self.error_lines.append(line)

    def peek_error(self, token_type: str) -> None:
        """Record an error for an unexpected lookahead token."""
        tok = self.peek_token
        expected = TOKEN_LITERALS.get(token_type, token_type)
        self.error(
            f"Expected token '{expected}' but got '{tok.value or TOKEN_LITERALS[tok.type]}' ({tok.type})",
            tok.line,
        )

    def no_prefix_error(self, tok: Token) -> None:
        """Record an error for a token that cannot start an expression."""
        if tok.type == 'ILLEGAL':
            self.error(f"Illegal token '{tok.value}'", tok.line)
            return
        literal = tok.value or TOKEN_LITERALS.get(tok.type, tok.type)
        self.error(f"No prefix parse function for '{literal}' ({tok.type})", tok.line)

    # ------------------------------------------------------------------
    # Expression wrappers
    # ------------------------------------------------------------------

    def expression(self, precedence: Precedence = Precedence.LOWEST) -> tuple | None:
        """
        Parse an expression whose operators bind tighter than ``precedence``.
        """
        return _expr.parse_expression(self, precedence)

    # ------------------------------------------------------------------
    # Statement wrappers
    # ------------------------------------------------------------------

    def statement(self) -> tuple | None:
        """
        Parse a single statement starting at the current token.
        """
        return _stmt.parse_statement(self)

    def block(self) -> tuple:
        """
        Parse a block of statements; the current token is the opening brace.
        """
        return _stmt.parse_block(self)

    def parse(self) -> tuple:
        """
        Parse the full input into a program node.

        Returns:
            tuple: ``('program', statements, line)``. Statements that could
            not be parsed are left out; see :attr:`errors`.
        """
        line = self.curr_token.line
        statements = []
        while not self.curr_is('EOF'):
            stmt = self.statement()
            if stmt is not None:
                statements.append(stmt)
            self.advance()
        return (Node.PROGRAM, tuple(statements), line)
