"""Lexer for the Baby language.

The lexer scans the source one token at a time using a combined regular
expression of named groups. Each call to :meth:`Lexer.next_token` yields a
:class:`Token` containing its type, literal text and source line number.

Tokens cover literals (integers, strings, booleans, null), keywords (``let``,
``fun``, ``if`` …), operators and delimiters. Multi-character operators are
listed before their single-character prefixes so the longest spelling wins.
Comment text beginning with ``#`` is skipped. Characters the lexer does not
recognise, and strings missing their closing quote, are returned as
``ILLEGAL`` tokens; reporting them is left to the parser.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re


KEYWORDS: dict[str, str] = {
    'let': 'LET',
    'fun': 'FUNCTION',
    'if': 'IF',
    'else': 'ELSE',
    'while': 'WHILE',
    'return': 'RETURN',
    'true': 'TRUE',
    'false': 'FALSE',
    'null': 'NULL',
}

TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals
    ('INT',           r'\d+'),
    ('STRING',        r'"[^"]*"'),
    ('UNTERMINATED',  r'"[^"]*'),
    ('IDENT',         r'[A-Za-z_][A-Za-z0-9_]*'),

    # Identity / value comparison
    ('IDENTICAL',     r'=&='),
    ('NOT_IDENTICAL', r'!&='),
    ('EQUAL',         r'=\*='),
    ('NOT_EQUAL',     r'!\*='),
    ('EQ',            r'=='),
    ('NE',            r'!='),

    # Assignment
    ('ASSIGN_REF',    r'=&'),
    ('ASSIGN_VAL',    r'=\*'),
    ('ASSIGN',        r'='),

    # Relational
    ('LE',            r'<='),
    ('GE',            r'>='),
    ('LT',            r'<'),
    ('GT',            r'>'),

    # Arithmetic
    ('PLUS',          r'\+'),
    ('MINUS',         r'-'),
    ('ASTERISK',      r'\*'),
    ('SLASH',         r'/'),

    # Logical
    ('BANG',          r'!'),
    ('AND',           r'&'),
    ('OR',            r'\|'),

    # Delimiters
    ('DOT',           r'\.'),
    ('COMMA',         r','),
    ('SEMICOLON',     r';'),
    ('COLON',         r':'),
    ('LPAREN',        r'\('),
    ('RPAREN',        r'\)'),
    ('LBRACE',        r'\{'),
    ('RBRACE',        r'\}'),
    ('LBRACKET',      r'\['),
    ('RBRACKET',      r'\]'),

    # Miscellaneous
    ('COMMENT',       r'\#[^\n]*'),
    ('NEWLINE',       r'\r?\n'),
    ('SKIP',          r'[ \t\r]+'),
    ('MISMATCH',      r'.'),
]

# Token type -> literal spelling, used to phrase parser errors.
TOKEN_LITERALS: dict[str, str] = {
    name: pattern.replace('\\', '')
    for name, pattern in TOKEN_SPECIFICATION
    if name not in ('INT', 'STRING', 'UNTERMINATED', 'IDENT', 'COMMENT', 'NEWLINE', 'SKIP', 'MISMATCH')
}
TOKEN_LITERALS.update({kind: word for word, kind in KEYWORDS.items()})
TOKEN_LITERALS.update({
    'INT': 'integer',
    'STRING': 'string',
    'IDENT': 'identifier',
    'ILLEGAL': 'illegal',
    'EOF': 'end of input',
})

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


class Token:
    """
    Represents a lexical token with a type and literal value.
    """
    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (str): The literal text of the token.
            line (int): The source line the token starts on.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.line) == (other.type, other.value, other.line)


class Lexer:
    """
    Incremental scanner over a source string.
    """
    def __init__(self, code: str):
        """
        Initialize the lexer.

        Parameters:
            code (str): The source code to scan.
        """
        self.code = code
        self.position = 0
        self.line = 1

    def next_token(self) -> Token:
        """
        Return the next token and advance past it.

        Once the input is exhausted every further call returns an ``EOF``
        token.
        """
        while self.position < len(self.code):
            match_obj = TOKEN_REGEX.match(self.code, self.position)
            kind = match_obj.lastgroup
            value = match_obj.group()
            line = self.line
            self.position = match_obj.end()

            if kind == 'NEWLINE':
                self.line += 1
                continue
            if kind in ('SKIP', 'COMMENT'):
                continue

            if kind == 'STRING':
                self.line += value.count('\n')
                return Token('STRING', value[1:-1], line)
            if kind == 'UNTERMINATED':
                self.line += value.count('\n')
                return Token('ILLEGAL', value, line)
            if kind == 'IDENT':
                return Token(KEYWORDS.get(value, 'IDENT'), value, line)
            if kind == 'MISMATCH':
                return Token('ILLEGAL', value, line)
            return Token(kind, value, line)

        return Token('EOF', '', self.line)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: The tokens, always terminated by an ``EOF`` token.
    """
    lexer = Lexer(code)
    tokens = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.type == 'EOF':
            return tokens
