"""Baby language.

A small dynamically typed scripting language: a regex-driven lexer, a Pratt
parser producing tuple AST nodes, and a tree-walk interpreter over a chain
of mutable lexical scopes.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from babylang.exceptions import ParseException, ScriptLoadException
from babylang.interpreter import Interpreter
from babylang.lexer import Lexer, Token, tokenize
from babylang.parser import Parser

__version__ = "0.1.0"

__all__ = [
    "Interpreter",
    "Lexer",
    "ParseException",
    "Parser",
    "ScriptLoadException",
    "Token",
    "tokenize",
]
