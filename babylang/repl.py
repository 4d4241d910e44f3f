"""Interactive shell for the Baby language.

Each line read from the input is either the path of a ``.baby`` script, in
which case the file's contents are run, or a line of Baby source, which is
run as is. Everything runs against one :class:`~babylang.interpreter.Interpreter`,
so bindings persist for the life of the session.

Syntax errors are printed tab-indented, one per line, and nothing is run.
Otherwise the printed form of the result is shown; statements that produce
no result (``let``, assignments) print nothing.

Setting ``BABYDEBUG`` in the environment dumps the tokens and the parsed
program before each evaluation.


File: repl.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
import re
import sys
from typing import IO

from babylang.exceptions import ParseException, ScriptLoadException
from babylang.interpreter import Interpreter
from babylang.lexer import tokenize
from babylang.nodes import format_node
from babylang.objects import BabyObject

PROMPT = '>> '
SCRIPT_EXTENSION = '.baby'
SCRIPT_PATTERN = re.compile(rf'^\S+{re.escape(SCRIPT_EXTENSION)}$')
EXIT_WORDS = frozenset({'exit', 'quit'})


def debug_print_tokens_ast(source: str, ast: tuple, out: IO[str]) -> None:
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n", file=out)
    print(tokenize(source), file=out)
    print("\nAST:\n", file=out)
    print(format_node(ast), file=out)
    print(" ", file=out)


def load_script(path: str) -> str:
    """
    Read a script file.

    Raises:
        ScriptLoadException: If the file is missing or unreadable.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptLoadException(path, e.strerror if isinstance(e, OSError) else str(e)) from e


def print_parse_errors(errors: list[str], out: IO[str]) -> None:
    for message in errors:
        print(f"\t{message}", file=out)


def evaluate_source(interpreter: Interpreter, source: str, out: IO[str]) -> BabyObject | None:
    """
    Parse and evaluate ``source``, dumping tokens and AST under ``BABYDEBUG``.

    Raises:
        ParseException: If the source has syntax errors.
    """
    ast = interpreter.parse(source)
    if os.environ.get('BABYDEBUG'):
        debug_print_tokens_ast(source, ast, out)
    return interpreter.execute(ast)


def handle_line(interpreter: Interpreter, line: str, out: IO[str]) -> None:
    """
    Run one line of shell input and print its outcome.

    Parameters:
        interpreter (Interpreter): The session interpreter.
        line (str): The input line, without its newline.
        out (IO[str]): Where results and errors are written.
    """
    text = line.strip()
    if not text:
        return
    try:
        source = load_script(text) if SCRIPT_PATTERN.match(text) else line
        result = evaluate_source(interpreter, source, out)
        if result is not None:
            print(result.inspect(), file=out)
    except ParseException as e:
        print_parse_errors(e.errors, out)
    except ScriptLoadException as e:
        print(e, file=out)
    except RecursionError:
        print("ERROR: maximum recursion depth exceeded", file=out)


def start(stdin: IO[str] | None = None, out: IO[str] | None = None) -> None:
    """
    Run the read-eval-print loop until end of input or an exit word.

    Parameters:
        stdin (IO[str] | None): Input stream; standard input when ``None``.
        out (IO[str] | None): Output stream; standard output when ``None``.
    """
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    interpreter = Interpreter('<stdin>', out)
    while True:
        print(PROMPT, end='', file=out, flush=True)
        line = stdin.readline()
        if not line:
            print(file=out)
            return
        if line.strip() in EXIT_WORDS:
            return
        handle_line(interpreter, line.rstrip('\r\n'), out)
