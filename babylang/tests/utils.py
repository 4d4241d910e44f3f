"""
Utility functions shared across Baby Language tests.
"""
from pathlib import Path
import sys

from babylang.interpreter import Interpreter
from babylang.lexer import Lexer
from babylang.nodes import format_node
from babylang.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_with_errors(source: str):
    """
    Parse source code and return the AST together with the parser errors.
    """
    parser = Parser(Lexer(source), "<test>")
    program = parser.parse()
    return program, parser.errors


def parse_source(source: str):
    """
    Parse source code that is expected to be valid and return the AST.
    """
    program, errors = parse_with_errors(source)
    assert errors == [], errors
    return program


def reprint(source: str) -> str:
    """
    Parse source code and print it back in canonical form.
    """
    return format_node(parse_source(source))


def run_source(source: str, interpreter: Interpreter | None = None):
    """
    Evaluate source code and return the result object.
    """
    if interpreter is None:
        interpreter = Interpreter("<test>")
    return interpreter.run(source)


def inspect_source(source: str) -> str:
    """
    Evaluate source code and return the printed form of the result.
    """
    return run_source(source).inspect()
