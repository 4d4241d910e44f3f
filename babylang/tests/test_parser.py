"""
Tests for the Baby parser.
"""
import pytest

from babylang.nodes import Node
from babylang.operations import Op
from babylang.tests.utils import parse_source, parse_with_errors, reprint


def test_let_statement_node():
    """
    Test the node shape of a let binding.
    """
    program = parse_source("let x = 5;")
    assert program[0] == Node.PROGRAM
    assert program[1] == ((Node.LET, 'x', Op.ASSIGN, (Node.NUMBER, 5, 1), 1),)


def test_assignment_operators():
    """
    Test that bare assignments record which assignment operator was used.
    """
    program = parse_source("a = 1; b =& a; c =* b;")
    assert [(stmt[0], stmt[1], stmt[2]) for stmt in program[1]] == [
        (Node.ASSIGN, 'a', Op.ASSIGN),
        (Node.ASSIGN, 'b', Op.ASSIGN_REF),
        (Node.ASSIGN, 'c', Op.ASSIGN_VAL),
    ]


@pytest.mark.parametrize("source, expected", [
    ("-a * b", "((-a) * b)"),
    ("a + b * c + d / e - f", "(((a + (b * c)) + (d / e)) - f)"),
    ("!-a", "(!(-a))"),
    ("a + b + c", "((a + b) + c)"),
    ("a * b / c", "((a * b) / c)"),
    ("5 > 4 =*= 3 < 4", "((5 > 4) =*= (3 < 4))"),
    ("a == b != c", "((a =*= b) !*= c)"),
    ("a =&= b !&= c", "((a =&= b) !&= c)"),
    ("a & b == c | d", "((a & (b =*= c)) | d)"),
    ("1 + (2 + 3) + 4", "((1 + (2 + 3)) + 4)"),
    ("-(5 + 5)", "(-(5 + 5))"),
    ("a * [1, 2, 3, 4][b * c] * d", "((a * ([1, 2, 3, 4][(b * c)])) * d)"),
    ("add(a * b[2], b[1], 2 * [1, 2][1])", "add((a * (b[2])), (b[1]), (2 * ([1, 2][1])))"),
    ("-a[0]", "(-(a[0]))"),
    ("-h.k", "(-(h.k))"),
    ("h.a.b", "((h.a).b)"),
    ("h.k[0]", "((h.k)[0])"),
    ("f(x) * 2", "(f(x) * 2)"),
    ("a + b <= c * d", "((a + b) <= (c * d))"),
])
def test_operator_precedence(source, expected):
    """
    Test the canonical reprint of expressions with mixed precedence.
    """
    assert reprint(source) == expected


def test_literals_reprint():
    """
    Test reprint of literal forms.
    """
    assert reprint('"hi"') == '"hi"'
    assert reprint("true") == "true"
    assert reprint("null") == "null"
    assert reprint('{"a": 1, 2: b}') == '{"a": 1, 2: b}'
    assert reprint("[]") == "[]"
    assert reprint("{}") == "{}"


def test_function_literal():
    """
    Test function literal parameters and body.
    """
    program = parse_source("fun(x, y) { x + y; }")
    func = program[1][0][1]
    assert func[0] == Node.FUNC
    assert func[1] == ('x', 'y')
    assert func[2][0] == Node.BLOCK
    assert reprint("fun(x, y) { x + y; }") == "fun(x, y) (x + y)"
    assert reprint("fun() { }") == "fun() "


def test_if_else_and_while():
    """
    Test conditional and loop expressions.
    """
    program = parse_source("if (x < y) { x } else { y }")
    node = program[1][0][1]
    assert node[0] == Node.IF
    assert node[3] is not None
    assert reprint("if (x < y) { x }") == "if(x < y) x"
    assert reprint("while (i < 3) { i = i + 1; }") == "while(i < 3) i = (i + 1);"


def test_return_statements():
    """
    Test return with a value and a bare return.
    """
    assert reprint("return 5;") == "return 5;"
    assert reprint("return;") == "return null;"


def test_semicolon_optional_before_closing_brace_and_end_of_input():
    """
    Test that the final statement of a block or program may omit its semicolon.
    """
    assert reprint("let x = 1") == "let x = 1;"
    assert reprint("fun() { let y = 2 }") == "fun() let y = 2;"


def test_missing_semicolon_between_statements_is_an_error():
    """
    Test that two bindings on one line need a separating semicolon.
    """
    _, errors = parse_with_errors("let x = 5 let y = 6;")
    assert errors == ["Expected token ';' but got 'let' (LET) on line 1"]


def test_multiple_errors_are_collected():
    """
    Test that parsing continues after errors and returns a program.
    """
    program, errors = parse_with_errors("let = 5; let x 5; let y = 10;")
    assert errors == [
        "Expected token 'identifier' but got '=' (ASSIGN) on line 1",
        "Expected token '=' but got '5' (INT) on line 1",
    ]
    assert program[0] == Node.PROGRAM
    assert [stmt[1] for stmt in program[1]] == ['y']


def test_error_messages():
    """
    Test the wording of prefix, literal and illegal-token errors.
    """
    assert parse_with_errors("}")[1] == ["No prefix parse function for '}' (RBRACE) on line 1"]
    assert parse_with_errors("\n@")[1] == ["Illegal token '@' on line 2"]
    assert parse_with_errors("99999999999999999999")[1] == [
        "Could not parse '99999999999999999999' as integer on line 1"
    ]
    assert parse_with_errors("fun(a, a) { a }")[1][0] == "Duplicate parameter 'a' on line 1"


def test_unclosed_block_reports_opening_line():
    """
    Test that a block running to end of input is reported.
    """
    _, errors = parse_with_errors("if (x) {\n  1")
    assert errors == [
        "Expected token '}' to close block opened on line 1 but got end of input on line 2"
    ]


def test_error_lines_are_recorded():
    """
    Test that each error's line is kept alongside its message.
    """
    from babylang.lexer import Lexer
    from babylang.parser import Parser

    parser = Parser(Lexer("let x = 1;\nlet = 2;\n(3"))
    parser.parse()
    assert parser.error_lines == [2, 3]
