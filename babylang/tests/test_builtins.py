"""
Tests for the built-in functions.
"""
import pytest

from babylang.builtins import BUILTINS
from babylang.objects import FALSE, NULL, TRUE, Error
from babylang.tests.utils import inspect_source, run_source


@pytest.mark.parametrize("source, expected", [
    ('len("")', "0"),
    ('len("four")', "4"),
    ("len([1, 2, 3])", "3"),
    ("head([1, 2, 3])", "1"),
    ("tail([1, 2, 3])", "3"),
    ("rest([1, 2, 3])", "[2, 3]"),
    ("rest(rest(rest([1, 2, 3])))", "[]"),
    ('head("abc")', "a"),
    ('tail("abc")', "c"),
    ('rest("abc")', "bc"),
    ("get([1, 2, 3], 1)", "2"),
    ("insert([1, 2, 3], 1, 9)", "[1, 9, 3]"),
    ("append([1], 2)", "[1, 2]"),
    ("append([], 1, 2, 3)", "[1, 2, 3]"),
])
def test_builtin_results(source, expected):
    """
    Test the result of each built-in on valid input.
    """
    assert inspect_source(source) == expected


@pytest.mark.parametrize("source", ["head([])", "tail([])", "rest([])", 'rest("")'])
def test_empty_inputs_give_null(source):
    """
    Test built-ins that have nothing to return on empty input.
    """
    assert run_source(source) is NULL


@pytest.mark.parametrize("source, message", [
    ("len(1, 2)", "wrong number of arguments to `len`: got=2, want=1"),
    ("len(5)", "argument to `len` not supported, got INTEGER"),
    ("head(1)", "argument to `head` not supported, got INTEGER"),
    ("rest()", "wrong number of arguments to `rest`: got=0, want=1"),
    ("get([1, 2, 3], 3)", "index out of range in `get`: 3 (length 3)"),
    ("get([1, 2, 3], -1)", "index out of range in `get`: -1 (length 3)"),
    ('get([1], "0")', "index to `get` must be INTEGER, got STRING"),
    ("insert([1], 5, 2)", "index out of range in `insert`: 5 (length 1)"),
    ("append([1])", "wrong number of arguments to `append`: got=1, want=2 or more"),
    ("append(1, 2)", "argument to `append` not supported, got INTEGER"),
    ("isEmpty(1)", "argument to `isEmpty` not supported, got INTEGER"),
    ("doWhile(1)", "argument to `doWhile` not supported, got INTEGER"),
    ("doWhile(fun(x) { false })", "function passed to `doWhile` must take no arguments, takes 1"),
])
def test_builtin_misuse_is_an_error(source, message):
    """
    Test that wrong arity or argument types give error values.
    """
    result = run_source(source)
    assert isinstance(result, Error)
    assert result.message == message


def test_array_builtins_do_not_modify_their_argument():
    """
    Test that insert and append return new arrays.
    """
    source = (
        "let a = [1, 2];\n"
        "let b = insert(a, 0, 5);\n"
        "let c = append(a, 3);\n"
        "[a, b, c]\n"
    )
    assert inspect_source(source) == "[[1, 2], [5, 2], [1, 2, 3]]"


def test_is_empty():
    """
    Test isEmpty on strings, arrays and hashes.
    """
    assert run_source('isEmpty("")') is TRUE
    assert run_source("isEmpty([1])") is FALSE
    assert run_source("isEmpty({})") is TRUE
    assert run_source('isEmpty({"k": 1})') is FALSE


def test_do_while_runs_until_false():
    """
    Test that doWhile calls its function until it returns false.
    """
    source = (
        "let i = 0;\n"
        "let result = doWhile(fun() { i = i + 1; i < 3 });\n"
        "[i, result]\n"
    )
    assert inspect_source(source) == "[3, null]"


def test_do_while_propagates_errors():
    """
    Test that an error raised by the loop body stops doWhile.
    """
    assert inspect_source("doWhile(fun() { nope })") == "ERROR: identifier not found: nope"


def test_print_writes_each_argument(capsys):
    """
    Test print output and its null result.
    """
    result = run_source('print("hello", 1, [1, 2], {"a": true}, null)')
    assert result is NULL
    assert capsys.readouterr().out.splitlines() == ["hello", "1", "[1, 2]", "{a: true}", "null"]


def test_builtins_can_be_shadowed_and_passed_around():
    """
    Test that built-ins are ordinary values found after user bindings.
    """
    assert inspect_source("let len = 5; len") == "5"
    assert inspect_source("let f = len; f([1, 2])") == "2"
    assert inspect_source("len") == "builtin function len"


def test_builtin_table_is_read_only():
    """
    Test that the built-in table cannot be modified.
    """
    with pytest.raises(TypeError):
        BUILTINS['len'] = None  # type: ignore[index]
