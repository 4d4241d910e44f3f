"""Built-in functions for the Baby language.

The table is fixed when the module is imported and exposed read-only. Each
built-in receives the running interpreter and the evaluated arguments, and
reports misuse (wrong arity, wrong argument types) by returning an
:class:`~babylang.objects.Error` rather than raising.

Array built-ins never modify their argument; ``insert`` and ``append``
return new arrays.


File: builtins.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from babylang.objects import (
    Array,
    BabyObject,
    BuiltIn,
    Error,
    FALSE,
    Function,
    Hash,
    Integer,
    NULL,
    String,
    is_error,
    native_bool,
)

if TYPE_CHECKING:
    from babylang.interpreter import Interpreter


def _arity_error(name: str, got: int, want: int | str) -> Error:
    return Error(f"wrong number of arguments to `{name}`: got={got}, want={want}")


def _type_error(name: str, arg: BabyObject) -> Error:
    return Error(f"argument to `{name}` not supported, got {arg.type}")


def builtin_len(_interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """Length of a string or array."""
    if len(args) != 1:
        return _arity_error('len', len(args), 1)
    arg = args[0]
    if isinstance(arg, String):
        return Integer(len(arg.value))
    if isinstance(arg, Array):
        return Integer(len(arg.elements))
    return _type_error('len', arg)


def builtin_head(_interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """First element of an array or first character of a string."""
    if len(args) != 1:
        return _arity_error('head', len(args), 1)
    arg = args[0]
    if isinstance(arg, Array):
        return arg.elements[0] if arg.elements else NULL
    if isinstance(arg, String):
        return String(arg.value[0]) if arg.value else NULL
    return _type_error('head', arg)


def builtin_tail(_interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """Last element of an array or last character of a string."""
    if len(args) != 1:
        return _arity_error('tail', len(args), 1)
    arg = args[0]
    if isinstance(arg, Array):
        return arg.elements[-1] if arg.elements else NULL
    if isinstance(arg, String):
        return String(arg.value[-1]) if arg.value else NULL
    return _type_error('tail', arg)


def builtin_rest(_interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """Everything but the first element or character; null when empty."""
    if len(args) != 1:
        return _arity_error('rest', len(args), 1)
    arg = args[0]
    if isinstance(arg, Array):
        return Array(arg.elements[1:]) if arg.elements else NULL
    if isinstance(arg, String):
        return String(arg.value[1:]) if arg.value else NULL
    return _type_error('rest', arg)


def _checked_index(name: str, array: BabyObject, index: BabyObject) -> Error | None:
    if not isinstance(array, Array):
        return _type_error(name, array)
    if not isinstance(index, Integer):
        return Error(f"index to `{name}` must be INTEGER, got {index.type}")
    if not 0 <= index.value < len(array.elements):
        return Error(
            f"index out of range in `{name}`: {index.value} (length {len(array.elements)})"
        )
    return None


def builtin_get(_interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """Element of an array at an index; out of range is an error."""
    if len(args) != 2:
        return _arity_error('get', len(args), 2)
    array, index = args
    error = _checked_index('get', array, index)
    if error is not None:
        return error
    return array.elements[index.value]


def builtin_insert(_interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """New array with the element at an index replaced."""
    if len(args) != 3:
        return _arity_error('insert', len(args), 3)
    array, index, value = args
    error = _checked_index('insert', array, index)
    if error is not None:
        return error
    elements = list(array.elements)
    elements[index.value] = value
    return Array(elements)


def builtin_append(_interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """New array with one or more values added to the end."""
    if len(args) < 2:
        return _arity_error('append', len(args), '2 or more')
    array, *values = args
    if not isinstance(array, Array):
        return _type_error('append', array)
    return Array(array.elements + values)


def builtin_is_empty(_interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """Whether a string, array or hash has no contents."""
    if len(args) != 1:
        return _arity_error('isEmpty', len(args), 1)
    arg = args[0]
    if isinstance(arg, String):
        return native_bool(not arg.value)
    if isinstance(arg, Array):
        return native_bool(not arg.elements)
    if isinstance(arg, Hash):
        return native_bool(not arg.pairs)
    return _type_error('isEmpty', arg)


def builtin_do_while(interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """
    Call a zero-argument function repeatedly until it returns ``false``.

    The function runs in its own closure scope, so it can only drive the
    loop through variables it closed over.
    """
    if len(args) != 1:
        return _arity_error('doWhile', len(args), 1)
    fn = args[0]
    if not isinstance(fn, Function):
        return _type_error('doWhile', fn)
    if fn.params:
        return Error(f"function passed to `doWhile` must take no arguments, takes {len(fn.params)}")
    while True:
        result = interpreter.apply_function(fn, [])
        if is_error(result):
            return result
        if result is FALSE:
            return NULL


def builtin_print(interpreter: Interpreter, args: list[BabyObject]) -> BabyObject:
    """Write each argument's printed form on its own line."""
    for arg in args:
        print(arg.inspect(), file=interpreter.out)
    return NULL


BUILTINS = MappingProxyType({
    name: BuiltIn(name, fn)
    for name, fn in (
        ('len', builtin_len),
        ('head', builtin_head),
        ('tail', builtin_tail),
        ('rest', builtin_rest),
        ('get', builtin_get),
        ('insert', builtin_insert),
        ('append', builtin_append),
        ('isEmpty', builtin_is_empty),
        ('doWhile', builtin_do_while),
        ('print', builtin_print),
    )
})


__all__ = ["BUILTINS"]
