"""Runtime values for the Baby language.

Every value the interpreter produces is an instance of one of the classes in
this module. Each exposes a ``type`` tag and an ``inspect()`` method giving
its printed form. Integers, booleans and strings can also be used as hash
keys through ``hash_key()``, which returns a type-tagged 64-bit digest.

Booleans and null are canonical singletons (:data:`TRUE`, :data:`FALSE`,
:data:`NULL`); identity comparison against them is how truthiness is
decided. Integers, strings, arrays and hashes are allocated per
construction and are mutable in place: a copy-or-mutate assignment
overwrites the existing object, so every name aliasing it sees the change.

:class:`ReturnValue` and :class:`Error` are control markers. They carry a
result up through the tree walk and are never stored in a variable.


File: objects.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from reprlib import recursive_repr
from typing import TYPE_CHECKING, Callable, NamedTuple

from babylang.nodes import format_node

if TYPE_CHECKING:
    from babylang.environment import Environment
    from babylang.interpreter import Interpreter

MASK64 = (1 << 64) - 1
FNV64_OFFSET = 0xcbf29ce484222325
FNV64_PRIME = 0x100000001b3


class ObjectType(str, Enum):
    """
    Type tags of runtime values.
    """
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    NULL = "NULL"
    ARRAY = "ARRAY"
    HASH = "HASH"
    FUNCTION = "FUNCTION"
    BUILTIN = "BUILTIN"
    RETURN_VALUE = "RETURN_VALUE"
    ERROR = "ERROR"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


HASHABLE_TYPES = frozenset({ObjectType.INTEGER, ObjectType.BOOLEAN, ObjectType.STRING})

# Types whose instances are overwritten in place by copy-or-mutate assignment.
MUTABLE_TYPES = frozenset({
    ObjectType.INTEGER,
    ObjectType.STRING,
    ObjectType.ARRAY,
    ObjectType.HASH,
})


def wrap_int64(value: int) -> int:
    """Wrap ``value`` to a signed 64-bit two's complement integer."""
    value &= MASK64
    return value - (1 << 64) if value >> 63 else value


def fnv1a_64(text: str) -> int:
    """Return the 64-bit FNV-1a hash of ``text`` encoded as UTF-8."""
    digest = FNV64_OFFSET
    for byte in text.encode('utf-8'):
        digest ^= byte
        digest = (digest * FNV64_PRIME) & MASK64
    return digest


@dataclass(frozen=True)
class HashKey:
    """Type-tagged digest identifying a hash key."""

    type: ObjectType
    value: int


class HashPair(NamedTuple):
    """A key object and the value stored under it."""

    key: BabyObject
    value: BabyObject


class BabyObject:
    """Base class of every runtime value."""

    type: ObjectType

    def inspect(self) -> str:
        raise NotImplementedError

    def copy(self) -> BabyObject:
        """
        Return an independent copy of this value. Immutable values return
        themselves.
        """
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inspect()})"


class Integer(BabyObject):
    type = ObjectType.INTEGER

    def __init__(self, value: int):
        self.value = wrap_int64(value)

    def inspect(self) -> str:
        return str(self.value)

    def hash_key(self) -> HashKey:
        return HashKey(self.type, self.value & MASK64)

    def copy(self) -> Integer:
        return Integer(self.value)

    def overwrite(self, other: Integer) -> None:
        self.value = other.value


class Boolean(BabyObject):
    type = ObjectType.BOOLEAN

    def __init__(self, value: bool):
        self.value = value

    def inspect(self) -> str:
        return 'true' if self.value else 'false'

    def hash_key(self) -> HashKey:
        return HashKey(self.type, 1 if self.value else 0)


class String(BabyObject):
    type = ObjectType.STRING

    def __init__(self, value: str):
        self.value = value

    def inspect(self) -> str:
        return self.value

    def hash_key(self) -> HashKey:
        return HashKey(self.type, fnv1a_64(self.value))

    def copy(self) -> String:
        return String(self.value)

    def overwrite(self, other: String) -> None:
        self.value = other.value


class Null(BabyObject):
    type = ObjectType.NULL

    def inspect(self) -> str:
        return 'null'


class Array(BabyObject):
    type = ObjectType.ARRAY

    def __init__(self, elements: list[BabyObject]):
        self.elements = elements

    @recursive_repr("[...]")
    def inspect(self) -> str:
        return '[' + ', '.join(e.inspect() for e in self.elements) + ']'

    def copy(self) -> Array:
        return Array(list(self.elements))

    def overwrite(self, other: Array) -> None:
        self.elements = list(other.elements)


class Hash(BabyObject):
    type = ObjectType.HASH

    def __init__(self, pairs: dict[HashKey, HashPair]):
        self.pairs = pairs

    @recursive_repr("{...}")
    def inspect(self) -> str:
        return '{' + ', '.join(
            f"{pair.key.inspect()}: {pair.value.inspect()}" for pair in self.pairs.values()
        ) + '}'

    def copy(self) -> Hash:
        return Hash(dict(self.pairs))

    def overwrite(self, other: Hash) -> None:
        self.pairs = dict(other.pairs)


class Function(BabyObject):
    """
    A closure: parameter names, a body block and the environment that was
    active where the function literal was evaluated. The environment is
    shared, not copied, so later changes to it are visible to the body.
    """
    type = ObjectType.FUNCTION

    def __init__(self, params: tuple[str, ...], body: tuple, env: Environment):
        self.params = params
        self.body = body
        self.env = env

    def inspect(self) -> str:
        return f"fun({', '.join(self.params)}) {{ {format_node(self.body)} }}"


BuiltinFunction = Callable[['Interpreter', list[BabyObject]], BabyObject]


class BuiltIn(BabyObject):
    type = ObjectType.BUILTIN

    def __init__(self, name: str, fn: BuiltinFunction):
        self.name = name
        self.fn = fn

    def inspect(self) -> str:
        return f"builtin function {self.name}"


class ReturnValue(BabyObject):
    type = ObjectType.RETURN_VALUE

    def __init__(self, value: BabyObject):
        self.value = value

    def inspect(self) -> str:
        return self.value.inspect()


class Error(BabyObject):
    type = ObjectType.ERROR

    def __init__(self, message: str):
        self.message = message

    def inspect(self) -> str:
        return f"ERROR: {self.message}"


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool(value: bool) -> Boolean:
    """Return the canonical boolean singleton for ``value``."""
    return TRUE if value else FALSE


def is_truthy(obj: BabyObject) -> bool:
    """Null and ``false`` are falsy; every other value is truthy."""
    return obj is not NULL and obj is not FALSE


def is_error(obj: BabyObject | None) -> bool:
    return isinstance(obj, Error)


def is_signal(obj: BabyObject | None) -> bool:
    """
    Return ``True`` for the control markers that must stop evaluation of
    the enclosing construct and be passed upward unchanged.
    """
    return isinstance(obj, (Error, ReturnValue))


def is_hashable(obj: BabyObject) -> bool:
    return obj.type in HASHABLE_TYPES


def values_equal(
    left: BabyObject,
    right: BabyObject,
    _active: set[tuple[int, int]] | None = None,
) -> bool:
    """
    Compare the content two values represent.

    Values of different types are never equal. Arrays compare element by
    element and hashes by key set and stored values; functions and
    built-ins are equal only to themselves. A container that contains
    itself is compared structurally: a pair already being compared further
    up counts as equal.
    """
    if left is right:
        return True
    if left.type != right.type:
        return False
    match left:
        case Integer() | String() | Boolean():
            return left.value == right.value
        case Null():
            return True
        case Array() | Hash():
            if _active is None:
                _active = set()
            pair_id = (id(left), id(right))
            if pair_id in _active:
                return True
            _active.add(pair_id)
            try:
                return _containers_equal(left, right, _active)
            finally:
                _active.discard(pair_id)
        case _:
            return False


def _containers_equal(left, right, active: set[tuple[int, int]]) -> bool:
    if isinstance(left, Array):
        return len(left.elements) == len(right.elements) and all(
            values_equal(a, b, active) for a, b in zip(left.elements, right.elements)
        )
    return left.pairs.keys() == right.pairs.keys() and all(
        values_equal(pair.value, right.pairs[key].value, active)
        for key, pair in left.pairs.items()
    )
