"""Interpreter.

This is a tree-walk interpreter for the AST produced by
:class:`~babylang.parser.Parser`.

1. Execution Model
Nodes are evaluated top-down and recursively. :meth:`Interpreter.execute`
runs a program (or any statement) and :meth:`Interpreter.eval_expr`
dispatches on the node tag. Every node evaluates to a runtime object from
`babylang.objects`, or to ``None`` for statements that produce no result
(bindings, and node kinds the evaluator does not know).

2. Environment
Names live in an :class:`~babylang.environment.Environment` chain. The
interpreter owns one root scope for its whole lifetime, so successive calls
to :meth:`Interpreter.run` see each other's bindings. Each function call
gets a fresh scope enclosing the scope the function was defined in.
``if`` and ``while`` bodies run in the surrounding scope.

3. Control Flow
``return`` wraps its value in a :class:`~babylang.objects.ReturnValue`.
Blocks pass the wrapper up unchanged so it escapes nested blocks and
loops; a function call or the top-level program unwraps it.

4. Error Handling
Runtime problems (unknown names, bad operand types, wrong arity) are
:class:`~babylang.objects.Error` values, not exceptions. An error stops the
construct that produced it and is handed upward unchanged until it reaches
the caller of :meth:`Interpreter.execute`.

5. Evaluation Order
The right operand of a binary operator is evaluated before the left one.
Call arguments, array elements and hash pairs are evaluated left to right.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import IO

from babylang.builtins import BUILTINS
from babylang.environment import Environment
from babylang.exceptions import ParseException
from babylang.lexer import Lexer
from babylang.nodes import Node
from babylang.objects import (
    Array,
    BabyObject,
    Boolean,
    BuiltIn,
    Error,
    FALSE,
    Function,
    Hash,
    HashPair,
    Integer,
    NULL,
    Null,
    ReturnValue,
    String,
    TRUE,
    is_error,
    is_hashable,
    is_signal,
    is_truthy,
    native_bool,
    values_equal,
)
from babylang.operations import Op
from babylang.parser import Parser


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def eval_integer_infix(op: Op, left: Integer, right: Integer) -> BabyObject:
    """
    Apply an arithmetic or ordering operator to two integers.

    Arithmetic wraps to signed 64 bits and division truncates toward zero.
    """
    a, b = left.value, right.value
    match op:
        case Op.ADD:
            return Integer(a + b)
        case Op.SUB:
            return Integer(a - b)
        case Op.MUL:
            return Integer(a * b)
        case Op.DIV:
            if b == 0:
                return Error(f"division by zero: {a} / 0")
            return Integer(_truncating_div(a, b))
        case Op.LT:
            return native_bool(a < b)
        case Op.GT:
            return native_bool(a > b)
        case Op.LE:
            return native_bool(a <= b)
        case Op.GE:
            return native_bool(a >= b)
    return Error(f"unknown operator: {left.type} {op} {right.type}")


def eval_infix(op: Op, left: BabyObject, right: BabyObject) -> BabyObject:
    """
    Apply a binary operator to two evaluated operands.

    Parameters:
        op (Op): The operator.
        left (BabyObject): The left operand.
        right (BabyObject): The right operand.

    Returns:
        BabyObject: The result, or an Error for an unsupported combination.
    """
    match op:
        case Op.IDENTICAL:
            return native_bool(left is right)
        case Op.NOT_IDENTICAL:
            return native_bool(left is not right)
        case Op.EQUAL:
            return native_bool(values_equal(left, right))
        case Op.NOT_EQUAL:
            return native_bool(not values_equal(left, right))
        case Op.AND:
            return native_bool(left is TRUE and right is TRUE)
        case Op.OR:
            return native_bool(left is TRUE or right is TRUE)

    if isinstance(left, Integer) and isinstance(right, Integer):
        return eval_integer_infix(op, left, right)
    if isinstance(left, String) and isinstance(right, String) and op == Op.ADD:
        return String(left.value + right.value)
    if left.type != right.type:
        return Error(f"type mismatch: {left.type} {op} {right.type}")
    return Error(f"unknown operator: {left.type} {op} {right.type}")


def eval_unary(op: Op, operand: BabyObject) -> BabyObject:
    """
    Apply ``!`` or ``-`` to an evaluated operand.

    ``!`` inverts the truthiness of booleans and null and gives ``false``
    for anything else. ``-`` only applies to integers.
    """
    if op == Op.NOT:
        if isinstance(operand, (Boolean, Null)):
            return native_bool(not is_truthy(operand))
        return FALSE
    if op == Op.SUB and isinstance(operand, Integer):
        return Integer(-operand.value)
    return Error(f"unknown operator: {op}{operand.type}")


class Interpreter:
    """Tree-walk interpreter for Baby."""

    def __init__(self, file: str = '<stdin>', out: IO[str] | None = None):
        """
        Initialize the interpreter with an empty root scope.

        Parameters:
            file (str): Name of the source being run, used in parse errors.
            out (IO[str] | None): Stream ``print`` writes to; standard
                output when ``None``.
        """
        self.file = file
        self.out = out
        self.env = Environment()

    def parse(self, source: str) -> tuple:
        """
        Parse ``source`` into a program node.

        Raises:
            ParseException: If the source has syntax errors.
        """
        parser = Parser(Lexer(source), self.file)
        program = parser.parse()
        if parser.errors:
            raise ParseException(parser.errors, self.file)
        return program

    def run(self, source: str) -> BabyObject | None:
        """
        Parse and evaluate ``source`` in the interpreter's root scope.

        Returns:
            BabyObject | None: The program's result.

        Raises:
            ParseException: If the source has syntax errors. Nothing is
                evaluated in that case.
        """
        return self.execute(self.parse(source))

    def execute(self, node: tuple, env: Environment | None = None) -> BabyObject | None:
        """
        Evaluate a program or statement node.

        Parameters:
            node (tuple): The node to run.
            env (Environment | None): The scope to run in; the root scope
                when ``None``.

        Returns:
            BabyObject | None: The result. A top-level ``return`` is
            unwrapped; errors are returned as values.
        """
        return self.eval_expr(node, self.env if env is None else env)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def eval_expr(self, node: tuple, env: Environment) -> BabyObject | None:
        """
        Evaluate any AST node in ``env``.
        """
        tag = node[0]
        if isinstance(tag, Op):
            return self.eval_binary(node, env)

        match tag:
            case Node.PROGRAM:
                return self.eval_program(node, env)
            case Node.BLOCK:
                return self.eval_block(node, env)
            case Node.EXPR_STMT:
                return self.eval_expr(node[1], env)
            case Node.LET | Node.ASSIGN:
                return self.eval_binding(node, env)
            case Node.RETURN:
                value = self.eval_value(node[1], env)
                if is_signal(value):
                    return value
                return ReturnValue(value)
            case Node.IDENT:
                return self.eval_identifier(node, env)
            case Node.NUMBER:
                return Integer(node[1])
            case Node.STRING:
                return String(node[1])
            case Node.BOOL:
                return native_bool(node[1])
            case Node.NULL:
                return NULL
            case Node.LIST:
                elements = self.eval_values(node[1], env)
                if not isinstance(elements, list):
                    return elements
                return Array(elements)
            case Node.DICT:
                return self.eval_hash(node, env)
            case Node.FUNC:
                _, params, body, _ = node
                return Function(params, body, env)
            case Node.UNARY:
                _, op, operand_node, _ = node
                operand = self.eval_value(operand_node, env)
                if is_signal(operand):
                    return operand
                return eval_unary(op, operand)
            case Node.IF:
                return self.eval_if(node, env)
            case Node.WHILE:
                return self.eval_while(node, env)
            case Node.CALL:
                return self.eval_call(node, env)
            case Node.INDEX:
                return self.eval_index(node, env)
            case Node.DOT:
                return self.eval_dot(node, env)
            case _:
                return None

    def eval_value(self, node: tuple, env: Environment) -> BabyObject:
        """
        Evaluate an expression, treating "no result" as null.
        """
        value = self.eval_expr(node, env)
        return NULL if value is None else value

    def eval_values(self, nodes: tuple, env: Environment) -> list[BabyObject] | BabyObject:
        """
        Evaluate expressions left to right, stopping at the first signal.
        """
        values = []
        for item in nodes:
            value = self.eval_value(item, env)
            if is_signal(value):
                return value
            values.append(value)
        return values

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def eval_program(self, node: tuple, env: Environment) -> BabyObject | None:
        result = None
        for stmt in node[1]:
            result = self.eval_expr(stmt, env)
            if isinstance(result, ReturnValue):
                return result.value
            if is_error(result):
                return result
        return result

    def eval_block(self, node: tuple, env: Environment) -> BabyObject:
        """
        Run a block's statements in order. A ``return`` or an error stops
        the block and is passed on still wrapped.
        """
        result = None
        for stmt in node[1]:
            result = self.eval_expr(stmt, env)
            if is_signal(result):
                return result
        return NULL if result is None else result

    def eval_binding(self, node: tuple, env: Environment) -> Error | ReturnValue | None:
        """
        Evaluate a ``let`` or assignment.

        ``=&`` binds the name in the current scope to the value itself.
        ``=`` and ``=*`` write through to the existing binding, or create a
        copy in the current scope when the name is new.

        Returns:
            Error | ReturnValue | None: ``None`` on success.
        """
        _, name, op, value_node, _ = node
        value = self.eval_value(value_node, env)
        if is_signal(value):
            return value
        if op == Op.ASSIGN_REF:
            env.bind(name, value)
            return None
        return env.assign(name, value)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def eval_identifier(self, node: tuple, env: Environment) -> BabyObject:
        name = node[1]
        value = env.get(name)
        if value is not None:
            return value
        builtin = BUILTINS.get(name)
        if builtin is not None:
            return builtin
        return Error(f"identifier not found: {name}")

    def eval_binary(self, node: tuple, env: Environment) -> BabyObject:
        op, left_node, right_node, _ = node
        right = self.eval_value(right_node, env)
        if is_signal(right):
            return right
        left = self.eval_value(left_node, env)
        if is_signal(left):
            return left
        return eval_infix(op, left, right)

    def eval_hash(self, node: tuple, env: Environment) -> BabyObject:
        """
        Evaluate a hash literal. Keys are copied so later changes to the
        variable a key came from do not disturb the stored entry.
        """
        pairs = {}
        for key_node, value_node in node[1]:
            key = self.eval_value(key_node, env)
            if is_signal(key):
                return key
            if not is_hashable(key):
                return Error(f"unusable as hash key: {key.type}")
            value = self.eval_value(value_node, env)
            if is_signal(value):
                return value
            key = key.copy()
            pairs[key.hash_key()] = HashPair(key, value)
        return Hash(pairs)

    def eval_if(self, node: tuple, env: Environment) -> BabyObject:
        _, cond_node, consequence, alternative, _ = node
        condition = self.eval_value(cond_node, env)
        if is_signal(condition):
            return condition
        if is_truthy(condition):
            return self.eval_expr(consequence, env)
        if alternative is not None:
            return self.eval_expr(alternative, env)
        return NULL

    def eval_while(self, node: tuple, env: Environment) -> BabyObject:
        """
        Evaluate a loop. The result is the last body value, or null when
        the body never ran.
        """
        _, cond_node, body, _ = node
        result = NULL
        while True:
            condition = self.eval_value(cond_node, env)
            if is_signal(condition):
                return condition
            if not is_truthy(condition):
                return result
            result = self.eval_expr(body, env)
            if is_signal(result):
                return result

    def eval_call(self, node: tuple, env: Environment) -> BabyObject:
        _, callee_node, arg_nodes, _ = node
        fn = self.eval_value(callee_node, env)
        if is_signal(fn):
            return fn
        args = self.eval_values(arg_nodes, env)
        if not isinstance(args, list):
            return args
        return self.apply_function(fn, args)

    def apply_function(self, fn: BabyObject, args: list[BabyObject]) -> BabyObject:
        """
        Call a function or built-in with evaluated arguments.

        A user function runs in a new scope enclosing its defining scope,
        with each parameter bound to its argument object.

        Parameters:
            fn (BabyObject): The callee.
            args (list[BabyObject]): The arguments.

        Returns:
            BabyObject: The call's result with any ``return`` unwrapped.
        """
        if isinstance(fn, BuiltIn):
            return fn.fn(self, args)
        if not isinstance(fn, Function):
            return Error(f"not callable: {fn.type}")
        if len(args) != len(fn.params):
            return Error(
                f"wrong number of arguments: want={len(fn.params)}, got={len(args)}"
            )

        scope = fn.env.enclose()
        # Parameters alias their arguments: `=` on a parameter writes through
        # to the caller's object, while `=&` rebinds only the parameter.
        for name, arg in zip(fn.params, args):
            scope.bind(name, arg)
        result = self.eval_expr(fn.body, scope)
        if isinstance(result, ReturnValue):
            return result.value
        return result

    def eval_index(self, node: tuple, env: Environment) -> BabyObject:
        """
        Evaluate ``target[index]``. Only arrays with integer indices are
        supported; an index outside the array gives null.
        """
        _, target_node, index_node, _ = node
        target = self.eval_value(target_node, env)
        if is_signal(target):
            return target
        index = self.eval_value(index_node, env)
        if is_signal(index):
            return index
        if not (isinstance(target, Array) and isinstance(index, Integer)):
            return Error(f"index operator not supported: {target.type}[{index.type}]")
        if 0 <= index.value < len(target.elements):
            return target.elements[index.value]
        return NULL

    def eval_dot(self, node: tuple, env: Environment) -> BabyObject:
        """
        Evaluate ``target.attribute``: look the attribute's value up as a
        key of a hash. A missing key gives null.
        """
        _, target_node, attribute_node, _ = node
        target = self.eval_value(target_node, env)
        if is_signal(target):
            return target
        if not isinstance(target, Hash):
            return Error(f"attribute access not supported: {target.type}")
        key = self.eval_value(attribute_node, env)
        if is_signal(key):
            return key
        if not is_hashable(key):
            return Error(f"unusable as hash key: {key.type}")
        pair = target.pairs.get(key.hash_key())
        return NULL if pair is None else pair.value
