"""Lexical environments for the Baby language.

An :class:`Environment` is one scope: a mapping from names to values plus an
optional link to the enclosing scope. Lookups walk outward until the name is
found or the chain runs out. A new scope is created for every function call,
enclosing the scope the function was defined in; ``if`` and ``while`` bodies
run directly in the surrounding scope.

Scopes are shared by reference. A closure keeps its defining scope alive
after the call that created it has returned, and several closures may hold
the same scope, so a write through one is seen by all of them.

Two ways of writing a name are supported:

- :meth:`Environment.bind` (``=&``) points the name, in the current scope,
  at the exact object given. Two names bound this way alias one object.
- :meth:`Environment.assign` (``=`` and ``=*``, and first-time ``let``)
  overwrites the object the name already refers to, wherever in the chain
  that is, so every alias sees the new contents. A name not yet bound
  anywhere gets a fresh copy of the value in the current scope.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from babylang.objects import BabyObject, Error, MUTABLE_TYPES


class Environment:
    """A single scope in the lexical scope chain."""

    def __init__(self, outer: Environment | None = None):
        """
        Initialize an empty scope.

        Parameters:
            outer (Environment | None): The enclosing scope, or ``None`` for
                the root scope.
        """
        self.store: dict[str, BabyObject] = {}
        self.outer = outer

    def enclose(self) -> Environment:
        """Return a new empty scope whose parent is this one."""
        return Environment(self)

    def resolve(self, name: str) -> Environment | None:
        """
        Return the nearest scope that binds ``name``, or ``None``.
        """
        scope = self
        while scope is not None:
            if name in scope.store:
                return scope
            scope = scope.outer
        return None

    def get(self, name: str) -> BabyObject | None:
        """
        Look ``name`` up through the scope chain.

        Returns:
            BabyObject | None: The bound value, or ``None`` if unbound.
        """
        scope = self.resolve(name)
        if scope is None:
            return None
        return scope.store[name]

    def bind(self, name: str, value: BabyObject) -> None:
        """
        Bind ``name`` in this scope to ``value`` itself, replacing any
        binding this scope already had.
        """
        self.store[name] = value

    def assign(self, name: str, value: BabyObject) -> Error | None:
        """
        Write ``value`` to ``name`` with copy-or-mutate semantics.

        Parameters:
            name (str): The name being written.
            value (BabyObject): The new value.

        Returns:
            Error | None: An error if ``name`` already holds a value of a
            different type; the binding is left untouched in that case.
        """
        scope = self.resolve(name)
        if scope is None:
            self.store[name] = value.copy()
            return None

        existing = scope.store[name]
        if existing.type != value.type:
            return Error(
                f"type mismatch: cannot assign {value.type} to '{name}' ({existing.type})"
            )
        if existing.type in MUTABLE_TYPES:
            if existing is not value:
                existing.overwrite(value)
        else:
            # Booleans and null are shared singletons; never overwrite them.
            scope.store[name] = value
        return None

    def __repr__(self) -> str:
        depth = 0
        scope = self.outer
        while scope is not None:
            depth += 1
            scope = scope.outer
        return f"Environment(names={sorted(self.store)}, depth={depth})"
