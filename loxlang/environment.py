"""Lexical environments.

An :class:`Environment` maps names to values and links to the scope that
encloses it. Scopes form a chain from the innermost block out to the global
scope, whose ``enclosing`` is ``None``. A child holds an ordinary reference to
its parent, so a parent stays alive for as long as any child can still reach
it. The link is fixed at construction.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Optional

from loxlang.exceptions import UndefinedVariableException
from loxlang.tokens import Token
from loxlang.values import Value


class Environment:
    """A scope of variable bindings."""

    __slots__ = ("_enclosing", "values")

    def __init__(self, enclosing: Optional['Environment'] = None):
        self._enclosing = enclosing
        self.values: dict[str, Value] = {}

    @property
    def enclosing(self) -> Optional['Environment']:
        return self._enclosing

    def define(self, name: str, value: Value) -> None:
        """
        Bind ``name`` in this scope, replacing any existing local binding.
        """
        self.values[name] = value

    def get(self, name: Token) -> Value:
        """
        Look ``name`` up in this scope, then in each enclosing scope.

        Raises:
            UndefinedVariableException: If no scope in the chain defines it.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                return env.values[name.lexeme]
            env = env._enclosing
        raise UndefinedVariableException(name)

    def assign(self, name: Token, value: Value) -> None:
        """
        Overwrite the nearest existing binding of ``name``.

        Raises:
            UndefinedVariableException: If no scope in the chain defines it.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                env.values[name.lexeme] = value
                return
            env = env._enclosing
        raise UndefinedVariableException(name)

    def __repr__(self) -> str:
        depth = 0
        env = self._enclosing
        while env is not None:
            depth += 1
            env = env._enclosing
        return f"Environment(depth={depth}, names={sorted(self.values)})"
