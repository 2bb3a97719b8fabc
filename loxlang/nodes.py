"""AST node definitions for Lox.

Expression and statement trees are closed sets of frozen dataclasses. Nodes
are built bottom-up by the parser and never mutated afterwards. Consumers
(the interpreter, the debug printer and the language server) walk them with a
single ``match`` over the node classes, so adding a new pass never requires
touching the node definitions.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Optional, Union

from loxlang.tokens import Token
from loxlang.values import Value


# ---- Expressions ----

@dataclass(frozen=True)
class Literal:
    value: Value


@dataclass(frozen=True)
class Grouping:
    expression: 'Expr'


@dataclass(frozen=True)
class Unary:
    operator: Token
    right: 'Expr'


@dataclass(frozen=True)
class Binary:
    left: 'Expr'
    operator: Token
    right: 'Expr'


@dataclass(frozen=True)
class Ternary:
    """``condition ? then_branch : else_branch``; ``question`` marks the line."""
    condition: 'Expr'
    question: Token
    then_branch: 'Expr'
    else_branch: 'Expr'


@dataclass(frozen=True)
class VariableRef:
    name: Token


@dataclass(frozen=True)
class Assign:
    name: Token
    value: 'Expr'


Expr = Union[Literal, Grouping, Unary, Binary, Ternary, VariableRef, Assign]


# ---- Statements ----

@dataclass(frozen=True)
class Block:
    statements: tuple['Stmt', ...]


@dataclass(frozen=True)
class ExpressionStmt:
    expression: Expr


@dataclass(frozen=True)
class PrintStmt:
    expression: Expr


@dataclass(frozen=True)
class VarDecl:
    name: Token
    initializer: Optional[Expr]


Stmt = Union[Block, ExpressionStmt, PrintStmt, VarDecl]


__all__ = [
    "Assign",
    "Binary",
    "Block",
    "Expr",
    "ExpressionStmt",
    "Grouping",
    "Literal",
    "PrintStmt",
    "Stmt",
    "Ternary",
    "Unary",
    "VarDecl",
    "VariableRef",
]
