"""Debug rendering of tokens and syntax trees.

Used by the ``tokenize`` and ``parse`` commands and by the ``LOXDEBUG`` dump.
Tokens render one per line as ``TYPE lexeme literal``; trees render in a
parenthesized prefix form, e.g. ``(+ 1.0 (group (* 2.0 3.0)))``.


File: printer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterable

from loxlang.nodes import (
    Assign,
    Binary,
    Block,
    Expr,
    ExpressionStmt,
    Grouping,
    Literal,
    PrintStmt,
    Stmt,
    Ternary,
    Unary,
    VarDecl,
    VariableRef,
)
from loxlang.tokens import Token, TokenType
from loxlang.values import format_number, stringify


def format_token(token: Token) -> str:
    """
    Render a token as ``TYPE lexeme literal``.

    String lexemes are shown with their quotes restored and a missing
    literal is shown as ``null``.
    """
    if token.type == TokenType.STRING:
        return f'STRING "{token.lexeme}" {token.literal}'
    if token.type == TokenType.NUMBER:
        return f"NUMBER {token.lexeme} {format_number(token.literal)}"
    return f"{token.type.name} {token.lexeme} null"


def format_tokens(tokens: Iterable[Token]) -> str:
    return "\n".join(format_token(token) for token in tokens)


def format_expr(expr: Expr) -> str:
    """
    Convert an expression back to a parenthesized string.
    """
    match expr:
        case Literal(value):
            return stringify(value)
        case Grouping(inner):
            return _parenthesize("group", inner)
        case Unary(operator, right):
            return _parenthesize(operator.lexeme, right)
        case Binary(left, operator, right):
            return _parenthesize(operator.lexeme, left, right)
        case Ternary(condition, _, then_branch, else_branch):
            return _parenthesize("?:", condition, then_branch, else_branch)
        case VariableRef(name):
            return name.lexeme
        case Assign(name, value):
            return _parenthesize(f"= {name.lexeme}", value)
    raise TypeError(f"Invalid expression node: {expr!r}")


def format_stmt(stmt: Stmt) -> str:
    """
    Convert a statement back to a parenthesized string.
    """
    match stmt:
        case ExpressionStmt(expression):
            return _parenthesize(";", expression)
        case PrintStmt(expression):
            return _parenthesize("print", expression)
        case VarDecl(name, None):
            return f"(var {name.lexeme})"
        case VarDecl(name, initializer):
            return _parenthesize(f"var {name.lexeme} =", initializer)
        case Block(statements):
            inner = " ".join(format_stmt(child) for child in statements)
            return f"(block {inner})" if inner else "(block)"
    raise TypeError(f"Unknown statement type: {type(stmt).__name__}")


def format_program(statements: Iterable[Stmt]) -> str:
    return "\n".join(format_stmt(stmt) for stmt in statements)


def _parenthesize(name: str, *exprs: Expr) -> str:
    parts = [name, *(format_expr(expr) for expr in exprs)]
    return f"({' '.join(parts)})"
