"""
Expression parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. Binary levels fold left so that
``1 - 2 - 3`` parses as ``(1 - 2) - 3``; assignment and the conditional
operator nest to the right.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.nodes import (
    Assign,
    Binary,
    Expr,
    Grouping,
    Literal,
    Ternary,
    Unary,
    VariableRef,
)
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


# ---- Lowest precedence ----

def parse_expression(parser: 'Parser') -> Expr:
    """
    Parse a full expression.

    Syntax:
        <assignment>
    """
    return parse_assignment(parser)


def parse_assignment(parser: 'Parser') -> Expr:
    """
    Parse an assignment expression.

    Syntax:
        <identifier> = <assignment> | <ternary>

    The left side is parsed as an ordinary expression first and only then
    checked to be a variable reference, so ``a = b = 1`` chains to the right.
    Any other target is reported without unwinding the parser.
    """
    expr = parse_ternary(parser)

    if parser.match(TokenType.EQUAL):
        equals = parser.previous()
        value = parse_assignment(parser)
        if isinstance(expr, VariableRef):
            return Assign(expr.name, value)
        parser.error(equals, "Invalid assignment target.")

    return expr


def parse_ternary(parser: 'Parser') -> Expr:
    """
    Parse a conditional expression.

    Syntax:
        <equality> ? <expression> : <ternary>
    """
    expr = parse_equality(parser)

    if parser.match(TokenType.QUESTION):
        question = parser.previous()
        then_branch = parse_assignment(parser)
        parser.consume(
            TokenType.COLON,
            "Expect ':' after then branch of conditional expression.",
        )
        else_branch = parse_ternary(parser)
        return Ternary(expr, question, then_branch, else_branch)

    return expr


def parse_equality(parser: 'Parser') -> Expr:
    """
    Syntax:
        <comparison> ( ( != | == ) <comparison> )*
    """
    expr = parse_comparison(parser)
    while parser.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_comparison(parser))
    return expr


def parse_comparison(parser: 'Parser') -> Expr:
    """
    Syntax:
        <term> ( ( > | >= | < | <= ) <term> )*
    """
    expr = parse_term(parser)
    while parser.match(
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
    ):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_term(parser))
    return expr


def parse_term(parser: 'Parser') -> Expr:
    """
    Syntax:
        <factor> ( ( - | + ) <factor> )*
    """
    expr = parse_factor(parser)
    while parser.match(TokenType.MINUS, TokenType.PLUS):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_factor(parser))
    return expr


def parse_factor(parser: 'Parser') -> Expr:
    """
    Syntax:
        <unary> ( ( / | * ) <unary> )*
    """
    expr = parse_unary(parser)
    while parser.match(TokenType.SLASH, TokenType.STAR):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_unary(parser))
    return expr


def parse_unary(parser: 'Parser') -> Expr:
    """
    Syntax:
        ( ! | - ) <unary> | <primary>
    """
    if parser.match(TokenType.BANG, TokenType.MINUS):
        operator = parser.previous()
        right = parse_unary(parser)
        return Unary(operator, right)
    return parse_primary(parser)


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Expr:
    """
    Parse a literal, variable reference, or parenthesized expression.

    Raises:
        ParseError: If no expression starts at the current token, or a
        group is missing its closing parenthesis.
    """
    if parser.match(TokenType.FALSE):
        return Literal(False)
    if parser.match(TokenType.TRUE):
        return Literal(True)
    if parser.match(TokenType.NIL):
        return Literal(None)

    if parser.match(TokenType.NUMBER, TokenType.STRING):
        return Literal(parser.previous().literal)

    if parser.match(TokenType.IDENTIFIER):
        return VariableRef(parser.previous())

    if parser.match(TokenType.LEFT_PAREN):
        expr = parse_assignment(parser)
        parser.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
        return Grouping(expr)

    raise parser.error(parser.peek(), "Expect expression.")
