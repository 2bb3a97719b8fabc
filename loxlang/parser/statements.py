"""Statement parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle declarations, blocks, ``print`` and expression statements.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.nodes import Block, ExpressionStmt, PrintStmt, Stmt, VarDecl
from loxlang.parser.expressions import parse_expression
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser') -> Stmt:
    """
    Parse a declaration.

    Syntax:
        var <identifier> ( = <expression> )? ;
        <statement>
    """
    if parser.match(TokenType.VAR):
        return parse_var_declaration(parser)
    return parse_statement(parser)


def parse_var_declaration(parser: 'Parser') -> Stmt:
    """
    Parse a ``var`` declaration; the keyword is already consumed.

    Returns:
        VarDecl: with ``initializer`` set to ``None`` when omitted.
    """
    name = parser.consume(TokenType.IDENTIFIER, "Expect variable name.")
    initializer = None
    if parser.match(TokenType.EQUAL):
        initializer = parse_expression(parser)
    parser.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
    return VarDecl(name, initializer)


def parse_statement(parser: 'Parser') -> Stmt:
    """
    Parse a single statement.

    Syntax:
        print <expression> ;
        { <declaration>* }
        <expression> ;
    """
    if parser.match(TokenType.PRINT):
        return parse_print_statement(parser)
    if parser.match(TokenType.LEFT_BRACE):
        return Block(tuple(parse_block(parser)))
    return parse_expression_statement(parser)


def parse_print_statement(parser: 'Parser') -> Stmt:
    value = parse_expression(parser)
    parser.consume(TokenType.SEMICOLON, "Expect ';' after value.")
    return PrintStmt(value)


def parse_expression_statement(parser: 'Parser') -> Stmt:
    expr = parse_expression(parser)
    parser.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
    return ExpressionStmt(expr)


def parse_block(parser: 'Parser') -> list[Stmt]:
    """
    Parse declarations up to the closing brace.

    A malformed declaration inside the block is reported and skipped by
    ``parser.declaration()``; a missing ``}`` unwinds to the declaration that
    opened the block.
    """
    statements = []
    while not parser.check(TokenType.RIGHT_BRACE) and not parser.is_at_end():
        stmt = parser.declaration()
        if stmt is not None:
            statements.append(stmt)
    parser.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
    return statements
