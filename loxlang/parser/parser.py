"""
Main parser entry point for Lox.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`loxlang.parser.expressions` and `loxlang.parser.statements`.

1. Parsing
Each grammar level is one function. A level parses its operands by calling the
next-higher precedence level, so the call chain encodes the precedence table:

    assignment -> ternary -> equality -> comparison -> term -> factor
    -> unary -> primary

2. Token Consumption
Tokens are consumed with `advance()`, `match()` and `consume()`, with
`peek()`/`previous()` giving single-token lookahead and lookbehind.

3. Error Recovery
A syntax error raises `ParseError`. The enclosing declaration catches it,
records the diagnostic and discards tokens up to the next statement boundary
so that one malformed statement produces one error.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Optional

from loxlang.exceptions import Diagnostic, DiagnosticKind, ParseError
from loxlang.nodes import Expr, Stmt
from loxlang.tokens import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt

# Reported when nesting exhausts the interpreter stack.
NESTING_TOO_DEEP = "Expression nesting too deep."

# Tokens that begin a statement; recovery stops in front of them.
STATEMENT_STARTS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


class Parser:
    """Lox parser."""

    def __init__(self, tokens: list[Token]):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): Token instances terminated by an ``EOF`` token.
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            line = tokens[-1].line if tokens else 1
            tokens = [*tokens, Token(TokenType.EOF, "", None, line)]
        self.tokens = tokens
        self.position = 0
        self.diagnostics: list[Diagnostic] = []

    # Token stream helpers
    def peek(self) -> Token:
        return self.tokens[self.position]

    def previous(self) -> Token:
        return self.tokens[self.position - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def check(self, token_type: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def advance(self) -> Token:
        if not self.is_at_end():
            self.position += 1
        return self.previous()

    def match(self, *token_types: TokenType) -> bool:
        """
        Consume the current token if it is any of ``token_types``.
        """
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        """
        Record a syntax error at ``token`` and return the exception to raise.

        Callers that can carry on (e.g. an invalid assignment target) simply
        drop the returned exception.
        """
        if token.type == TokenType.EOF:
            where = " at end"
        else:
            where = f" at '{token.lexeme}'"
        diagnostic = Diagnostic(
            token.line,
            message,
            DiagnosticKind.SYNTAX,
            where,
            at_end=token.type == TokenType.EOF,
        )
        self.diagnostics.append(diagnostic)
        return ParseError(diagnostic)

    def synchronize(self) -> None:
        """
        Discard tokens until the start of the next statement.
        """
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_STARTS:
                return
            self.advance()

    # Recovery points
    def declaration(self) -> Optional[Stmt]:
        """
        Parse a declaration, recovering from syntax errors.

        Returns:
            The statement, or ``None`` if it was malformed and skipped.
            Input nested deeper than the Python stack allows is reported as a
            syntax error instead of escaping as ``RecursionError``.
        """
        try:
            return _stmt.parse_declaration(self)
        except ParseError:
            self.synchronize()
            return None
        except RecursionError:
            self.error(self.peek(), NESTING_TOO_DEEP)
            self.synchronize()
            return None

    def parse(self) -> list[Stmt]:
        """
        Parse the full input into a list of statements.

        Returns:
            list: The well-formed top-level statements. Malformed ones are
            reported in ``self.diagnostics`` and left out.
        """
        statements = []
        while not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        return statements

    def parse_expression(self) -> Optional[Expr]:
        """
        Parse the input as a single expression followed by ``EOF``.

        Returns:
            The expression, or ``None`` if a syntax error was reported.
        """
        try:
            expr = _expr.parse_expression(self)
            if not self.is_at_end():
                raise self.error(self.peek(), "Expect end of expression.")
            return expr
        except ParseError:
            return None
        except RecursionError:
            self.error(self.peek(), NESTING_TOO_DEEP)
            return None


def parse_program(tokens: list[Token]) -> tuple[list[Stmt], list[Diagnostic]]:
    """
    Parse tokens into statements.

    Returns:
        list[Stmt]: The parsed statements.
        list[Diagnostic]: Syntax errors in the order they were found.
    """
    parser = Parser(tokens)
    statements = parser.parse()
    return statements, parser.diagnostics


def parse_expression(tokens: list[Token]) -> tuple[Optional[Expr], list[Diagnostic]]:
    """
    Parse tokens as a single expression, as used by ``lox evaluate``.
    """
    parser = Parser(tokens)
    expr = parser.parse_expression()
    return expr, parser.diagnostics
