"""Token definitions for Lox.

Every stage of the pipeline shares this alphabet: the scanner produces
:class:`Token` instances, the parser consumes them and the AST keeps hold of
operator and name tokens so that runtime errors can report a source line.

``TokenType`` members carry the text they are scanned from (or a class name for
literals), mirroring how the lexeme of punctuation and keywords is fixed.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TokenType(str, Enum):
    """
    Enumeration of token types.
    """

    # Single-character tokens
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"
    QUESTION = "?"
    COLON = ":"

    # One or two character tokens
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the member name, as used in token dumps.
        """
        return self.name


KEYWORDS: dict[str, TokenType] = {
    kind.value: kind
    for kind in (
        TokenType.AND,
        TokenType.CLASS,
        TokenType.ELSE,
        TokenType.FALSE,
        TokenType.FUN,
        TokenType.FOR,
        TokenType.IF,
        TokenType.NIL,
        TokenType.OR,
        TokenType.PRINT,
        TokenType.RETURN,
        TokenType.SUPER,
        TokenType.THIS,
        TokenType.TRUE,
        TokenType.VAR,
        TokenType.WHILE,
    )
}


LiteralValue = Optional[Union[float, str]]


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, lexeme, literal and line.
    """
    type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"


__all__ = ["KEYWORDS", "LiteralValue", "Token", "TokenType"]
