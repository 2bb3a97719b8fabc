"""Lexer for Lox.

The scanner performs a single left-to-right pass over the source text, making
one character-class decision at a time. Each recognised lexeme yields a
:class:`~loxlang.tokens.Token` containing its type, lexeme, literal payload and
source line number.

Two-character operators (``!=``, ``==``, ``<=``, ``>=``) are recognised with one
character of lookahead. Comment text beginning with ``//`` and whitespace are
skipped, with newlines advancing the line counter so line numbers remain
accurate.

Errors never stop the scan. An unexpected character or an unterminated string
is recorded as a :class:`~loxlang.exceptions.Diagnostic` and scanning resumes
with the next character, so a single pass reports every lexical error.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.exceptions import Diagnostic, DiagnosticKind
from loxlang.tokens import KEYWORDS, LiteralValue, Token, TokenType

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
    '?': TokenType.QUESTION,
    ':': TokenType.COLON,
}

# first char -> (type when followed by '=', type otherwise)
EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    '!': (TokenType.BANG_EQUAL, TokenType.BANG),
    '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    '<': (TokenType.LESS_EQUAL, TokenType.LESS),
    '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

WHITESPACE = frozenset(' \r\t')


def is_digit(char: str) -> bool:
    """Return ``True`` for an ASCII decimal digit."""
    return '0' <= char <= '9'


def is_alpha(char: str) -> bool:
    """Return ``True`` for a character that may start an identifier."""
    return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'


def is_alphanumeric(char: str) -> bool:
    """Return ``True`` for a character that may continue an identifier."""
    return is_alpha(char) or is_digit(char)


class Scanner:
    """
    Single-use scanner over one source buffer.
    """
    def __init__(self, source: str):
        """
        Initialize the scanner.

        Parameters:
            source (str): The source code to tokenize.
        """
        self.source = source
        self.tokens: list[Token] = []
        self.diagnostics: list[Diagnostic] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> tuple[list[Token], list[Diagnostic]]:
        """
        Scan the whole buffer.

        Returns:
            list[Token]: The tokens, always terminated by one ``EOF`` token.
            list[Diagnostic]: Lexical errors in source order.
        """
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens, self.diagnostics

    def scan_token(self) -> None:
        """
        Scan a single lexeme starting at ``self.start``.
        """
        char = self.advance()

        if char in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            matched, single = EQUAL_SUFFIX_TOKENS[char]
            self.add_token(matched if self.match('=') else single)
        elif char == '/':
            if self.match('/'):
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == '\n':
            self.line += 1
        elif char == '"':
            self.string()
        elif is_digit(char):
            self.number()
        elif is_alpha(char):
            self.identifier()
        else:
            self.error(f"Unexpected character: {char}")

    def string(self) -> None:
        """
        Scan a string literal; the opening quote is already consumed.
        """
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == '\n':
                self.line += 1
            self.advance()

        if self.is_at_end():
            self.error("Unterminated string.", at_end=True)
            return

        # closing quote
        self.advance()
        value = self.source[self.start + 1:self.current - 1]
        self.tokens.append(Token(TokenType.STRING, value, value, self.line))

    def number(self) -> None:
        """
        Scan a number literal; the first digit is already consumed.
        """
        while is_digit(self.peek()):
            self.advance()

        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()

        lexeme = self.source[self.start:self.current]
        try:
            value = float(lexeme)
        except ValueError:
            self.error(f"Invalid number literal '{lexeme}'.")
            return
        self.add_token(TokenType.NUMBER, value)

    def identifier(self) -> None:
        """
        Scan an identifier or reserved word.
        """
        while is_alphanumeric(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def match(self, expected: str) -> bool:
        """
        Consume the next character only if it equals ``expected``.
        """
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def add_token(self, type_: TokenType, literal: LiteralValue = None) -> None:
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(type_, lexeme, literal, self.line))

    def error(self, message: str, at_end: bool = False) -> None:
        self.diagnostics.append(
            Diagnostic(self.line, message, DiagnosticKind.LEXICAL, at_end=at_end)
        )


def scan(source: str) -> tuple[list[Token], list[Diagnostic]]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances ending with ``EOF``.
        list[Diagnostic]: Lexical errors found during the pass.
    """
    return Scanner(source).scan_tokens()
