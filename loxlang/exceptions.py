"""Errors.

Lexical and syntax errors are collected as :class:`Diagnostic` values and
handed back to the caller alongside the stage's output. Runtime errors are
raised as exceptions; the first one aborts interpretation.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum

from loxlang.tokens import Token


class DiagnosticKind(str, Enum):
    """
    Stage that produced a diagnostic.
    """
    LEXICAL = "lexical"
    SYNTAX = "syntax"


@dataclass(frozen=True)
class Diagnostic:
    """
    A reported error with a source line and message.

    ``where`` is the location hint printed after ``Error``, e.g. `` at 'x'``
    or `` at end``; scanner diagnostics leave it empty. ``at_end`` marks errors
    caused by input running out, which more input could fix.
    """
    line: int
    message: str
    kind: DiagnosticKind = DiagnosticKind.LEXICAL
    where: str = ""
    at_end: bool = False

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class ParseError(Exception):
    """
    Unwinds the parser to the enclosing declaration after a syntax error.
    """
    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(str(diagnostic))


class LoxSyntaxError(SyntaxError):
    """
    Raised by drivers that refuse to run a program with lexical or syntax
    errors. Carries every diagnostic that was reported.
    """
    def __init__(self, diagnostics: list[Diagnostic]):
        self.diagnostics = list(diagnostics)
        super().__init__("\n".join(str(diagnostic) for diagnostic in self.diagnostics))

    def __str__(self) -> str:
        return "\n".join(str(diagnostic) for diagnostic in self.diagnostics)


class LoxRuntimeError(RuntimeError):
    """
    Error raised while evaluating a program.
    """
    def __init__(self, token: Token, message: str):
        self.token = token
        self.line = token.line
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message}\n[line {self.line}]"


class UndefinedVariableException(LoxRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, name: Token):
        self.varname = name.lexeme
        super().__init__(name, f"Undefined variable '{name.lexeme}'.")
